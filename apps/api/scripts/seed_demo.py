"""Seed database with demo survey data."""

import logging
from datetime import date, timedelta
from decimal import Decimal

from sqlalchemy.orm import Session

from apps.api.database import Base, engine, get_db_context
from apps.api.models import Customer, SurveyResponse
from apps.api.repositories import CustomerRepository, SurveyResponseRepository

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

DEMO_SURVEYS = [
    {
        "customer_name": "Priya Nair",
        "location": "Downtown",
        "days_ago": 1,
        "ratings": ("Highly Satisfied", "Satisfied", "Highly Satisfied", "Satisfied", "Satisfied", "Highly Satisfied"),
        "overall_rating": Decimal("4.8"),
        "comments": "Great food and friendly staff.",
    },
    {
        "customer_name": "Tom Becker",
        "location": "Uptown",
        "days_ago": 3,
        "ratings": ("Satisfied", "Dissatisfied", "Neutral", "Satisfied", "Neutral", "Satisfied"),
        "overall_rating": Decimal("3.4"),
        "comments": "Service was slow during lunch.",
    },
    {
        "customer_name": "Ana Souza",
        "location": "Suburban",
        "days_ago": 4,
        "ratings": ("Neutral", "Highly Dissatisfied", "Dissatisfied", "Neutral", "Dissatisfied", "Neutral"),
        "overall_rating": Decimal("2.0"),
        "comments": None,
    },
    {
        "customer_name": "Kenji Watanabe",
        "location": "Downtown",
        "days_ago": 7,
        "ratings": ("Satisfied", "Satisfied", "Satisfied", "Highly Satisfied", "Neutral", "Satisfied"),
        "overall_rating": Decimal("4.2"),
        "comments": "Will come back.",
    },
]


def seed_demo_surveys(db: Session) -> int:
    """
    Insert demo customers with one survey response each.

    Skips seeding when customers already exist.

    Returns:
        Number of surveys inserted
    """
    customers = CustomerRepository(db)
    existing = customers.count()
    if existing > 0:
        logger.info(f"Customers already seeded ({existing} found)")
        return 0

    surveys = SurveyResponseRepository(db)
    today = date.today()
    for data in DEMO_SURVEYS:
        customer = customers.save(
            Customer(
                customer_name=data["customer_name"],
                location=data["location"],
                visit_date=today - timedelta(days=data["days_ago"]),
            )
        )
        food, speed, staff, clean, value, ambiance = data["ratings"]
        surveys.save(
            SurveyResponse(
                customer=customer,
                food_quality=food,
                service_speed=speed,
                staff_friendliness=staff,
                cleanliness=clean,
                value_for_money=value,
                ambiance=ambiance,
                overall_rating=data["overall_rating"],
                comments=data["comments"],
            )
        )

    logger.info(f"Seeded {len(DEMO_SURVEYS)} demo surveys")
    return len(DEMO_SURVEYS)


if __name__ == "__main__":
    logger.info("Starting demo data seed...")
    Base.metadata.create_all(bind=engine)

    with get_db_context() as db:
        seed_demo_surveys(db)

    with get_db_context() as db:
        total_customers = CustomerRepository(db).count()
        total_surveys = SurveyResponseRepository(db).count()

    logger.info(f"Total customers: {total_customers}")
    logger.info(f"Total survey responses: {total_surveys}")
