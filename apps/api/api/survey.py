"""Survey submission and listing endpoints."""

from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

import structlog
from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError
from sqlalchemy.orm import Session

from apps.api.database import get_db
from apps.api.models import RATING_ATTRIBUTES, Customer, SurveyResponse
from apps.api.repositories import CustomerRepository, SurveyResponseRepository
from packages.shared.satisfaction import ResponseRatings, summarize

logger = structlog.get_logger()
router = APIRouter()

SUBMITTED_MESSAGE = "Survey submitted successfully!"


class CamelModel(BaseModel):
    """Base schema exchanging camelCase JSON."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SurveyRequest(CamelModel):
    """Survey submission payload."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, str_strip_whitespace=True
    )

    customer_name: str = Field(max_length=100)
    location: str = Field(max_length=50)
    food_quality: str = Field(max_length=20)
    service_speed: str = Field(max_length=20)
    staff_friendliness: str = Field(max_length=20)
    cleanliness: str = Field(max_length=20)
    value_for_money: str = Field(max_length=20)
    ambiance: str = Field(max_length=20)
    overall_rating: float = Field(ge=1.0, le=5.0)
    comments: Optional[str] = None

    @field_validator("customer_name", "location", *RATING_ATTRIBUTES)
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value:
            raise PydanticCustomError("blank", "must not be blank")
        return value


class CustomerResponse(CamelModel):
    """Customer list item."""

    id: int
    customer_name: str
    location: str
    visit_date: date


class SurveyResponseDetail(CamelModel):
    """Survey response list item, flattened with its customer."""

    id: int
    customer_id: int
    customer_name: str
    location: str
    visit_date: str
    food_quality: str
    service_speed: str
    staff_friendliness: str
    cleanliness: str
    value_for_money: str
    ambiance: str
    overall_rating: Optional[float]
    comments: Optional[str]
    created_at: str


class AttributeSummaryResponse(CamelModel):
    """Per-attribute satisfaction figures."""

    attribute: str
    label: str
    average_score: float
    breakdown: dict[str, int]


class SatisfactionSummaryResponse(CamelModel):
    """Aggregate satisfaction figures."""

    location: Optional[str]
    total_responses: int
    distribution: dict[str, int]
    satisfaction_rate: float
    average_rating: float
    attributes: list[AttributeSummaryResponse]


def to_rating_decimal(value: float) -> Decimal:
    """Round an overall rating to the stored one-decimal precision."""
    return Decimal(str(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)


def to_detail(survey: SurveyResponse) -> SurveyResponseDetail:
    customer = survey.customer
    return SurveyResponseDetail(
        id=survey.id,
        customer_id=customer.id,
        customer_name=customer.customer_name,
        location=customer.location,
        visit_date=customer.visit_date.isoformat(),
        food_quality=survey.food_quality,
        service_speed=survey.service_speed,
        staff_friendliness=survey.staff_friendliness,
        cleanliness=survey.cleanliness,
        value_for_money=survey.value_for_money,
        ambiance=survey.ambiance,
        overall_rating=float(survey.overall_rating) if survey.overall_rating is not None else None,
        comments=survey.comments,
        created_at=survey.created_at.isoformat(),
    )


def select_responses(db: Session, location: Optional[str]) -> list[SurveyResponse]:
    repository = SurveyResponseRepository(db)
    if location:
        return repository.find_all_by_location(location)
    return repository.find_all()


@router.post("", response_class=PlainTextResponse)
async def submit_survey(request: SurveyRequest, db: Session = Depends(get_db)):
    """
    Submit a customer satisfaction survey.

    Creates the customer (visit date is today) and its survey response in a
    single transaction.
    """
    customer = CustomerRepository(db).save(
        Customer(
            customer_name=request.customer_name,
            location=request.location,
            visit_date=date.today(),
        )
    )

    survey = SurveyResponseRepository(db).save(
        SurveyResponse(
            customer=customer,
            food_quality=request.food_quality,
            service_speed=request.service_speed,
            staff_friendliness=request.staff_friendliness,
            cleanliness=request.cleanliness,
            value_for_money=request.value_for_money,
            ambiance=request.ambiance,
            overall_rating=to_rating_decimal(request.overall_rating),
            comments=request.comments,
        )
    )
    db.commit()

    logger.info(
        "Survey submitted",
        customer_id=customer.id,
        survey_response_id=survey.id,
        location=customer.location,
    )

    return SUBMITTED_MESSAGE


@router.get("/customers", response_model=list[CustomerResponse])
async def list_customers(db: Session = Depends(get_db)):
    """List all customers."""
    customers = CustomerRepository(db).find_all()

    logger.info("Listed customers", count=len(customers))

    return [
        CustomerResponse(
            id=customer.id,
            customer_name=customer.customer_name,
            location=customer.location,
            visit_date=customer.visit_date,
        )
        for customer in customers
    ]


@router.get("/responses", response_model=list[SurveyResponseDetail])
async def list_survey_responses(
    location: Optional[str] = Query(None, description="Filter by visit location"),
    db: Session = Depends(get_db),
):
    """
    List survey responses with their customer details.

    Args:
        location: Optional location to filter by (case-insensitive)
        db: Database session

    Returns:
        Survey responses in submission order
    """
    surveys = select_responses(db, location)

    logger.info("Listed survey responses", count=len(surveys), location=location)

    return [to_detail(survey) for survey in surveys]


@router.get("/summary", response_model=SatisfactionSummaryResponse)
async def get_satisfaction_summary(
    location: Optional[str] = Query(None, description="Filter by visit location"),
    db: Session = Depends(get_db),
):
    """Satisfaction distribution, rates and per-attribute scores."""
    surveys = select_responses(db, location)

    summary = summarize(
        ResponseRatings(
            ratings=survey.ratings(),
            overall_rating=float(survey.overall_rating) if survey.overall_rating is not None else None,
        )
        for survey in surveys
    )

    return SatisfactionSummaryResponse(
        location=location,
        total_responses=summary.total_responses,
        distribution=summary.distribution,
        satisfaction_rate=summary.satisfaction_rate,
        average_rating=summary.average_rating,
        attributes=[
            AttributeSummaryResponse(
                attribute=to_camel(item.attribute),
                label=item.label,
                average_score=item.average_score,
                breakdown=item.breakdown,
            )
            for item in summary.attributes
        ],
    )
