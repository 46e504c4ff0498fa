"""Survey response model - one satisfaction survey per submission."""

from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import relationship

from apps.api.database import Base
from apps.api.models.base import TimestampMixin

if TYPE_CHECKING:
    from apps.api.models.customer import Customer

RATING_ATTRIBUTES = (
    "food_quality",
    "service_speed",
    "staff_friendliness",
    "cleanliness",
    "value_for_money",
    "ambiance",
)


class SurveyResponse(TimestampMixin, Base):
    """Categorical attribute ratings plus an overall score for a customer visit."""

    __tablename__ = "survey_responses"
    __table_args__ = (
        CheckConstraint(
            "overall_rating >= 1.0 AND overall_rating <= 5.0",
            name="ck_survey_responses_overall_rating",
        ),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    customer_id = Column(Integer, ForeignKey("customers.id"), nullable=False, index=True)

    # Free-text levels such as "Satisfied"
    food_quality = Column(String(20), nullable=False)
    service_speed = Column(String(20), nullable=False)
    staff_friendliness = Column(String(20), nullable=False)
    cleanliness = Column(String(20), nullable=False)
    value_for_money = Column(String(20), nullable=False)
    ambiance = Column(String(20), nullable=False)

    overall_rating = Column(Numeric(2, 1), nullable=True)
    comments = Column(Text, nullable=True)

    # Relationships
    customer = relationship("Customer", back_populates="survey_responses")

    def ratings(self) -> dict[str, str]:
        """Return the six attribute ratings keyed by column name."""
        return {name: getattr(self, name) for name in RATING_ATTRIBUTES}

    def __repr__(self) -> str:
        return (
            f"<SurveyResponse(id={self.id}, customer_id={self.customer_id}, "
            f"overall_rating={self.overall_rating})>"
        )
