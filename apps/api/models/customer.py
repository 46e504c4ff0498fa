"""Customer model - stores the visitor who submitted a survey."""

from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import Column, Date, Integer, String
from sqlalchemy.orm import relationship

from apps.api.database import Base
from apps.api.models.base import TimestampMixin

if TYPE_CHECKING:
    from apps.api.models.survey_response import SurveyResponse


class Customer(TimestampMixin, Base):
    """Restaurant visitor captured at survey submission."""

    __tablename__ = "customers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    customer_name = Column(String(100), nullable=False)
    location = Column(String(50), nullable=False)
    visit_date = Column(Date, nullable=False, default=date.today)

    # Relationships
    survey_responses = relationship("SurveyResponse", back_populates="customer")

    def __repr__(self) -> str:
        return f"<Customer(id={self.id}, name={self.customer_name}, location={self.location})>"
