"""Database models."""

from apps.api.models.customer import Customer
from apps.api.models.survey_response import RATING_ATTRIBUTES, SurveyResponse

__all__ = [
    "Customer",
    "SurveyResponse",
    "RATING_ATTRIBUTES",
]
