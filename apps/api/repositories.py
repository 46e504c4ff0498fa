"""CRUD repositories over the survey tables."""

from typing import Generic, Optional, TypeVar

from sqlalchemy import func
from sqlalchemy.orm import Query, Session, contains_eager

from apps.api.database import Base
from apps.api.models import Customer, SurveyResponse

ModelT = TypeVar("ModelT", bound=Base)


class Repository(Generic[ModelT]):
    """
    Generic create/read access for one mapped model.

    Writes are flushed, not committed; the caller owns the transaction.
    """

    model: type[ModelT]

    def __init__(self, db: Session):
        self.db = db

    def _query(self) -> Query:
        return self.db.query(self.model)

    def save(self, entity: ModelT) -> ModelT:
        """Add the entity and flush so generated columns are populated."""
        self.db.add(entity)
        self.db.flush()
        self.db.refresh(entity)
        return entity

    def _find(self, *criteria) -> list[ModelT]:
        return self._query().filter(*criteria).order_by(self.model.id).all()

    def find_all(self) -> list[ModelT]:
        return self._find()

    def find_by_id(self, entity_id: int) -> Optional[ModelT]:
        return self.db.get(self.model, entity_id)

    def count(self) -> int:
        return self._query().count()


class CustomerRepository(Repository[Customer]):
    model = Customer


class SurveyResponseRepository(Repository[SurveyResponse]):
    model = SurveyResponse

    def _query(self) -> Query:
        # Listings always render customer fields
        return (
            self.db.query(SurveyResponse)
            .join(SurveyResponse.customer)
            .options(contains_eager(SurveyResponse.customer))
        )

    def find_all_by_location(self, location: str) -> list[SurveyResponse]:
        """Responses whose customer visited the given location (case-insensitive)."""
        return self._find(func.lower(Customer.location) == location.strip().lower())
