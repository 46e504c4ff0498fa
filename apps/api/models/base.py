"""Shared columns for append-only tables."""

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime


def utcnow() -> datetime:
    """Naive UTC timestamp, matching the DateTime columns."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class TimestampMixin:
    """Adds a creation timestamp that is set once on insert."""

    created_at = Column(DateTime, nullable=False, default=utcnow)
