"""Shared utilities and types."""

from packages.shared.satisfaction import (
    LEVELS,
    AttributeSummary,
    ResponseRatings,
    SatisfactionSummary,
    classify_response,
    summarize,
)

__all__ = [
    "LEVELS",
    "AttributeSummary",
    "ResponseRatings",
    "SatisfactionSummary",
    "classify_response",
    "summarize",
]
