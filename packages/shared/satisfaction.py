"""
Satisfaction summary over survey responses.

Each of the six attributes is rated on a five-level scale. A response's
overall level is derived from how many attributes are Satisfied or better:

  >=4 Highly Satisfied, 3 Satisfied, 2 Neutral, 1 Dissatisfied, 0 Highly Dissatisfied
"""

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Iterable, List, Mapping, Optional

HIGHLY_SATISFIED = "Highly Satisfied"
SATISFIED = "Satisfied"
NEUTRAL = "Neutral"
DISSATISFIED = "Dissatisfied"
HIGHLY_DISSATISFIED = "Highly Dissatisfied"

# Best to worst
LEVEL_SCORES: Dict[str, int] = {
    HIGHLY_SATISFIED: 5,
    SATISFIED: 4,
    NEUTRAL: 3,
    DISSATISFIED: 2,
    HIGHLY_DISSATISFIED: 1,
}
LEVELS: List[str] = list(LEVEL_SCORES)

ATTRIBUTE_LABELS: Dict[str, str] = {
    "food_quality": "Food Quality",
    "service_speed": "Service Speed",
    "staff_friendliness": "Staff Friendliness",
    "cleanliness": "Cleanliness",
    "value_for_money": "Value for Money",
    "ambiance": "Ambiance",
}


@dataclass
class ResponseRatings:
    """The parts of a survey response the summary looks at."""

    ratings: Mapping[str, str]
    overall_rating: Optional[float] = None


@dataclass
class AttributeSummary:
    """Average score and level breakdown for one attribute."""

    attribute: str
    label: str
    average_score: float
    breakdown: Dict[str, int]

    def to_dict(self) -> dict:
        return {
            "attribute": self.attribute,
            "label": self.label,
            "average_score": self.average_score,
            "breakdown": dict(self.breakdown),
        }


@dataclass
class SatisfactionSummary:
    """Aggregate satisfaction figures for a set of responses."""

    total_responses: int
    distribution: Dict[str, int]
    satisfaction_rate: float
    average_rating: float
    attributes: List[AttributeSummary] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "total_responses": self.total_responses,
            "distribution": dict(self.distribution),
            "satisfaction_rate": self.satisfaction_rate,
            "average_rating": self.average_rating,
            "attributes": [a.to_dict() for a in self.attributes],
        }


def round_half_up(value: float, places: int = 0) -> float:
    """Round like a dashboard would display it, halves away from zero."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def attribute_score(value: Optional[str]) -> int:
    """Numeric score of a satisfaction level; 0 for anything unrecognised."""
    if value is None:
        return 0
    return LEVEL_SCORES.get(value.strip(), 0)


def classify_response(ratings: Mapping[str, str]) -> str:
    """
    Derive the overall satisfaction level of a single response.

    Args:
        ratings: Attribute name to level for the six attributes

    Returns:
        One of LEVELS
    """
    satisfied = sum(1 for name in ATTRIBUTE_LABELS if attribute_score(ratings.get(name)) >= 4)

    if satisfied >= 4:
        return HIGHLY_SATISFIED
    if satisfied == 3:
        return SATISFIED
    if satisfied == 2:
        return NEUTRAL
    if satisfied == 1:
        return DISSATISFIED
    return HIGHLY_DISSATISFIED


def summarize_attribute(attribute: str, responses: List[ResponseRatings]) -> AttributeSummary:
    """Average score over all responses and percentage per known level."""
    counts = {level: 0 for level in LEVELS}
    total_score = 0

    for response in responses:
        value = response.ratings.get(attribute)
        score = attribute_score(value)
        total_score += score
        if score:
            counts[value.strip()] += 1

    known = sum(counts.values())
    average = round_half_up(total_score / len(responses), 1) if responses else 0.0
    breakdown = {
        level: int(round_half_up(count / known * 100)) if known else 0
        for level, count in counts.items()
    }

    return AttributeSummary(
        attribute=attribute,
        label=ATTRIBUTE_LABELS[attribute],
        average_score=average,
        breakdown=breakdown,
    )


def summarize(responses: Iterable[ResponseRatings]) -> SatisfactionSummary:
    """
    Build the satisfaction summary for a set of responses.

    Args:
        responses: Responses to aggregate (already filtered by the caller)

    Returns:
        SatisfactionSummary; all figures are 0 for an empty input
    """
    responses = list(responses)

    distribution = {level: 0 for level in LEVELS}
    for response in responses:
        distribution[classify_response(response.ratings)] += 1

    total = len(responses)
    satisfied = distribution[HIGHLY_SATISFIED] + distribution[SATISFIED]
    satisfaction_rate = round_half_up(satisfied / total * 100, 1) if total else 0.0

    ratings = [float(r.overall_rating) for r in responses if r.overall_rating is not None]
    average_rating = round_half_up(sum(ratings) / len(ratings), 1) if ratings else 0.0

    return SatisfactionSummary(
        total_responses=total,
        distribution=distribution,
        satisfaction_rate=satisfaction_rate,
        average_rating=average_rating,
        attributes=[summarize_attribute(name, responses) for name in ATTRIBUTE_LABELS],
    )
