"""Meal suitability domain models."""

from dataclasses import dataclass
from enum import Enum


class SuitabilityStatus(str, Enum):
    """Verdict bands for a meal compared to its calorie target."""

    LOW = "low"
    SUITABLE = "suitable"
    SLIGHTLY_HIGH = "slightly_high"
    HIGH = "high"
    VERY_HIGH = "very_high"


@dataclass(frozen=True)
class Suitability:
    """Suitability verdict for one meal."""

    status: SuitabilityStatus
    message: str
    score: float | None = None
