"""Meal suitability classification against a calorie target."""

import math

from foodsnap.domain.errors import DivisionError, ValidationError
from foodsnap.domain.profile import Goal
from foodsnap.domain.suitability import Suitability, SuitabilityStatus

# Lower bound of each band, inclusive, in ascending order.
_BANDS: tuple[tuple[float, SuitabilityStatus], ...] = (
    (0.85, SuitabilityStatus.SUITABLE),
    (1.10, SuitabilityStatus.SLIGHTLY_HIGH),
    (1.30, SuitabilityStatus.HIGH),
    (1.60, SuitabilityStatus.VERY_HIGH),
)

_NEUTRAL_MESSAGES: dict[SuitabilityStatus, str] = {
    SuitabilityStatus.LOW: (
        "This meal has {total} kcal, below your {target} kcal meal target. "
        "Consider adding a side to round it out."
    ),
    SuitabilityStatus.SUITABLE: (
        "This meal has {total} kcal and fits your {target} kcal meal target well."
    ),
    SuitabilityStatus.SLIGHTLY_HIGH: (
        "This meal has {total} kcal, slightly above your {target} kcal meal "
        "target. A lighter next meal will balance it."
    ),
    SuitabilityStatus.HIGH: (
        "This meal has {total} kcal, well above your {target} kcal meal target. "
        "Balance it with lighter meals today."
    ),
    SuitabilityStatus.VERY_HIGH: (
        "This meal has {total} kcal, far above your {target} kcal meal target. "
        "Keep the rest of the day light."
    ),
}

MESSAGE_TEMPLATES: dict[tuple[SuitabilityStatus, Goal], str] = {
    **{(status, Goal.MAINTAIN): text for status, text in _NEUTRAL_MESSAGES.items()},
    (SuitabilityStatus.LOW, Goal.LOSE): (
        "This meal has {total} kcal, below your {target} kcal meal target. "
        "That supports weight loss, as long as it keeps you full."
    ),
    (SuitabilityStatus.SUITABLE, Goal.LOSE): (
        "This meal has {total} kcal and fits your {target} kcal meal target "
        "for weight loss."
    ),
    (SuitabilityStatus.SLIGHTLY_HIGH, Goal.LOSE): (
        "This meal has {total} kcal, slightly above your {target} kcal meal "
        "target. A smaller portion would keep your weight loss on track."
    ),
    (SuitabilityStatus.HIGH, Goal.LOSE): (
        "This meal has {total} kcal, well above your {target} kcal meal target. "
        "To lose weight, reduce the portion or swap calorie-dense items."
    ),
    (SuitabilityStatus.VERY_HIGH, Goal.LOSE): (
        "This meal has {total} kcal, far above your {target} kcal meal target. "
        "To lose weight, cut this portion substantially and choose "
        "lower-calorie foods."
    ),
    (SuitabilityStatus.LOW, Goal.GAIN): (
        "This meal has {total} kcal, below your {target} kcal meal target. "
        "That is not enough to gain weight; add more energy-dense food."
    ),
    (SuitabilityStatus.SUITABLE, Goal.GAIN): (
        "This meal has {total} kcal and fits your {target} kcal meal target "
        "for weight gain."
    ),
    (SuitabilityStatus.SLIGHTLY_HIGH, Goal.GAIN): (
        "This meal has {total} kcal, slightly above your {target} kcal meal "
        "target, which is fine while gaining weight."
    ),
    (SuitabilityStatus.HIGH, Goal.GAIN): (
        "This meal has {total} kcal, well above your {target} kcal meal target. "
        "Aim for steadier portions across the day."
    ),
    (SuitabilityStatus.VERY_HIGH, Goal.GAIN): (
        "This meal has {total} kcal, far above your {target} kcal meal target. "
        "Spread your extra calories over more meals instead."
    ),
}


def classify_suitability(
    meal_total_kcal: float, meal_target_kcal: float, goal: Goal
) -> Suitability:
    """Classify a meal's calories against the per-meal target.

    Raises ``DivisionError`` when the target is not a positive finite number
    and ``ValidationError`` when the meal total is not finite.
    """
    if not meal_target_kcal > 0 or not math.isfinite(meal_target_kcal):
        raise DivisionError(f"meal target must be positive, got {meal_target_kcal}")
    if not math.isfinite(meal_total_kcal):
        raise ValidationError("meal_total_kcal", "must be a finite number")
    ratio = meal_total_kcal / meal_target_kcal
    status = status_for_ratio(ratio)
    template = MESSAGE_TEMPLATES[(status, goal)]
    message = template.format(
        total=round(meal_total_kcal), target=round(meal_target_kcal)
    )
    return Suitability(status=status, message=message, score=ratio)


def status_for_ratio(ratio: float) -> SuitabilityStatus:
    """Map a total-to-target ratio to its band."""
    status = SuitabilityStatus.LOW
    for lower_bound, band in _BANDS:
        if ratio >= lower_bound:
            status = band
    return status
