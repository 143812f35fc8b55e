"""Health profile validation."""

from collections.abc import Mapping
from enum import Enum
from typing import TypeVar

from foodsnap.domain.errors import ValidationError
from foodsnap.domain.profile import (
    AGE_RANGE,
    DEFAULT_USER_ID,
    HEIGHT_CM_RANGE,
    WEIGHT_KG_RANGE,
    ActivityLevel,
    Goal,
    Sex,
    UserProfile,
)

E = TypeVar("E", bound=Enum)


def validate_profile(raw: Mapping[str, object]) -> UserProfile:
    """Validate raw profile fields and return an immutable profile.

    Numeric fields may arrive as numbers or numeric strings (HTML forms).
    Raises ``ValidationError`` naming the first offending field.
    """
    age = _parse_number(raw, "age", integral=True)
    height_cm = _parse_number(raw, "height_cm")
    weight_kg = _parse_number(raw, "weight_kg")
    _check_range("age", age, AGE_RANGE)
    _check_range("height_cm", height_cm, HEIGHT_CM_RANGE)
    _check_range("weight_kg", weight_kg, WEIGHT_KG_RANGE)

    user_id = str(raw.get("user_id") or "").strip()
    return UserProfile(
        sex=_parse_choice(raw, "sex", Sex),
        age=int(age),
        height_cm=height_cm,
        weight_kg=weight_kg,
        activity_level=_parse_choice(raw, "activity_level", ActivityLevel),
        goal=_parse_choice(raw, "goal", Goal),
        user_id=user_id or DEFAULT_USER_ID,
    )


def _parse_number(
    raw: Mapping[str, object], field: str, *, integral: bool = False
) -> float:
    """Read a numeric field, accepting numbers and numeric strings."""
    value = raw.get(field)
    if value is None or value == "":
        raise ValidationError(field, "is required")
    if isinstance(value, bool):
        raise ValidationError(field, "must be a number")
    if not isinstance(value, str | int | float):
        raise ValidationError(field, "must be a number")
    try:
        number = float(value.strip() if isinstance(value, str) else value)
    except (OverflowError, ValueError):
        raise ValidationError(field, "must be a number") from None
    if number != number:  # NaN
        raise ValidationError(field, "must be a number")
    if integral and not number.is_integer():
        raise ValidationError(field, "must be a whole number")
    return number


def _check_range(field: str, value: float, bounds: tuple[float, float]) -> None:
    low, high = bounds
    if not low <= value <= high:
        raise ValidationError(field, f"must be between {low:g} and {high:g}")


def _parse_choice(raw: Mapping[str, object], field: str, enum: type[E]) -> E:
    """Read an enum field by its string value."""
    value = raw.get(field)
    if isinstance(value, enum):
        return value
    if value is None or value == "":
        raise ValidationError(field, "is required")
    allowed = ", ".join(member.value for member in enum)
    if not isinstance(value, str):
        raise ValidationError(field, f"must be one of: {allowed}")
    try:
        return enum(value.strip().lower())
    except ValueError:
        raise ValidationError(field, f"must be one of: {allowed}") from None
