"""User profile domain models."""

from dataclasses import dataclass
from enum import Enum


class Sex(str, Enum):
    """Biological sex used by the BMR formula."""

    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class ActivityLevel(str, Enum):
    """Physical activity level used to scale BMR into TDEE."""

    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "very_active"


class Goal(str, Enum):
    """Body weight goal of the user."""

    MAINTAIN = "maintain"
    LOSE = "lose"
    GAIN = "gain"


AGE_RANGE = (1, 120)
HEIGHT_CM_RANGE = (50.0, 300.0)
WEIGHT_KG_RANGE = (20.0, 500.0)

DEFAULT_USER_ID = "anonymous"


@dataclass(frozen=True)
class UserProfile:
    """Validated health profile of a user."""

    sex: Sex
    age: int
    height_cm: float
    weight_kg: float
    activity_level: ActivityLevel
    goal: Goal
    user_id: str = DEFAULT_USER_ID
