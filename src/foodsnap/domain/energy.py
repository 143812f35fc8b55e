"""Energy budget domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class EnergyProfile:
    """Daily energy figures derived from a user profile."""

    bmr: float
    tdee: float
    meal_target_kcal: int
