"""Energy budget calculation from a validated profile."""

from decimal import ROUND_HALF_UP, Decimal
from typing import assert_never

from foodsnap.domain.energy import EnergyProfile
from foodsnap.domain.profile import ActivityLevel, Sex, UserProfile

ACTIVITY_FACTORS: dict[ActivityLevel, float] = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.ACTIVE: 1.725,
    ActivityLevel.VERY_ACTIVE: 1.9,
}

# One of three main meals.
MEAL_TARGET_FRACTION = 0.35

_MALE_OFFSET = 5.0
_FEMALE_OFFSET = -161.0


def compute_energy_profile(profile: UserProfile) -> EnergyProfile:
    """Compute BMR, TDEE and the per-meal calorie target."""
    bmr = compute_bmr(profile)
    tdee = compute_tdee(bmr, profile.activity_level)
    return EnergyProfile(
        bmr=bmr,
        tdee=tdee,
        meal_target_kcal=round_half_up(tdee * MEAL_TARGET_FRACTION),
    )


def compute_bmr(profile: UserProfile) -> float:
    """Basal metabolic rate using the Mifflin-St Jeor equation.

    Men:   10 * weight + 6.25 * height - 5 * age + 5
    Women: 10 * weight + 6.25 * height - 5 * age - 161

    ``Sex.OTHER`` uses the mean of both results.
    """
    base = 10 * profile.weight_kg + 6.25 * profile.height_cm - 5 * profile.age
    match profile.sex:
        case Sex.MALE:
            return base + _MALE_OFFSET
        case Sex.FEMALE:
            return base + _FEMALE_OFFSET
        case Sex.OTHER:
            return base + (_MALE_OFFSET + _FEMALE_OFFSET) / 2
        case _:
            assert_never(profile.sex)


def compute_tdee(bmr: float, activity_level: ActivityLevel) -> float:
    """Total daily energy expenditure for an activity level."""
    return bmr * ACTIVITY_FACTORS[activity_level]


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded away from zero."""
    return int(Decimal(str(value)).quantize(Decimal(1), rounding=ROUND_HALF_UP))
