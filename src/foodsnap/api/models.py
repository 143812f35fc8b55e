"""Request models for the HTTP API."""

from pydantic import BaseModel, FiniteFloat

from foodsnap.domain.profile import Goal


class ProfilePayload(BaseModel):
    """Raw profile fields as submitted by the client.

    Values are kept loose here; range and choice checks happen in
    ``validate_profile``.
    """

    user_id: str | None = None
    sex: str | None = None
    age: int | float | str | None = None
    height_cm: int | float | str | None = None
    weight_kg: int | float | str | None = None
    activity_level: str | None = None
    goal: str | None = None


class SuitabilityRequest(BaseModel):
    """Meal calories to classify against a target."""

    meal_total_kcal: FiniteFloat
    meal_target_kcal: FiniteFloat
    goal: Goal
