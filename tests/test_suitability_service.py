"""Tests for meal suitability classification."""

import pytest

from foodsnap.domain.errors import DivisionError, ValidationError
from foodsnap.domain.profile import Goal
from foodsnap.domain.suitability import SuitabilityStatus
from foodsnap.services.suitability import (
    MESSAGE_TEMPLATES,
    classify_suitability,
    status_for_ratio,
)


def test_meal_close_to_target_is_suitable() -> None:
    result = classify_suitability(900, 908, Goal.MAINTAIN)

    assert result.status is SuitabilityStatus.SUITABLE
    assert result.score == pytest.approx(0.9912, abs=1e-4)
    assert "900 kcal" in result.message
    assert "908 kcal" in result.message


def test_empty_meal_is_low() -> None:
    result = classify_suitability(0, 908, Goal.MAINTAIN)

    assert result.status is SuitabilityStatus.LOW
    assert result.score == 0


def test_large_meal_for_weight_loss_is_very_high() -> None:
    result = classify_suitability(1500, 908, Goal.LOSE)

    assert result.status is SuitabilityStatus.VERY_HIGH
    assert result.score == pytest.approx(1.652, abs=1e-3)
    assert "lose weight" in result.message
    assert result.message != classify_suitability(1500, 908, Goal.MAINTAIN).message


def test_low_meal_for_weight_gain_mentions_intake() -> None:
    result = classify_suitability(300, 908, Goal.GAIN)

    assert result.status is SuitabilityStatus.LOW
    assert "not enough to gain weight" in result.message


def test_goal_does_not_change_status() -> None:
    statuses = {classify_suitability(1200, 908, goal).status for goal in Goal}

    assert statuses == {SuitabilityStatus.HIGH}


@pytest.mark.parametrize(
    ("total", "expected"),
    [
        (84, SuitabilityStatus.LOW),
        (85, SuitabilityStatus.SUITABLE),
        (109, SuitabilityStatus.SUITABLE),
        (110, SuitabilityStatus.SLIGHTLY_HIGH),
        (129, SuitabilityStatus.SLIGHTLY_HIGH),
        (130, SuitabilityStatus.HIGH),
        (159, SuitabilityStatus.HIGH),
        (160, SuitabilityStatus.VERY_HIGH),
    ],
)
def test_band_lower_bounds_are_inclusive(
    total: int, expected: SuitabilityStatus
) -> None:
    assert classify_suitability(total, 100, Goal.MAINTAIN).status is expected


def test_status_for_ratio_exact_boundaries() -> None:
    assert status_for_ratio(0.85) is SuitabilityStatus.SUITABLE
    assert status_for_ratio(1.10) is SuitabilityStatus.SLIGHTLY_HIGH
    assert status_for_ratio(1.30) is SuitabilityStatus.HIGH
    assert status_for_ratio(1.60) is SuitabilityStatus.VERY_HIGH


@pytest.mark.parametrize("target", [0, -1, -908])
def test_non_positive_target_raises(target: int) -> None:
    with pytest.raises(DivisionError):
        classify_suitability(500, target, Goal.MAINTAIN)


def test_every_status_and_goal_has_a_message() -> None:
    expected = {(status, goal) for status in SuitabilityStatus for goal in Goal}

    assert set(MESSAGE_TEMPLATES) == expected


def test_messages_are_deterministic() -> None:
    first = classify_suitability(1000, 908, Goal.GAIN)
    second = classify_suitability(1000, 908, Goal.GAIN)

    assert first == second


@pytest.mark.parametrize("target", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_target_raises(target: float) -> None:
    with pytest.raises(DivisionError):
        classify_suitability(500, target, Goal.MAINTAIN)


@pytest.mark.parametrize("total", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_total_raises(total: float) -> None:
    with pytest.raises(ValidationError) as excinfo:
        classify_suitability(total, 908, Goal.MAINTAIN)

    assert excinfo.value.field == "meal_total_kcal"
