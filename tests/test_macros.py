"""Tests for energy expenditure and macro allocation."""

import pytest

from fasting_calculator.domain.macros import DayType
from fasting_calculator.domain.profile import ActivityLevel, ProfileInput
from fasting_calculator.services.macros import (
    build_macro_plan,
    day_calories,
    split_macros,
    total_daily_energy,
    weekly_summary,
)


def test_activity_levels_carry_multipliers() -> None:
    assert [level.multiplier for level in ActivityLevel] == [
        1.2,
        1.375,
        1.55,
        1.725,
        1.9,
    ]
    assert total_daily_energy(2000, ActivityLevel.MODERATELY_ACTIVE) == pytest.approx(
        3100
    )


def test_day_calories_applies_signed_split() -> None:
    assert day_calories(2500, -20) == pytest.approx(2000)
    assert day_calories(2500, 10) == pytest.approx(2750)
    assert day_calories(2500, 0) == pytest.approx(2500)


def test_split_macros_divides_remaining_calories() -> None:
    macros = split_macros(2000, 160, 75)

    assert macros.protein.calories == 640
    assert macros.fat.calories == pytest.approx(1020)
    assert macros.fat.grams == pytest.approx(1020 / 9)
    assert macros.carbs.calories == pytest.approx(340)
    assert macros.carbs.grams == pytest.approx(85)
    total = macros.protein.calories + macros.fat.calories + macros.carbs.calories
    assert total == pytest.approx(macros.calories)


def test_split_macros_collapses_when_protein_exceeds_target() -> None:
    macros = split_macros(500, 200, 50)

    assert macros.protein.calories == 800
    assert macros.fat.calories == 0
    assert macros.carbs.calories == 0
    assert macros.fat.grams == 0
    assert macros.carbs.grams == 0


def test_calorie_shares_handle_empty_day() -> None:
    assert split_macros(0, 0, 50).calorie_shares() == {
        "protein": 0.0,
        "fat": 0.0,
        "carbs": 0.0,
    }
    shares = split_macros(2000, 125, 50).calorie_shares()
    assert shares["protein"] == pytest.approx(25)
    assert sum(shares.values()) == pytest.approx(100)


def test_weekly_summary_uses_independent_energy_constants() -> None:
    summary = weekly_summary(2500, 2000, 2750, 7, 3)

    assert summary.rest_days == 4
    assert summary.workout_days == 3
    assert summary.weekly_intake == pytest.approx(16250)
    assert summary.weekly_expenditure == pytest.approx(17500)
    assert summary.weekly_deficit == pytest.approx(-1250)
    assert summary.weekly_change_kg == pytest.approx(-1250 / 7700)
    assert summary.weekly_change_lbs == pytest.approx(-1250 / 3500)


def test_build_macro_plan_from_profile() -> None:
    profile = ProfileInput(activity_level=ActivityLevel.SEDENTARY)

    plan = build_macro_plan(2000, profile)

    assert plan.tdee == pytest.approx(2400)
    assert plan.rest.day_type == DayType.REST
    assert plan.rest.days == 4
    assert plan.rest.macros.calories == pytest.approx(1920)
    assert plan.workout.day_type == DayType.WORKOUT
    assert plan.workout.days == 3
    assert plan.workout.macros.calories == pytest.approx(2640)
    assert plan.workout.macros.fat.calories == pytest.approx((2640 - 640) * 0.25)


def test_profile_rejects_more_workouts_than_days() -> None:
    with pytest.raises(ValueError, match="workouts_per_week"):
        ProfileInput(days_per_cycle=3, workouts_per_week=4)
