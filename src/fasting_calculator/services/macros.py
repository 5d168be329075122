"""Energy expenditure and macro allocation across rest and workout days."""

import logging

from fasting_calculator.domain.macros import (
    DayMacros,
    DayType,
    DayTypePlan,
    MacroAmount,
    MacroPlan,
    WeeklySummary,
)
from fasting_calculator.domain.profile import ActivityLevel, ProfileInput

CALORIES_PER_GRAM_PROTEIN = 4
CALORIES_PER_GRAM_CARB = 4
CALORIES_PER_GRAM_FAT = 9
# Independent rules of thumb; 7700 kcal/kg is not 3500 kcal/lb converted.
CALORIES_PER_KG_FAT = 7700
CALORIES_PER_LB_FAT = 3500

_logger = logging.getLogger(__name__)


def total_daily_energy(average_bmr: float, activity_level: ActivityLevel) -> float:
    """Scale BMR by the activity multiplier."""
    return average_bmr * activity_level.multiplier


def day_calories(tdee: float, split_percent: float) -> float:
    """Apply a signed percentage offset to TDEE."""
    return tdee * (1 + split_percent / 100)


def split_macros(
    calories: float, protein_grams: float, fat_split_percent: float
) -> DayMacros:
    """Split a calorie target into protein, fat and carbs.

    Protein is fixed in grams; the remaining calories are shared between fat
    and carbs by ``fat_split_percent``. When protein alone exceeds the target
    both fat and carbs are zero.
    """
    protein_cals = protein_grams * CALORIES_PER_GRAM_PROTEIN
    remaining_cals = max(0.0, calories - protein_cals)
    fat_cals = remaining_cals * (fat_split_percent / 100)
    carb_cals = remaining_cals - fat_cals
    return DayMacros(
        calories=calories,
        protein=MacroAmount(grams=protein_grams, calories=protein_cals),
        fat=MacroAmount(grams=fat_cals / CALORIES_PER_GRAM_FAT, calories=fat_cals),
        carbs=MacroAmount(
            grams=carb_cals / CALORIES_PER_GRAM_CARB, calories=carb_cals
        ),
    )


def weekly_summary(
    tdee: float,
    rest_calories: float,
    workout_calories: float,
    days_per_cycle: int,
    workouts_per_week: int,
) -> WeeklySummary:
    """Summarize intake against expenditure over one cycle."""
    rest_days = days_per_cycle - workouts_per_week
    weekly_intake = rest_calories * rest_days + workout_calories * workouts_per_week
    weekly_expenditure = tdee * days_per_cycle
    weekly_deficit = weekly_intake - weekly_expenditure
    return WeeklySummary(
        rest_days=rest_days,
        workout_days=workouts_per_week,
        weekly_intake=weekly_intake,
        weekly_expenditure=weekly_expenditure,
        weekly_deficit=weekly_deficit,
        weekly_change_kg=weekly_deficit / CALORIES_PER_KG_FAT,
        weekly_change_lbs=weekly_deficit / CALORIES_PER_LB_FAT,
    )


def build_macro_plan(average_bmr: float, profile: ProfileInput) -> MacroPlan:
    """Build rest and workout day macros plus the weekly summary."""
    tdee = total_daily_energy(average_bmr, profile.activity_level)
    rest_calories = day_calories(tdee, profile.rest_calories_split)
    workout_calories = day_calories(tdee, profile.workout_calories_split)
    summary = weekly_summary(
        tdee,
        rest_calories,
        workout_calories,
        profile.days_per_cycle,
        profile.workouts_per_week,
    )
    _logger.debug(
        "Macro plan: tdee=%.1f rest=%.1f workout=%.1f weekly_deficit=%.1f",
        tdee,
        rest_calories,
        workout_calories,
        summary.weekly_deficit,
    )
    return MacroPlan(
        tdee=tdee,
        rest=DayTypePlan(
            day_type=DayType.REST,
            days=summary.rest_days,
            macros=split_macros(
                rest_calories,
                profile.rest_protein_grams,
                profile.rest_fat_split_percent,
            ),
        ),
        workout=DayTypePlan(
            day_type=DayType.WORKOUT,
            days=summary.workout_days,
            macros=split_macros(
                workout_calories,
                profile.workout_protein_grams,
                profile.workout_fat_split_percent,
            ),
        ),
        summary=summary,
    )
