"""Domain models for calorie targets and macro splits."""

from dataclasses import dataclass
from enum import Enum


class DayType(str, Enum):
    """Kind of day in the cycle."""

    REST = "rest"
    WORKOUT = "workout"


@dataclass(frozen=True)
class MacroAmount:
    """Grams of a macronutrient and the calories they carry."""

    grams: float
    calories: float


@dataclass(frozen=True)
class DayMacros:
    """Calorie target for a day and its macro breakdown."""

    calories: float
    protein: MacroAmount
    fat: MacroAmount
    carbs: MacroAmount

    def calorie_shares(self) -> dict[str, float]:
        """Return each macro's share of the allocated calories, in percent."""
        total = self.protein.calories + self.fat.calories + self.carbs.calories
        if total <= 0:
            return {"protein": 0.0, "fat": 0.0, "carbs": 0.0}
        return {
            "protein": self.protein.calories / total * 100,
            "fat": self.fat.calories / total * 100,
            "carbs": self.carbs.calories / total * 100,
        }


@dataclass(frozen=True)
class DayTypePlan:
    """Macros for one day type and how many such days a cycle holds."""

    day_type: DayType
    days: int
    macros: DayMacros


@dataclass(frozen=True)
class WeeklySummary:
    """Energy balance over one cycle."""

    rest_days: int
    workout_days: int
    weekly_intake: float
    weekly_expenditure: float
    weekly_deficit: float
    weekly_change_kg: float
    weekly_change_lbs: float


@dataclass(frozen=True)
class MacroPlan:
    """Full macro cycle plan."""

    tdee: float
    rest: DayTypePlan
    workout: DayTypePlan
    summary: WeeklySummary
