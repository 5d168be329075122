"""Domain models for daily food tracking."""

import math
from dataclasses import dataclass
from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_LABEL_MODEL = "gemini-2.5-flash"


def coerce_amount(value: object) -> float:
    """Return a finite, non-negative float or 0.0 for anything else."""
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, int | float):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return 0.0
    else:
        return 0.0
    if not math.isfinite(number) or number < 0:
        return 0.0
    return number


class Nutrients(BaseModel):
    """Nutrient amounts, either per 100 g or absolute."""

    model_config = ConfigDict(frozen=True)

    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fiber: float = 0.0
    fat: float = 0.0

    @field_validator("calories", "protein", "carbs", "fiber", "fat", mode="before")
    @classmethod
    def _coerce(cls, value: object) -> float:
        return coerce_amount(value)

    def scaled(self, factor: float) -> "Nutrients":
        """Return the amounts multiplied by ``factor``."""
        return Nutrients(
            calories=self.calories * factor,
            protein=self.protein * factor,
            carbs=self.carbs * factor,
            fiber=self.fiber * factor,
            fat=self.fat * factor,
        )


class FoodItem(BaseModel):
    """A logged food with its per-100 g reference and eaten amounts."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    name: str
    grams: float = Field(gt=0)
    per_100g: Nutrients = Field(alias="per100g")
    calories: float
    protein: float
    carbs: float
    fiber: float
    fat: float


class DailyLog(BaseModel):
    """Foods logged on one calendar day, most recent first."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    day: date = Field(alias="date")
    foods: tuple[FoodItem, ...] = ()


class FoodDraft(BaseModel):
    """Pending food entry that has not been logged yet."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = ""
    grams: float = 0.0
    per_100g: Nutrients = Field(default_factory=Nutrients, alias="per100g")


class TrackerTargets(BaseModel):
    """Daily nutrient targets."""

    model_config = ConfigDict(frozen=True)

    calories: float = Field(default=2000, ge=0)
    protein: float = Field(default=150, ge=0)
    carbs: float = Field(default=200, ge=0)
    fat: float = Field(default=65, ge=0)
    fiber: float = Field(default=30, ge=0)
    net_carbs: float = Field(default=50, ge=0)


class TrackerProfile(BaseModel):
    """Tracker settings: targets, keto mode and label-analysis model."""

    model_config = ConfigDict(frozen=True)

    targets: TrackerTargets = Field(default_factory=TrackerTargets)
    is_keto_mode: bool = False
    model: str = DEFAULT_LABEL_MODEL


@dataclass(frozen=True)
class DailyTotals:
    """Summed nutrients for a daily log."""

    calories: float
    protein: float
    carbs: float
    fat: float
    fiber: float
    net_carbs: float


@dataclass(frozen=True)
class MacroProgress:
    """Consumption of one tracked nutrient against its target."""

    label: str
    consumed: float
    target: float
    percent: float


@dataclass(frozen=True)
class TrackerSummary:
    """Totals for a day compared with the tracker targets."""

    totals: DailyTotals
    calorie_target: float
    calories_remaining: float
    progress: list[MacroProgress]
