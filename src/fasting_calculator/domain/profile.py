"""Domain models for the anthropometric profile and plan configuration."""

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class UnitSystem(str, Enum):
    """Unit system the user enters measurements in."""

    IMPERIAL = "Imperial"
    METRIC = "Metric"


class Gender(str, Enum):
    """Gender used to select formula constants."""

    MALE = "Male"
    FEMALE = "Female"


class ActivityLevel(str, Enum):
    """Activity level, each variant carrying a fixed TDEE multiplier."""

    SEDENTARY = "sedentary"
    LIGHTLY_ACTIVE = "lightly_active"
    MODERATELY_ACTIVE = "moderately_active"
    VERY_ACTIVE = "very_active"
    EXTREMELY_ACTIVE = "extremely_active"

    @property
    def multiplier(self) -> float:
        """Return the multiplier applied to BMR."""
        return _ACTIVITY_MULTIPLIERS[self]

    @property
    def description(self) -> str:
        """Return a short human-readable description."""
        return _ACTIVITY_DESCRIPTIONS[self]


_ACTIVITY_MULTIPLIERS = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHTLY_ACTIVE: 1.375,
    ActivityLevel.MODERATELY_ACTIVE: 1.55,
    ActivityLevel.VERY_ACTIVE: 1.725,
    ActivityLevel.EXTREMELY_ACTIVE: 1.9,
}

_ACTIVITY_DESCRIPTIONS = {
    ActivityLevel.SEDENTARY: "Sedentary (office job)",
    ActivityLevel.LIGHTLY_ACTIVE: "Lightly active (1-2 days/week)",
    ActivityLevel.MODERATELY_ACTIVE: "Moderately active (3-5 days/week)",
    ActivityLevel.VERY_ACTIVE: "Very active (6-7 days/week)",
    ActivityLevel.EXTREMELY_ACTIVE: "Extremely active (physical job + training)",
}


class ProfileInput(BaseModel):
    """User anthropometrics and macro cycle configuration.

    Height and weight are kept in both unit systems; only the pair belonging
    to ``unit_system`` is read by the calculations.
    """

    model_config = ConfigDict(frozen=True)

    unit_system: UnitSystem = UnitSystem.IMPERIAL
    gender: Gender = Gender.MALE
    age: int = Field(default=30, gt=0)
    height_ft: float = Field(default=5, ge=0)
    height_in: float = Field(default=10, ge=0)
    height_cm: float = Field(default=178, ge=0)
    weight_lbs: float = Field(default=180, ge=0)
    weight_kg: float = Field(default=81.6, ge=0)
    activity_level: ActivityLevel = ActivityLevel.MODERATELY_ACTIVE
    body_fat_percentage: float | None = Field(default=None, ge=0, le=100)
    waist_size: float | None = Field(default=None, ge=0)

    days_per_cycle: int = Field(default=7, ge=1)
    workouts_per_week: int = Field(default=3, ge=0)
    rest_calories_split: float = -20
    workout_calories_split: float = 10
    rest_protein_grams: float = Field(default=160, ge=0)
    workout_protein_grams: float = Field(default=160, ge=0)
    rest_fat_split_percent: float = Field(default=75, ge=0, le=100)
    workout_fat_split_percent: float = Field(default=25, ge=0, le=100)

    @model_validator(mode="after")
    def _check_cycle(self) -> "ProfileInput":
        if self.workouts_per_week > self.days_per_cycle:
            raise ValueError("workouts_per_week cannot exceed days_per_cycle")
        return self

    @property
    def rest_days(self) -> int:
        """Return the number of rest days in a cycle."""
        return self.days_per_cycle - self.workouts_per_week


@dataclass(frozen=True)
class MetricValues:
    """Normalized metric measurements."""

    weight_kg: float
    height_cm: float
    waist_cm: float


@dataclass(frozen=True)
class ImperialValues:
    """Imperial presentation of the normalized measurements."""

    height_ft: int
    height_in: float
    weight_lbs: float
