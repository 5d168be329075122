"""Domain models for metabolic rate and body composition."""

from dataclasses import dataclass
from enum import Enum


class WaistRisk(str, Enum):
    """Classification of the waist-to-height ratio."""

    HEALTHY = "healthy"
    ELEVATED = "elevated"


@dataclass(frozen=True)
class BmrEstimate:
    """Basal metabolic rate per formula, in kcal/day."""

    mifflin: float
    harris: float
    katch: float
    average: float


@dataclass(frozen=True)
class BodyMetrics:
    """Metrics derived from the same normalized inputs as the BMR."""

    bmi: float
    lean_mass_kg: float | None
    fat_mass_kg: float | None
    ideal_weight_kg: float
    waist_to_height: float
    waist_risk: WaistRisk | None
