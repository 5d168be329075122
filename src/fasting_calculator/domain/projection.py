"""Domain models for weight projection."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ProjectionPoint:
    """Projected state at the start of a week."""

    week: int
    weight_kg: float
    weight_lbs: float
    body_fat_percent: float | None
    cumulative_change_kg: float
