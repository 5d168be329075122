"""Linear weight projection from a constant weekly energy balance."""

from fasting_calculator.domain.projection import ProjectionPoint
from fasting_calculator.services.macros import CALORIES_PER_KG_FAT
from fasting_calculator.services.units import KG_TO_LBS

PROJECTION_WEEKS = 12


def project_weight(
    weight_kg: float,
    weekly_deficit: float,
    body_fat_percentage: float | None = None,
    weeks: int = PROJECTION_WEEKS,
) -> list[ProjectionPoint]:
    """Project weight (and body fat when known) for weeks 0..``weeks``.

    Every week the same ``weekly_deficit / 7700`` kg is applied to weight and
    fat mass. No metabolic adaptation and no lower bound on weight.
    """
    kg_change = weekly_deficit / CALORIES_PER_KG_FAT
    current_weight = weight_kg
    current_fat_mass: float | None = None
    if body_fat_percentage is not None:
        current_fat_mass = weight_kg * body_fat_percentage / 100
    cumulative_change = 0.0

    points: list[ProjectionPoint] = []
    for week in range(weeks + 1):
        points.append(
            ProjectionPoint(
                week=week,
                weight_kg=current_weight,
                weight_lbs=current_weight * KG_TO_LBS,
                body_fat_percent=_body_fat_percent(current_fat_mass, current_weight),
                cumulative_change_kg=cumulative_change,
            )
        )
        current_weight += kg_change
        cumulative_change += kg_change
        if current_fat_mass is not None:
            current_fat_mass += kg_change
    return points


def _body_fat_percent(fat_mass: float | None, weight: float) -> float | None:
    if fat_mass is None:
        return None
    if weight == 0:
        return 0.0
    return fat_mass / weight * 100
