"""Unit normalization between imperial and metric measurements."""

from fasting_calculator.domain.profile import (
    ImperialValues,
    MetricValues,
    ProfileInput,
    UnitSystem,
)

KG_TO_LBS = 2.20462
IN_TO_CM = 2.54
INCHES_PER_FOOT = 12


def to_metric(profile: ProfileInput) -> MetricValues:
    """Return the active unit system's measurements in metric units."""
    waist = profile.waist_size or 0.0
    if profile.unit_system == UnitSystem.IMPERIAL:
        return MetricValues(
            weight_kg=profile.weight_lbs / KG_TO_LBS,
            height_cm=(profile.height_ft * INCHES_PER_FOOT + profile.height_in)
            * IN_TO_CM,
            waist_cm=waist * IN_TO_CM,
        )
    return MetricValues(
        weight_kg=profile.weight_kg,
        height_cm=profile.height_cm,
        waist_cm=waist,
    )


def to_imperial(metric: MetricValues) -> ImperialValues:
    """Return feet/inches and pounds, inches rounded to one decimal."""
    total_inches = round(metric.height_cm / IN_TO_CM, 1)
    feet, inches = divmod(total_inches, INCHES_PER_FOOT)
    return ImperialValues(
        height_ft=int(feet),
        height_in=round(inches, 1),
        weight_lbs=metric.weight_kg * KG_TO_LBS,
    )


def synchronize(profile: ProfileInput) -> ProfileInput:
    """Recompute the inactive unit pair from the active one.

    The inactive pair is display-only and rounded to one decimal.
    """
    metric = to_metric(profile)
    if profile.unit_system == UnitSystem.IMPERIAL:
        return profile.model_copy(
            update={
                "height_cm": round(metric.height_cm, 1),
                "weight_kg": round(metric.weight_kg, 1),
            }
        )
    imperial = to_imperial(metric)
    return profile.model_copy(
        update={
            "height_ft": imperial.height_ft,
            "height_in": imperial.height_in,
            "weight_lbs": round(imperial.weight_lbs, 1),
        }
    )
