"""Basal metabolic rate formulas and body composition metrics."""

from fasting_calculator.domain.metabolism import BmrEstimate, BodyMetrics, WaistRisk
from fasting_calculator.domain.profile import Gender, MetricValues
from fasting_calculator.services.units import IN_TO_CM, KG_TO_LBS

IDEAL_BMI = 22
WAIST_TO_HEIGHT_THRESHOLD = 0.5


def estimate_bmr(
    weight_kg: float,
    height_cm: float,
    age: int,
    gender: Gender,
    body_fat_percentage: float | None = None,
) -> BmrEstimate:
    """Estimate BMR with Mifflin-St Jeor, Harris-Benedict and Katch-McArdle.

    Katch-McArdle needs a positive body fat percentage; without one it is
    reported as 0 and left out of the average.
    """
    mifflin = mifflin_st_jeor(weight_kg, height_cm, age, gender)
    harris = harris_benedict(weight_kg, height_cm, age, gender)
    katch = 0.0
    if body_fat_percentage is not None and body_fat_percentage > 0:
        katch = katch_mcardle(weight_kg, body_fat_percentage)

    formulas = [value for value in (mifflin, harris, katch) if value > 0]
    average = sum(formulas) / len(formulas) if formulas else 0.0
    return BmrEstimate(mifflin=mifflin, harris=harris, katch=katch, average=average)


def mifflin_st_jeor(
    weight_kg: float, height_cm: float, age: int, gender: Gender
) -> float:
    """Mifflin-St Jeor BMR."""
    offset = 5 if gender == Gender.MALE else -161
    return 10 * weight_kg + 6.25 * height_cm - 5 * age + offset


def harris_benedict(
    weight_kg: float, height_cm: float, age: int, gender: Gender
) -> float:
    """Harris-Benedict BMR, imperial variant on converted inputs."""
    weight_lbs = weight_kg * KG_TO_LBS
    height_in = height_cm / IN_TO_CM
    if gender == Gender.MALE:
        return 66 + 6.23 * weight_lbs + 12.7 * height_in - 6.8 * age
    return 655 + 4.35 * weight_lbs + 4.7 * height_in - 4.7 * age


def katch_mcardle(weight_kg: float, body_fat_percentage: float) -> float:
    """Katch-McArdle BMR from lean body mass."""
    lean_mass = weight_kg * (1 - body_fat_percentage / 100)
    return 370 + 21.6 * lean_mass


def body_metrics(
    metric: MetricValues, body_fat_percentage: float | None = None
) -> BodyMetrics:
    """Compute BMI, lean/fat mass, ideal weight and waist-to-height ratio."""
    height_m = metric.height_cm / 100
    height_sq = height_m * height_m
    bmi = metric.weight_kg / height_sq if height_sq > 0 else 0.0

    fat_mass: float | None = None
    lean_mass: float | None = None
    if body_fat_percentage is not None:
        fat_mass = metric.weight_kg * body_fat_percentage / 100
        lean_mass = metric.weight_kg - fat_mass

    ratio = 0.0
    if metric.waist_cm > 0 and metric.height_cm > 0:
        ratio = metric.waist_cm / metric.height_cm

    return BodyMetrics(
        bmi=bmi,
        lean_mass_kg=lean_mass,
        fat_mass_kg=fat_mass,
        ideal_weight_kg=IDEAL_BMI * height_sq,
        waist_to_height=ratio,
        waist_risk=classify_waist_ratio(ratio),
    )


def classify_waist_ratio(ratio: float) -> WaistRisk | None:
    """Return the risk band for a waist-to-height ratio, None when unknown."""
    if ratio <= 0:
        return None
    if ratio < WAIST_TO_HEIGHT_THRESHOLD:
        return WaistRisk.HEALTHY
    return WaistRisk.ELEVATED
