"""Combined plan report for a profile."""

from dataclasses import dataclass

from fasting_calculator.domain.macros import MacroPlan
from fasting_calculator.domain.metabolism import BmrEstimate, BodyMetrics
from fasting_calculator.domain.profile import MetricValues, ProfileInput
from fasting_calculator.domain.projection import ProjectionPoint
from fasting_calculator.services.macros import build_macro_plan
from fasting_calculator.services.metabolism import body_metrics, estimate_bmr
from fasting_calculator.services.projection import project_weight
from fasting_calculator.services.units import synchronize, to_metric


@dataclass(frozen=True)
class PlanReport:
    """Everything derived from a profile."""

    profile: ProfileInput
    metric: MetricValues
    bmr: BmrEstimate
    body: BodyMetrics
    macros: MacroPlan
    projection: list[ProjectionPoint]

    @property
    def tdee(self) -> float:
        """Total daily energy expenditure."""
        return self.macros.tdee


def build_report(profile: ProfileInput) -> PlanReport:
    """Normalize units, estimate BMR, allocate macros and project weight.

    The report carries the profile with its inactive unit pair synchronized.
    """
    profile = synchronize(profile)
    metric = to_metric(profile)
    bmr = estimate_bmr(
        metric.weight_kg,
        metric.height_cm,
        profile.age,
        profile.gender,
        profile.body_fat_percentage,
    )
    macros = build_macro_plan(bmr.average, profile)
    projection = project_weight(
        metric.weight_kg,
        macros.summary.weekly_deficit,
        profile.body_fat_percentage,
    )
    return PlanReport(
        profile=profile,
        metric=metric,
        bmr=bmr,
        body=body_metrics(metric, profile.body_fat_percentage),
        macros=macros,
        projection=projection,
    )
