"""Pydantic request models for the HTTP API."""

from pydantic import BaseModel, ConfigDict, Field

from fasting_calculator.domain.tracker import Nutrients


class AddFoodRequest(BaseModel):
    """Food to add to today's log."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = ""
    grams: float = 0.0
    per_100g: Nutrients = Field(default_factory=Nutrients, alias="per100g")


class TargetsUpdate(BaseModel):
    """Daily targets to change; omitted targets keep their stored value."""

    calories: float | None = Field(default=None, ge=0)
    protein: float | None = Field(default=None, ge=0)
    carbs: float | None = Field(default=None, ge=0)
    fat: float | None = Field(default=None, ge=0)
    fiber: float | None = Field(default=None, ge=0)
    net_carbs: float | None = Field(default=None, ge=0)


class TrackerProfileUpdate(BaseModel):
    """Partial update of the tracker profile."""

    targets: TargetsUpdate | None = None
    is_keto_mode: bool | None = None
    model: str | None = None
