"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import asdict
from datetime import date

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.encoders import jsonable_encoder

from fasting_calculator.api.models import AddFoodRequest, TrackerProfileUpdate
from fasting_calculator.app_logging import configure_logging
from fasting_calculator.containers import AppContainer
from fasting_calculator.domain.profile import ProfileInput
from fasting_calculator.domain.tracker import DailyLog, TrackerProfile
from fasting_calculator.services.planner import PlanReport, build_report
from fasting_calculator.services.vision import (
    MissingCredentialError,
    NutritionLabelError,
)


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/plan")
    async def plan(profile: ProfileInput) -> dict[str, object]:
        """Compute BMR, macros and the weight projection for a profile."""
        return _format_report(build_report(profile))

    @app.get("/tracker/log")
    async def get_log(request: Request, day: date | None = None) -> dict[str, object]:
        """Return a day's log with totals and target progress."""
        state_container: AppContainer = request.app.state.container
        log = state_container.daily_log_service.load_or_create(day)
        return _format_log(state_container, log)

    @app.post("/tracker/log/foods")
    async def add_food(
        payload: AddFoodRequest, request: Request
    ) -> dict[str, object]:
        """Add a food to today's log."""
        state_container: AppContainer = request.app.state.container
        service = state_container.daily_log_service
        log = service.load_or_create()
        updated = service.add_food(log, payload.name, payload.grams, payload.per_100g)
        response = _format_log(state_container, updated)
        response["added"] = updated is not log
        return response

    @app.delete("/tracker/log/foods/{food_id}")
    async def delete_food(food_id: str, request: Request) -> dict[str, object]:
        """Remove a food from today's log."""
        state_container: AppContainer = request.app.state.container
        service = state_container.daily_log_service
        updated = service.remove_food(service.load_or_create(), food_id)
        return _format_log(state_container, updated)

    @app.post("/tracker/log/reset")
    async def reset_log(request: Request, confirm: bool = False) -> dict[str, object]:
        """Clear today's log. Requires ``confirm=true``."""
        if not confirm:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Clearing the log requires confirm=true",
            )
        state_container: AppContainer = request.app.state.container
        service = state_container.daily_log_service
        updated = service.reset_day(service.load_or_create())
        return _format_log(state_container, updated)

    @app.get("/tracker/profile")
    async def get_profile(request: Request) -> dict[str, object]:
        """Return the tracker targets and preferences."""
        state_container: AppContainer = request.app.state.container
        return state_container.tracker_profile_service.load().model_dump()

    @app.put("/tracker/profile")
    async def update_profile(
        payload: TrackerProfileUpdate, request: Request
    ) -> dict[str, object]:
        """Update tracker targets and preferences."""
        state_container: AppContainer = request.app.state.container
        service = state_container.tracker_profile_service
        profile = service.load()
        if payload.targets is not None:
            changes = payload.targets.model_dump(exclude_none=True)
            if changes:
                profile = service.update_targets(**changes)
        if payload.is_keto_mode is not None:
            profile = service.set_keto_mode(payload.is_keto_mode)
        if payload.model is not None:
            profile = service.set_model(payload.model)
        return profile.model_dump()

    @app.get("/tracker/models")
    async def list_models(request: Request) -> dict[str, object]:
        """Return the selectable label-analysis models."""
        state_container: AppContainer = request.app.state.container
        settings = state_container.settings
        return {
            "default": settings.default_vision_model,
            "options": settings.model_options,
        }

    @app.post("/tracker/label")
    async def analyze_label(
        request: Request, model: str | None = None
    ) -> dict[str, float]:
        """Estimate per-100 g nutrients from a nutrition label image body."""
        state_container: AppContainer = request.app.state.container
        image_bytes = await request.body()
        resolved_model = (
            model or state_container.tracker_profile_service.load().model
        )
        try:
            estimate = await state_container.label_service.analyze(
                image_bytes, resolved_model
            )
        except MissingCredentialError as exc:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
            ) from exc
        except NutritionLabelError as exc:
            logger.warning("Label analysis failed: %s", exc)
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail="Failed to analyze image. Try again or enter values manually.",
            ) from exc
        return estimate.model_dump()

    return app


def _format_report(report: PlanReport) -> dict[str, object]:
    payload = asdict(report)
    payload["tdee"] = report.tdee
    payload["macros"]["rest"]["macros"]["calorie_shares"] = (
        report.macros.rest.macros.calorie_shares()
    )
    payload["macros"]["workout"]["macros"]["calorie_shares"] = (
        report.macros.workout.macros.calorie_shares()
    )
    return jsonable_encoder(payload)


def _format_log(container: AppContainer, log: DailyLog) -> dict[str, object]:
    profile: TrackerProfile = container.tracker_profile_service.load()
    summary = container.daily_log_service.summarize(log, profile)
    return {
        "log": log.model_dump(mode="json", by_alias=True),
        "summary": asdict(summary),
        "is_keto_mode": profile.is_keto_mode,
    }
