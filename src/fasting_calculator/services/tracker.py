"""Daily food log and tracker profile services."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime
from uuid import uuid4
from zoneinfo import ZoneInfo

from pydantic import ValidationError

from fasting_calculator.domain.tracker import (
    DEFAULT_LABEL_MODEL,
    DailyLog,
    DailyTotals,
    FoodDraft,
    FoodItem,
    MacroProgress,
    Nutrients,
    TrackerProfile,
    TrackerSummary,
    TrackerTargets,
    coerce_amount,
)
from fasting_calculator.services.storage import KeyValueStore

LOG_KEY_PREFIX = "if-tracker-log-"
PROFILE_KEY = "if-tracker-profile"

_logger = logging.getLogger(__name__)


@dataclass
class DailyLogService:
    """Keeps one food log per calendar day, persisted after every change.

    Logs are immutable: every mutation returns a new log, and the new log is
    written to the store before it is returned.
    """

    store: KeyValueStore
    timezone_name: str = "UTC"
    key_prefix: str = LOG_KEY_PREFIX

    def today(self) -> date:
        """Return the current date in the configured timezone."""
        return datetime.now(tz=ZoneInfo(self.timezone_name)).date()

    def load_or_create(self, day: date | None = None) -> DailyLog:
        """Return the stored log for ``day`` or a fresh empty one.

        Never writes; a log is only persisted once it is first mutated.
        """
        resolved = day or self.today()
        raw = self.store.get(self._key(resolved))
        if raw is None:
            return DailyLog(date=resolved)
        try:
            log = DailyLog.model_validate_json(raw)
        except ValidationError as exc:
            _logger.warning("Discarding malformed log for %s: %s", resolved, exc)
            return DailyLog(date=resolved)
        if log.day != resolved:
            _logger.warning(
                "Discarding log stored for %s under key for %s", log.day, resolved
            )
            return DailyLog(date=resolved)
        return log

    def add_food(
        self,
        log: DailyLog,
        name: str,
        grams: object,
        per_100g: Nutrients | Mapping[str, object],
    ) -> DailyLog:
        """Prepend a food to the log; blank names or non-positive grams are ignored."""
        amount = coerce_amount(grams)
        label = name.strip() if isinstance(name, str) else ""
        if not label or amount <= 0:
            return log
        reference = Nutrients.model_validate(per_100g)
        eaten = reference.scaled(amount / 100)
        item = FoodItem(
            id=str(uuid4()),
            name=label,
            grams=amount,
            per_100g=reference,
            calories=eaten.calories,
            protein=eaten.protein,
            carbs=eaten.carbs,
            fiber=eaten.fiber,
            fat=eaten.fat,
        )
        updated = log.model_copy(update={"foods": (item, *log.foods)})
        self._persist(updated)
        _logger.info(
            "Logged food: day=%s name=%s grams=%s", log.day, item.name, item.grams
        )
        return updated

    def add_draft(self, log: DailyLog, draft: FoodDraft) -> DailyLog:
        """Add a pending draft to the log."""
        return self.add_food(log, draft.name, draft.grams, draft.per_100g)

    def remove_food(self, log: DailyLog, food_id: str) -> DailyLog:
        """Remove the food with ``food_id``; unknown ids are ignored."""
        remaining = tuple(food for food in log.foods if food.id != food_id)
        if len(remaining) == len(log.foods):
            return log
        updated = log.model_copy(update={"foods": remaining})
        self._persist(updated)
        _logger.info("Removed food: day=%s id=%s", log.day, food_id)
        return updated

    def reset_day(self, log: DailyLog) -> DailyLog:
        """Clear every food from the log, keeping its date."""
        updated = DailyLog(date=log.day)
        self._persist(updated)
        _logger.info("Cleared log: day=%s", log.day)
        return updated

    def totals(self, log: DailyLog) -> DailyTotals:
        """Sum the eaten nutrients of every food in the log."""
        return compute_totals(log)

    def summarize(self, log: DailyLog, profile: TrackerProfile) -> TrackerSummary:
        """Compare the log's totals with the tracker targets."""
        totals = compute_totals(log)
        targets = profile.targets
        progress = [
            _progress("Protein", totals.protein, targets.protein),
            _progress("Fat", totals.fat, targets.fat),
        ]
        if profile.is_keto_mode:
            progress.append(_progress("Net Carbs", totals.net_carbs, targets.net_carbs))
        else:
            progress.append(_progress("Carbs", totals.carbs, targets.carbs))
        return TrackerSummary(
            totals=totals,
            calorie_target=targets.calories,
            calories_remaining=targets.calories - totals.calories,
            progress=progress,
        )

    def _key(self, day: date) -> str:
        return f"{self.key_prefix}{day.isoformat()}"

    def _persist(self, log: DailyLog) -> None:
        self.store.set(self._key(log.day), log.model_dump_json(by_alias=True))


def compute_totals(log: DailyLog) -> DailyTotals:
    """Sum nutrients across a log; net carbs never go below zero."""
    calories = protein = carbs = fat = fiber = 0.0
    for food in log.foods:
        calories += food.calories
        protein += food.protein
        carbs += food.carbs
        fat += food.fat
        fiber += food.fiber
    return DailyTotals(
        calories=calories,
        protein=protein,
        carbs=carbs,
        fat=fat,
        fiber=fiber,
        net_carbs=max(0.0, carbs - fiber),
    )


def _progress(label: str, consumed: float, target: float) -> MacroProgress:
    percent = 0.0
    if target > 0:
        percent = min(100.0, max(0.0, consumed / target * 100))
    return MacroProgress(label=label, consumed=consumed, target=target, percent=percent)


@dataclass
class TrackerProfileService:
    """Stores the tracker targets and preferences."""

    store: KeyValueStore
    key: str = PROFILE_KEY
    default_model: str = DEFAULT_LABEL_MODEL

    def load(self) -> TrackerProfile:
        """Return the stored profile, or the defaults."""
        raw = self.store.get(self.key)
        if raw is None:
            return TrackerProfile(model=self.default_model)
        try:
            return TrackerProfile.model_validate_json(raw)
        except ValidationError as exc:
            _logger.warning("Discarding malformed tracker profile: %s", exc)
            return TrackerProfile(model=self.default_model)

    def save(self, profile: TrackerProfile) -> TrackerProfile:
        """Persist a profile."""
        self.store.set(self.key, profile.model_dump_json())
        return profile

    def update_targets(self, **changes: float) -> TrackerProfile:
        """Update some daily targets, keeping the others."""
        profile = self.load()
        targets = TrackerTargets.model_validate(
            {**profile.targets.model_dump(), **changes}
        )
        return self.save(profile.model_copy(update={"targets": targets}))

    def set_keto_mode(self, enabled: bool) -> TrackerProfile:
        """Switch carb tracking between total and net carbs."""
        profile = self.load()
        return self.save(profile.model_copy(update={"is_keto_mode": enabled}))

    def set_model(self, model: str) -> TrackerProfile:
        """Choose the label-analysis model."""
        profile = self.load()
        return self.save(profile.model_copy(update={"model": model}))
