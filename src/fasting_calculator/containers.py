"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from fasting_calculator.adapters.gemini_vision_client import HttpxGeminiVisionClient
from fasting_calculator.adapters.json_file_store import JsonFileStore
from fasting_calculator.adapters.openai_vision_client import OpenAIVisionClient
from fasting_calculator.adapters.supabase_store import SupabaseKeyValueStore
from fasting_calculator.config import Settings
from fasting_calculator.services.storage import KeyValueStore
from fasting_calculator.services.tracker import DailyLogService, TrackerProfileService
from fasting_calculator.services.vision import NutritionLabelService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    store: KeyValueStore
    daily_log_service: DailyLogService
    tracker_profile_service: TrackerProfileService
    label_service: NutritionLabelService
    close_resources: Callable[[], Awaitable[None]]


def build_store(settings: Settings) -> KeyValueStore:
    """Use Supabase when it is configured, local JSON files otherwise."""
    if settings.uses_supabase:
        client = create_client(settings.supabase_url, settings.supabase_service_key)
        return SupabaseKeyValueStore(client, table=settings.supabase_table)
    return JsonFileStore(settings.data_dir)


def build_vision_client(
    settings: Settings,
) -> HttpxGeminiVisionClient | OpenAIVisionClient | None:
    """Create the configured vision client, or None without an API key."""
    if settings.vision_provider == "openai":
        if not settings.openai_api_key:
            return None
        return OpenAIVisionClient.create(
            settings.openai_api_key,
            reasoning_effort=settings.openai_reasoning_effort,
            store=settings.openai_store,
        )
    if not settings.gemini_api_key:
        return None
    return HttpxGeminiVisionClient.create(
        api_key=settings.gemini_api_key,
        base_url=settings.gemini_base_url,
    )


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    store = build_store(resolved_settings)
    vision_client = build_vision_client(resolved_settings)
    label_service = NutritionLabelService(
        client=vision_client,
        default_model=resolved_settings.default_vision_model,
    )

    async def close_resources() -> None:
        if vision_client is not None:
            await vision_client.close()

    return AppContainer(
        settings=resolved_settings,
        store=store,
        daily_log_service=DailyLogService(
            store, timezone_name=resolved_settings.timezone
        ),
        tracker_profile_service=TrackerProfileService(
            store, default_model=resolved_settings.default_vision_model
        ),
        label_service=label_service,
        close_resources=close_resources,
    )
