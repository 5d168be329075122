"""Shared test fixtures."""

from dataclasses import dataclass, field
from pathlib import Path

import pytest

from fasting_calculator.config import Settings
from fasting_calculator.containers import AppContainer
from fasting_calculator.services.storage import InMemoryKeyValueStore, KeyValueStore
from fasting_calculator.services.tracker import DailyLogService, TrackerProfileService
from fasting_calculator.services.vision import NutritionLabelService, VisionClient


@dataclass
class FakeVisionClient(VisionClient):
    """Fake vision client returning a fixed answer."""

    response: str = (
        '{"calories": 250, "protein": 12, "carbs": 30, "fiber": 4, "fat": 9}'
    )
    calls: list[dict[str, object]] = field(default_factory=list)

    async def extract(  # noqa: PLR0913
        self,
        *,
        model: str,
        image_base64: str,
        mime_type: str,
        prompt: str,
        schema: dict[str, object],
    ) -> str:
        self.calls.append(
            {
                "model": model,
                "image_base64": image_base64,
                "mime_type": mime_type,
                "prompt": prompt,
                "schema": schema,
            }
        )
        return self.response


@dataclass
class FailingVisionClient(VisionClient):
    """Vision client that always raises."""

    async def extract(  # noqa: PLR0913
        self,
        *,
        model: str,
        image_base64: str,
        mime_type: str,
        prompt: str,
        schema: dict[str, object],
    ) -> str:
        raise RuntimeError("model unavailable")


@dataclass
class ReadOnlyStore(KeyValueStore):
    """Store whose writes fail."""

    values: dict[str, str] = field(default_factory=dict)

    def get(self, key: str) -> str | None:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        raise OSError("storage unavailable")


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(_env_file=None, data_dir=tmp_path / "data")


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def vision_client() -> FakeVisionClient:
    return FakeVisionClient()


@pytest.fixture
def container(
    settings: Settings,
    store: InMemoryKeyValueStore,
    vision_client: FakeVisionClient,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        store=store,
        daily_log_service=DailyLogService(store),
        tracker_profile_service=TrackerProfileService(store),
        label_service=NutritionLabelService(
            client=vision_client,
            default_model=settings.default_vision_model,
        ),
        close_resources=close_resources,
    )
