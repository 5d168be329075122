"""Application configuration."""

import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

GEMINI_MODEL_OPTIONS = (
    "gemini-2.0-flash",
    "gemini-2.5-flash",
    "gemini-2.5-pro",
    "gemini-3-pro-preview",
)
OPENAI_MODEL_OPTIONS = ("gpt-5.2", "gpt-5-mini", "gpt-4.1-mini")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    data_dir: Path = Path(".fasting_calculator")
    timezone: str = "UTC"
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    supabase_table: str = "tracker_store"
    vision_provider: str = "gemini"
    gemini_api_key: str | None = None
    gemini_model: str = "gemini-2.5-flash"
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    vision_model_options: str | None = None
    openai_api_key: str | None = None
    openai_model: str = "gpt-5.2"
    openai_reasoning_effort: str | None = None
    openai_store: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @property
    def uses_supabase(self) -> bool:
        """Return True when both Supabase credentials are configured."""
        return bool(self.supabase_url and self.supabase_service_key)

    @property
    def default_vision_model(self) -> str:
        """Return the model identifier for the configured vision provider."""
        if self.vision_provider == "openai":
            return self.openai_model
        return self.gemini_model

    @property
    def model_options(self) -> list[str]:
        """Return selectable models, the provider's list unless overridden."""
        options = parse_model_options(self.vision_model_options)
        if not options:
            defaults = (
                OPENAI_MODEL_OPTIONS
                if self.vision_provider == "openai"
                else GEMINI_MODEL_OPTIONS
            )
            options = list(defaults)
        if self.default_vision_model not in options:
            options.insert(0, self.default_vision_model)
        return options


def parse_model_options(raw: str | None) -> list[str]:
    """Parse a comma-separated list of label-analysis model identifiers."""
    if raw is None:
        return []
    options: list[str] = []
    for chunk in raw.split(","):
        value = chunk.strip()
        if value and value not in options:
            options.append(value)
    return options
