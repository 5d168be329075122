"""Nutrition label analysis through a vision-capable LLM."""

import base64
import json
import logging
from dataclasses import dataclass
from typing import Protocol

from fasting_calculator.domain.tracker import FoodDraft, Nutrients

NUTRIENT_KEYS = ("calories", "protein", "carbs", "fiber", "fat")
SCANNED_FOOD_NAME = "Scanned Food"

LABEL_PROMPT = (
    "Extract nutrition per 100g from this label. "
    "Return ONLY a JSON object with these keys: calories, protein, carbs, fiber, "
    "fat. All values should be numbers. If a value is missing, use 0. "
    "Do not use markdown code blocks."
)

LABEL_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {key: {"type": "number"} for key in NUTRIENT_KEYS},
    "required": list(NUTRIENT_KEYS),
    "additionalProperties": False,
}

_logger = logging.getLogger(__name__)


class NutritionLabelError(RuntimeError):
    """Label analysis failed or produced unusable output."""


class MissingCredentialError(NutritionLabelError):
    """No API key is configured for label analysis."""


class VisionClient(Protocol):
    """Interface for LLM vision extraction."""

    async def extract(  # noqa: PLR0913
        self,
        *,
        model: str,
        image_base64: str,
        mime_type: str,
        prompt: str,
        schema: dict[str, object],
    ) -> str:
        """Return the model's raw text answer."""


@dataclass
class NutritionLabelService:
    """Turns a nutrition label photo into per-100 g nutrients."""

    client: VisionClient | None
    default_model: str

    async def analyze(self, image_bytes: bytes, model: str | None = None) -> Nutrients:
        """Return the per-100 g nutrients read from a label image."""
        if self.client is None:
            raise MissingCredentialError("No API key configured for label analysis")
        if not image_bytes:
            raise NutritionLabelError("No image provided")
        resolved_model = model or self.default_model
        try:
            raw = await self.client.extract(
                model=resolved_model,
                image_base64=base64.b64encode(image_bytes).decode("utf-8"),
                mime_type=detect_mime_type(image_bytes),
                prompt=LABEL_PROMPT,
                schema=LABEL_SCHEMA,
            )
        except Exception as exc:
            _logger.exception("Label analysis failed: model=%s", resolved_model)
            raise NutritionLabelError("Failed to analyze image") from exc
        return parse_label_estimate(raw)

    async def autofill(
        self, draft: FoodDraft, image_bytes: bytes, model: str | None = None
    ) -> FoodDraft:
        """Return a copy of ``draft`` filled from a label image.

        Raises before producing anything, so a failed analysis leaves the
        caller's draft as it was.
        """
        estimate = await self.analyze(image_bytes, model)
        updates: dict[str, object] = {"per_100g": estimate}
        if not draft.name.strip():
            updates["name"] = SCANNED_FOOD_NAME
        return draft.model_copy(update=updates)


def parse_label_estimate(raw: str | None) -> Nutrients:
    """Parse model text into nutrients, defaulting bad fields to 0."""
    text = (raw or "").replace("```json", "").replace("```", "").strip()
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise NutritionLabelError("Label analysis returned unparseable output") from exc
    if not isinstance(data, dict):
        raise NutritionLabelError("Label analysis did not return a JSON object")
    return Nutrients.model_validate({key: data.get(key) for key in NUTRIENT_KEYS})


def detect_mime_type(image_bytes: bytes) -> str:
    """Infer a basic image MIME type from file signatures."""
    if image_bytes.startswith(b"\xff\xd8\xff"):
        return "image/jpeg"
    if image_bytes.startswith(b"\x89PNG\r\n\x1a\n"):
        return "image/png"
    if image_bytes[:4] == b"RIFF" and image_bytes[8:12] == b"WEBP":
        return "image/webp"
    return "image/jpeg"
