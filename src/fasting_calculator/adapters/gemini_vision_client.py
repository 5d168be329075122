"""Gemini generateContent client for nutrition label extraction."""

from dataclasses import dataclass

import httpx

from fasting_calculator.services.vision import VisionClient


@dataclass
class HttpxGeminiVisionClient(VisionClient):
    """HTTPX-backed Gemini client."""

    api_key: str
    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, api_key: str, base_url: str) -> "HttpxGeminiVisionClient":
        """Create a Gemini client with a managed httpx session."""
        return cls(api_key=api_key, base_url=base_url, http_client=httpx.AsyncClient())

    async def extract(  # noqa: PLR0913
        self,
        *,
        model: str,
        image_base64: str,
        mime_type: str,
        prompt: str,
        schema: dict[str, object],
    ) -> str:
        """Send the image inline and return the concatenated text parts."""
        url = f"{self.base_url}/models/{model}:generateContent"
        response = await self.http_client.post(
            url,
            headers={"x-goog-api-key": self.api_key},
            json={
                "contents": [
                    {
                        "parts": [
                            {
                                "inline_data": {
                                    "mime_type": mime_type,
                                    "data": image_base64,
                                }
                            },
                            {"text": prompt},
                        ]
                    }
                ],
                "generationConfig": {
                    "responseMimeType": "application/json",
                    "responseSchema": _to_gemini_schema(schema),
                },
            },
            timeout=60,
        )
        response.raise_for_status()
        text = _response_text(response.json())
        if not text:
            raise RuntimeError("Gemini returned an empty response")
        return text

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()


def _to_gemini_schema(schema: dict[str, object]) -> dict[str, object]:
    """Convert a JSON schema to Gemini's OpenAPI subset."""
    converted: dict[str, object] = {}
    for key, value in schema.items():
        if key == "additionalProperties":
            continue
        if key == "type" and isinstance(value, str):
            converted[key] = value.upper()
        elif key == "properties" and isinstance(value, dict):
            converted[key] = {
                name: _to_gemini_schema(prop) for name, prop in value.items()
            }
        else:
            converted[key] = value
    return converted


def _response_text(payload: dict[str, object]) -> str:
    candidates = payload.get("candidates") or []
    if not candidates:
        return ""
    content = candidates[0].get("content") or {}
    parts = content.get("parts") or []
    return "".join(str(part.get("text", "")) for part in parts)
