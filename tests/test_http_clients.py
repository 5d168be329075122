"""Tests for HTTP-based adapters."""

import asyncio
import json

import httpx
import pytest

from fasting_calculator.adapters.gemini_vision_client import HttpxGeminiVisionClient
from fasting_calculator.adapters.openai_vision_client import OpenAIVisionClient
from fasting_calculator.services.vision import LABEL_SCHEMA


class _FakeResponses:
    def __init__(self, output_text: str) -> None:
        self.output_text = output_text
        self.last_payload: dict[str, object] | None = None

    async def create(self, **kwargs):  # type: ignore[no-untyped-def]
        self.last_payload = kwargs
        return type("Resp", (), {"output_text": self.output_text})()


class _FakeOpenAI:
    def __init__(self, output_text: str = '{"calories": 100}') -> None:
        self.responses = _FakeResponses(output_text)


def test_openai_vision_client_returns_output_text() -> None:
    fake = _FakeOpenAI()
    client = OpenAIVisionClient(client=fake, reasoning_effort="low")

    result = asyncio.run(
        client.extract(
            model="gpt-5.2",
            image_base64="ZmFrZQ==",
            mime_type="image/png",
            prompt="Read the label",
            schema=LABEL_SCHEMA,
        )
    )

    assert result == '{"calories": 100}'
    payload = fake.responses.last_payload
    assert payload is not None
    assert payload["model"] == "gpt-5.2"
    assert payload["reasoning"] == {"effort": "low"}
    image = payload["input"][0]["content"][1]
    assert image["image_url"] == "data:image/png;base64,ZmFrZQ=="


def test_openai_vision_client_rejects_empty_output() -> None:
    client = OpenAIVisionClient(client=_FakeOpenAI(output_text=""))

    with pytest.raises(RuntimeError):
        asyncio.run(
            client.extract(
                model="gpt-5.2",
                image_base64="ZmFrZQ==",
                mime_type="image/jpeg",
                prompt="Read the label",
                schema=LABEL_SCHEMA,
            )
        )


def test_gemini_vision_client_sends_inline_image() -> None:
    seen: dict[str, object] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["key"] = request.headers.get("x-goog-api-key")
        seen["body"] = json.loads(request.content)
        return httpx.Response(
            200,
            json={
                "candidates": [
                    {"content": {"parts": [{"text": '{"calories": '}, {"text": "90}"}]}}
                ]
            },
        )

    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    client = HttpxGeminiVisionClient(
        api_key="gemini-key",
        base_url="https://example.test/v1beta",
        http_client=http_client,
    )

    result = asyncio.run(
        client.extract(
            model="gemini-2.5-flash",
            image_base64="ZmFrZQ==",
            mime_type="image/jpeg",
            prompt="Read the label",
            schema=LABEL_SCHEMA,
        )
    )

    assert result == '{"calories": 90}'
    assert seen["path"] == "/v1beta/models/gemini-2.5-flash:generateContent"
    assert seen["key"] == "gemini-key"
    body = seen["body"]
    assert isinstance(body, dict)
    parts = body["contents"][0]["parts"]
    assert parts[0]["inline_data"] == {"mime_type": "image/jpeg", "data": "ZmFrZQ=="}
    assert parts[1]["text"] == "Read the label"
    schema = body["generationConfig"]["responseSchema"]
    assert schema["type"] == "OBJECT"
    assert schema["properties"]["fat"] == {"type": "NUMBER"}
    assert "additionalProperties" not in schema


def test_gemini_vision_client_raises_on_http_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(403, json={"error": {"message": "bad key"}})

    client = HttpxGeminiVisionClient(
        api_key="bad",
        base_url="https://example.test/v1beta",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(
            client.extract(
                model="gemini-2.5-flash",
                image_base64="ZmFrZQ==",
                mime_type="image/jpeg",
                prompt="Read the label",
                schema=LABEL_SCHEMA,
            )
        )


def test_gemini_vision_client_rejects_empty_candidates() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"candidates": []})

    client = HttpxGeminiVisionClient(
        api_key="key",
        base_url="https://example.test/v1beta",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )

    with pytest.raises(RuntimeError):
        asyncio.run(
            client.extract(
                model="gemini-2.5-flash",
                image_base64="ZmFrZQ==",
                mime_type="image/jpeg",
                prompt="Read the label",
                schema=LABEL_SCHEMA,
            )
        )
