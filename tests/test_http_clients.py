"""Tests for HTTP-based adapters."""

import asyncio
import json

import httpx
import pytest

from recipe_generator.adapters.huggingface_client import HttpxHuggingFaceClient
from recipe_generator.adapters.openai_vision_client import (
    OpenAIVisionClassifier,
    _to_data_url,
)
from recipe_generator.errors import RecognitionFailedError


def test_huggingface_client_posts_image_bytes() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=[{"label": "pizza", "score": 0.9}])

    client = HttpxHuggingFaceClient(
        api_token="hf-token",
        model_url="https://api.test/models/nateraw/food",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )

    result = asyncio.run(client.classify(b"image-bytes"))

    assert result == [{"label": "pizza", "score": 0.9}]
    request = seen[0]
    assert request.url.path == "/models/nateraw/food"
    assert request.headers["Authorization"] == "Bearer hf-token"
    assert request.headers["Content-Type"] == "application/octet-stream"
    assert request.content == b"image-bytes"


def test_huggingface_client_raises_on_error_status() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, json={"error": "Model is loading"})

    client = HttpxHuggingFaceClient(
        api_token="hf-token",
        model_url="https://api.test/models/nateraw/food",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )

    with pytest.raises(RecognitionFailedError, match="503"):
        asyncio.run(client.classify(b"image-bytes"))


def test_huggingface_create_builds_model_url() -> None:
    client = HttpxHuggingFaceClient.create(
        api_token="hf-token", model="nateraw/food", base_url="https://api.test/models/"
    )

    assert client.model_url == "https://api.test/models/nateraw/food"
    asyncio.run(client.close())


class _FakeResponses:
    def __init__(self, output_text: str) -> None:
        self.output_text = output_text
        self.last_payload: dict[str, object] | None = None

    async def create(self, **kwargs):  # type: ignore[no-untyped-def]
        self.last_payload = kwargs
        return type("Resp", (), {"output_text": self.output_text})()


class _FakeOpenAI:
    def __init__(self, output_text: str) -> None:
        self.responses = _FakeResponses(output_text)


def test_openai_classifier_parses_predictions() -> None:
    fake = _FakeOpenAI(json.dumps({"predictions": [{"label": "egg", "score": 0.8}]}))
    client = OpenAIVisionClassifier(client=fake, model="gpt-4o-mini")

    result = asyncio.run(client.classify(b"\x89PNG\r\n\x1a\nrest"))

    assert result == [{"label": "egg", "score": 0.8}]
    payload = fake.responses.last_payload
    assert payload["model"] == "gpt-4o-mini"
    image_part = payload["input"][0]["content"][1]
    assert image_part["image_url"].startswith("data:image/png;base64,")


def test_openai_classifier_rejects_empty_output() -> None:
    client = OpenAIVisionClassifier(client=_FakeOpenAI(""), model="gpt-4o-mini")

    with pytest.raises(RecognitionFailedError):
        asyncio.run(client.classify(b"image-bytes"))


def test_to_data_url_defaults_to_jpeg() -> None:
    assert _to_data_url(b"unknown").startswith("data:image/jpeg;base64,")
