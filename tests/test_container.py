"""Tests for container wiring."""

import asyncio

from recipe_generator.adapters.huggingface_client import HttpxHuggingFaceClient
from recipe_generator.config import Settings
from recipe_generator.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.recipe_service.list_recipes()
    assert isinstance(container.recognition_service.client, HttpxHuggingFaceClient)
    assert container.user_service.get_user_data().favorites == ()
    asyncio.run(container.close_resources())


def test_build_container_without_token_disables_recognition(tmp_path) -> None:
    settings = Settings(
        hf_api_token="",
        user_data_path=str(tmp_path / "user-data.json"),
    )

    container = build_container(settings)

    assert container.recognition_service.is_configured is False
    asyncio.run(container.close_resources())


def test_openai_provider_requires_key(tmp_path) -> None:
    settings = Settings(
        recognition_provider="openai",
        openai_api_key=None,
        user_data_path=str(tmp_path / "user-data.json"),
    )

    container = build_container(settings)

    assert container.recognition_service.is_configured is False
    assert container.recognition_service.credential_name == "OPENAI_API_KEY"
