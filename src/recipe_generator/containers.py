"""Dependency container wiring for the application."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from recipe_generator.adapters.huggingface_client import HttpxHuggingFaceClient
from recipe_generator.adapters.json_recipe_catalog import load_catalog
from recipe_generator.adapters.json_user_store import JsonUserStateRepository
from recipe_generator.adapters.openai_vision_client import OpenAIVisionClassifier
from recipe_generator.config import Settings
from recipe_generator.services.recipes import RecipeService
from recipe_generator.services.recognition import RecognitionService
from recipe_generator.services.users import UserService

_logger = logging.getLogger(__name__)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    recipe_service: RecipeService
    user_service: UserService
    recognition_service: RecognitionService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    catalog = load_catalog(resolved_settings.recipes_path)
    recipe_service = RecipeService(catalog)
    user_service = UserService(
        repository=JsonUserStateRepository.create(resolved_settings.user_data_path),
        catalog=catalog,
    )
    classifier = _build_classifier(resolved_settings)
    recognition_service = RecognitionService(
        client=classifier,
        credential_name=(
            "OPENAI_API_KEY"
            if resolved_settings.recognition_provider == "openai"
            else "HF_API_TOKEN"
        ),
    )

    async def close_resources() -> None:
        if classifier is not None:
            await classifier.close()

    return AppContainer(
        settings=resolved_settings,
        recipe_service=recipe_service,
        user_service=user_service,
        recognition_service=recognition_service,
        close_resources=close_resources,
    )


def _build_classifier(
    settings: Settings,
) -> HttpxHuggingFaceClient | OpenAIVisionClassifier | None:
    """Return the configured recognition backend, or None without a credential."""
    if settings.recognition_provider == "openai":
        if not settings.openai_api_key:
            _logger.warning("OPENAI_API_KEY is not set; image recognition disabled")
            return None
        return OpenAIVisionClassifier.create(
            api_key=settings.openai_api_key,
            model=settings.openai_model,
            timeout_seconds=settings.recognition_timeout_seconds,
        )
    if not settings.hf_api_token:
        _logger.warning("HF_API_TOKEN is not set; image recognition disabled")
        return None
    return HttpxHuggingFaceClient.create(
        api_token=settings.hf_api_token,
        model=settings.hf_model,
        base_url=settings.hf_base_url,
        timeout_seconds=settings.recognition_timeout_seconds,
    )
