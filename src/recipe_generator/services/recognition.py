"""Ingredient recognition from photos."""

import logging
from dataclasses import dataclass
from typing import Protocol

from pydantic import ValidationError

from recipe_generator.domain.recognition import IngredientPrediction
from recipe_generator.errors import (
    RecognitionError,
    RecognitionFailedError,
    RecognitionNotConfiguredError,
)

MAX_PREDICTIONS = 5

_logger = logging.getLogger(__name__)


class IngredientClassifier(Protocol):
    """Interface for image classification backends."""

    async def classify(self, image_bytes: bytes) -> list[dict[str, object]]:
        """Return raw predictions as ``{"label": str, "score": float}`` dicts."""


@dataclass
class RecognitionService:
    """Service that turns classifier output into ranked predictions.

    ``client`` is None when no credential is configured.
    """

    client: IngredientClassifier | None
    credential_name: str = "HF_API_TOKEN"
    limit: int = MAX_PREDICTIONS

    @property
    def is_configured(self) -> bool:
        """Return True when a classifier backend is available."""
        return self.client is not None

    async def classify(self, image_bytes: bytes) -> list[IngredientPrediction]:
        """Classify an image and return the most confident labels."""
        if self.client is None:
            raise RecognitionNotConfiguredError(self.credential_name)
        try:
            raw = await self.client.classify(image_bytes)
        except RecognitionError:
            raise
        except Exception as exc:
            raise RecognitionFailedError(f"Recognition request failed: {exc}") from exc

        try:
            predictions = [
                IngredientPrediction(label=item["label"], confidence=item["score"])
                for item in raw
            ]
        except (KeyError, TypeError, ValidationError) as exc:
            raise RecognitionFailedError(
                "Recognition service returned an unexpected payload"
            ) from exc

        ranked = sorted(predictions, key=lambda item: item.confidence, reverse=True)
        _logger.info("Image classified: predictions=%s", len(ranked))
        return ranked[: self.limit]
