"""Hugging Face Inference API client for image classification."""

from dataclasses import dataclass

import httpx

from recipe_generator.errors import RecognitionFailedError
from recipe_generator.services.recognition import IngredientClassifier


@dataclass
class HttpxHuggingFaceClient(IngredientClassifier):
    """HTTPX-backed client for a hosted image-classification model."""

    api_token: str
    model_url: str
    http_client: httpx.AsyncClient
    timeout_seconds: float = 30.0

    @classmethod
    def create(
        cls,
        api_token: str,
        model: str,
        base_url: str,
        timeout_seconds: float = 30.0,
    ) -> "HttpxHuggingFaceClient":
        """Create a client with a managed httpx session."""
        return cls(
            api_token=api_token,
            model_url=f"{base_url.rstrip('/')}/{model}",
            http_client=httpx.AsyncClient(),
            timeout_seconds=timeout_seconds,
        )

    async def classify(self, image_bytes: bytes) -> list[dict[str, object]]:
        """Send raw image bytes and return the model's label scores."""
        response = await self.http_client.post(
            self.model_url,
            headers={
                "Authorization": f"Bearer {self.api_token}",
                "Content-Type": "application/octet-stream",
            },
            content=image_bytes,
            timeout=self.timeout_seconds,
        )
        if response.is_error:
            raise RecognitionFailedError(
                f"Hugging Face request failed: {response.status_code} {response.text}"
            )
        payload = response.json()
        if not isinstance(payload, list):
            raise RecognitionFailedError(
                f"Hugging Face returned an unexpected payload: {payload!r}"
            )
        return payload

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
