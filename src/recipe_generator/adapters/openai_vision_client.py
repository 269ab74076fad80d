"""OpenAI Responses API client for ingredient recognition."""

import base64
import json
from dataclasses import dataclass

from openai import AsyncOpenAI

from recipe_generator.errors import RecognitionFailedError
from recipe_generator.services.recognition import IngredientClassifier

PREDICTION_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "predictions": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "label": {"type": "string"},
                    "score": {"type": "number", "minimum": 0.0, "maximum": 1.0},
                },
                "required": ["label", "score"],
                "additionalProperties": False,
            },
        }
    },
    "required": ["predictions"],
    "additionalProperties": False,
}

PROMPT = (
    "List the food ingredients visible in the image. "
    "Return each as a short lowercase label with a confidence score (0-1)."
)


@dataclass
class OpenAIVisionClassifier(IngredientClassifier):
    """Ingredient classifier backed by the OpenAI Responses API."""

    client: AsyncOpenAI
    model: str
    timeout_seconds: float = 30.0

    @classmethod
    def create(
        cls, api_key: str, model: str, timeout_seconds: float = 30.0
    ) -> "OpenAIVisionClassifier":
        """Create an OpenAI-backed classifier."""
        return cls(
            client=AsyncOpenAI(api_key=api_key, timeout=timeout_seconds),
            model=model,
            timeout_seconds=timeout_seconds,
        )

    async def classify(self, image_bytes: bytes) -> list[dict[str, object]]:
        """Call the Responses API with structured outputs."""
        response = await self.client.responses.create(
            model=self.model,
            input=[
                {
                    "role": "user",
                    "content": [
                        {"type": "input_text", "text": PROMPT},
                        {"type": "input_image", "image_url": _to_data_url(image_bytes)},
                    ],
                }
            ],
            text={
                "format": {
                    "type": "json_schema",
                    "name": "ingredient_predictions",
                    "strict": True,
                    "schema": PREDICTION_SCHEMA,
                }
            },
            store=False,
        )
        output_text = response.output_text
        if not output_text:
            raise RecognitionFailedError("OpenAI returned an empty response")
        return json.loads(output_text)["predictions"]

    async def close(self) -> None:
        """Close the underlying OpenAI client."""
        await self.client.close()


def _to_data_url(image_bytes: bytes) -> str:
    """Convert bytes to a base64 data URL for image input."""
    mime_type = _detect_mime_type(image_bytes)
    encoded = base64.b64encode(image_bytes).decode("utf-8")
    return f"data:{mime_type};base64,{encoded}"


def _detect_mime_type(image_bytes: bytes) -> str:
    """Infer a basic image MIME type from file signatures."""
    if image_bytes.startswith(b"\xff\xd8\xff"):
        return "image/jpeg"
    if image_bytes.startswith(b"\x89PNG\r\n\x1a\n"):
        return "image/png"
    if image_bytes[:4] == b"RIFF" and image_bytes[8:12] == b"WEBP":
        return "image/webp"
    return "image/jpeg"
