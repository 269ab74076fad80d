"""Models for image ingredient recognition results."""

from pydantic import BaseModel, Field


class IngredientPrediction(BaseModel):
    """Single ingredient label predicted from an image."""

    label: str
    confidence: float = Field(ge=0.0, le=1.0)
