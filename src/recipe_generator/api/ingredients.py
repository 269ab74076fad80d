"""Image ingredient recognition endpoint."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, File, Request, UploadFile, status
from fastapi.responses import JSONResponse

from recipe_generator.errors import RecognitionError, RecognitionNotConfiguredError

if TYPE_CHECKING:
    from recipe_generator.containers import AppContainer

router = APIRouter(prefix="/api/ingredients", tags=["ingredients"])

_logger = logging.getLogger(__name__)


@router.post("/analyze-image", response_model=None)
async def analyze_image(
    request: Request, image: UploadFile | None = File(default=None)
) -> dict[str, object] | JSONResponse:
    """Recognize ingredients in an uploaded photo."""
    container: AppContainer = request.app.state.container
    if image is None:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": "Image file is required"},
        )
    limit = container.settings.max_upload_bytes
    # one byte past the limit is enough to tell an oversized upload
    image_bytes = await image.read(limit + 1)
    if not image_bytes:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": "Image file is required"},
        )
    if len(image_bytes) > limit:
        return JSONResponse(
            status_code=413,
            content={"message": "Image file is too large"},
        )

    try:
        predictions = await container.recognition_service.classify(image_bytes)
    except RecognitionNotConfiguredError as exc:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"message": str(exc), "requiresToken": True},
        )
    except RecognitionError:
        _logger.exception(
            "Image analysis failed", extra={"upload_filename": image.filename}
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Unable to analyze image"},
        )
    return {"predictions": [item.model_dump() for item in predictions]}
