"""Endpoints for the shared user state."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request

from recipe_generator.api.models import PreferencesRequest, RatingRequest
from recipe_generator.api.serializers import (
    favorites_to_list,
    match_to_dict,
    preferences_to_dict,
    ratings_to_list,
)

if TYPE_CHECKING:
    from recipe_generator.containers import AppContainer

router = APIRouter(prefix="/api/user", tags=["user"])


@router.get("/preferences")
async def get_preferences(request: Request) -> dict[str, list[str]]:
    container: AppContainer = request.app.state.container
    return preferences_to_dict(container.user_service.get_preferences())


@router.put("/preferences")
async def update_preferences(
    payload: PreferencesRequest, request: Request
) -> dict[str, list[str]]:
    """Merge the submitted preference fields over the stored ones."""
    container: AppContainer = request.app.state.container
    updated = container.user_service.update_preferences(
        dietary_preferences=payload.dietary_preferences,
        disliked_ingredients=payload.disliked_ingredients,
        favorite_cuisines=payload.favorite_cuisines,
    )
    return preferences_to_dict(updated.preferences)


@router.get("/favorites")
async def get_favorites(request: Request) -> list[dict[str, str]]:
    container: AppContainer = request.app.state.container
    return favorites_to_list(container.user_service.get_user_data())


@router.post("/favorites/{recipe_id}")
async def toggle_favorite(recipe_id: str, request: Request) -> list[dict[str, str]]:
    """Save or unsave a recipe."""
    container: AppContainer = request.app.state.container
    return favorites_to_list(container.user_service.toggle_favorite(recipe_id))


@router.get("/ratings")
async def get_ratings(request: Request) -> list[dict[str, object]]:
    container: AppContainer = request.app.state.container
    return ratings_to_list(container.user_service.get_user_data())


@router.post("/ratings")
async def rate_recipe(payload: RatingRequest, request: Request) -> list[dict[str, object]]:
    """Store a rating and echo all ratings."""
    container: AppContainer = request.app.state.container
    updated = container.user_service.rate_recipe(payload.recipe_id, payload.rating)
    return ratings_to_list(updated)


@router.get("/suggestions")
async def get_suggestions(request: Request) -> list[dict[str, object]]:
    """Return personalized suggestions."""
    container: AppContainer = request.app.state.container
    return [match_to_dict(item) for item in container.user_service.get_suggestions()]
