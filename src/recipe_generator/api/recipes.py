"""Recipe catalog and search endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request

from recipe_generator.api.models import RecipeSearchRequest
from recipe_generator.api.serializers import match_to_dict, recipe_to_dict

if TYPE_CHECKING:
    from recipe_generator.containers import AppContainer

router = APIRouter(prefix="/api/recipes", tags=["recipes"])


@router.get("")
async def list_recipes(request: Request) -> list[dict[str, object]]:
    """Return the full catalog."""
    container: AppContainer = request.app.state.container
    return [recipe_to_dict(recipe) for recipe in container.recipe_service.list_recipes()]


@router.get("/{recipe_id}")
async def get_recipe(recipe_id: str, request: Request) -> dict[str, object]:
    """Return a single recipe."""
    container: AppContainer = request.app.state.container
    return recipe_to_dict(container.recipe_service.get_recipe(recipe_id))


@router.post("/search")
async def search_recipes(
    payload: RecipeSearchRequest, request: Request
) -> list[dict[str, object]]:
    """Match the catalog against the submitted ingredients."""
    container: AppContainer = request.app.state.container
    matches = container.recipe_service.search(payload.to_query())
    return [match_to_dict(match) for match in matches]


@router.post("/generate")
async def generate_recipes(
    payload: RecipeSearchRequest, request: Request
) -> dict[str, object]:
    """Match typed plus recognized ingredients, optionally with suggestions."""
    container: AppContainer = request.app.state.container
    matches = container.recipe_service.generate(
        payload.to_query(), payload.recognized_ingredients or ()
    )
    response: dict[str, object] = {"matches": [match_to_dict(m) for m in matches]}
    if payload.include_suggestions:
        suggestions = container.user_service.get_suggestions()
        response["suggestions"] = [match_to_dict(s) for s in suggestions]
    return response
