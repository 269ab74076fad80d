"""Pydantic models for API request payloads."""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

from recipe_generator.domain.matching import SearchFilters, SearchQuery
from recipe_generator.domain.recipes import sanitize_dietary_tags

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class SearchFiltersPayload(_CamelModel):
    """Optional hard filters for a search."""

    difficulty: Literal["easy", "medium", "hard", "any"] | None = None
    max_cooking_time: int | None = Field(default=None, ge=1, alias="maxCookingTime")
    dietary_restrictions: list[str] | None = Field(
        default=None, alias="dietaryRestrictions"
    )

    def to_filters(self) -> SearchFilters:
        """Convert to domain filters, dropping unknown dietary tags."""
        return SearchFilters(
            difficulty=self.difficulty,
            max_cooking_time=self.max_cooking_time,
            dietary_restrictions=sanitize_dietary_tags(self.dietary_restrictions) or (),
        )


class RecipeSearchRequest(_CamelModel):
    """Payload for recipe search and generation."""

    ingredients: list[NonEmptyStr] = Field(min_length=1)
    filters: SearchFiltersPayload | None = None
    dietary_preferences: list[str] | None = Field(
        default=None, alias="dietaryPreferences"
    )
    servings: int | None = Field(default=None, ge=1, le=16)
    include_suggestions: bool | None = Field(default=None, alias="includeSuggestions")
    recognized_ingredients: list[NonEmptyStr] | None = Field(
        default=None, alias="recognizedIngredients"
    )

    def to_query(self) -> SearchQuery:
        """Build the domain query from the validated payload."""
        return SearchQuery(
            ingredients=tuple(self.ingredients),
            filters=self.filters.to_filters() if self.filters else None,
            dietary_preferences=sanitize_dietary_tags(self.dietary_preferences) or (),
            servings=self.servings,
        )


class RatingRequest(_CamelModel):
    """Payload for rating a recipe; out-of-range ratings are clamped."""

    recipe_id: NonEmptyStr = Field(alias="recipeId")
    rating: int


class PreferencesRequest(_CamelModel):
    """Partial preferences update; omitted fields keep their stored value."""

    dietary_preferences: list[str] | None = Field(
        default=None, alias="dietaryPreferences"
    )
    disliked_ingredients: list[str] | None = Field(
        default=None, alias="dislikedIngredients"
    )
    favorite_cuisines: list[str] | None = Field(default=None, alias="favoriteCuisines")
