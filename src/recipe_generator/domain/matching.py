"""Models for ingredient search queries and match results."""

from dataclasses import dataclass

from recipe_generator.domain.recipes import Ingredient, Recipe, SubstitutionSuggestion


@dataclass(frozen=True)
class SearchFilters:
    """Hard constraints applied before scoring.

    ``None`` and an empty tuple both mean "no constraint".
    """

    difficulty: str | None = None
    max_cooking_time: int | None = None
    dietary_restrictions: tuple[str, ...] = ()


@dataclass(frozen=True)
class SearchQuery:
    """Ingredient search request, validated at the API boundary."""

    ingredients: tuple[str, ...]
    filters: SearchFilters | None = None
    dietary_preferences: tuple[str, ...] = ()
    servings: int | None = None


@dataclass(frozen=True)
class MatchResult:
    """Scored recipe produced by the matching or suggestion engines."""

    recipe: Recipe
    score: float
    matched_ingredients: tuple[str, ...] = ()
    missing_ingredients: tuple[str, ...] = ()
    substitution_options: tuple[SubstitutionSuggestion, ...] = ()
    servings: int | None = None
    scaled_ingredients: tuple[Ingredient, ...] | None = None
    notes: tuple[str, ...] | None = None
