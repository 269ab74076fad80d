"""Recipe catalog service."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from recipe_generator.domain.matching import MatchResult, SearchQuery
from recipe_generator.domain.recipes import Recipe
from recipe_generator.errors import RecipeNotFoundError
from recipe_generator.services.matching import search_recipes

_logger = logging.getLogger(__name__)


@dataclass
class RecipeService:
    """Application service over the immutable recipe catalog."""

    catalog: tuple[Recipe, ...]

    def list_recipes(self) -> tuple[Recipe, ...]:
        """Return every recipe in catalog order."""
        return self.catalog

    def get_recipe(self, recipe_id: str) -> Recipe:
        """Return a recipe by id or raise RecipeNotFoundError."""
        for recipe in self.catalog:
            if recipe.id == recipe_id:
                return recipe
        raise RecipeNotFoundError(recipe_id)

    def search(self, query: SearchQuery) -> list[MatchResult]:
        """Match the catalog against the query."""
        results = search_recipes(self.catalog, query)
        _logger.info(
            "Recipe search: ingredients=%s matches=%s",
            len(query.ingredients),
            len(results),
        )
        return results

    def generate(
        self, query: SearchQuery, recognized_ingredients: Sequence[str] = ()
    ) -> list[MatchResult]:
        """Search using typed ingredients combined with recognized ones."""
        combined = tuple(dict.fromkeys([*query.ingredients, *recognized_ingredients]))
        return self.search(
            SearchQuery(
                ingredients=combined,
                filters=query.filters,
                dietary_preferences=query.dietary_preferences,
                servings=query.servings,
            )
        )
