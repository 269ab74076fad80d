"""Load the recipe catalog from a JSON file."""

import json
import logging
from pathlib import Path

from recipe_generator.domain.recipes import (
    DIFFICULTY_LEVELS,
    Ingredient,
    NutritionFacts,
    Recipe,
    SubstitutionSuggestion,
)

DEFAULT_RECIPES_PATH = Path(__file__).resolve().parents[1] / "data" / "recipes.json"

_logger = logging.getLogger(__name__)


def load_catalog(path: str | Path | None = None) -> tuple[Recipe, ...]:
    """Read recipes from JSON, preserving file order.

    Falls back to the bundled catalog when no path is given.
    """
    catalog_path = Path(path) if path else DEFAULT_RECIPES_PATH
    with catalog_path.open("r", encoding="utf-8") as handle:
        rows = json.load(handle)
    recipes = tuple(_to_recipe(row) for row in rows)
    _logger.info("Loaded %s recipes from %s", len(recipes), catalog_path)
    return recipes


def _to_recipe(row: dict) -> Recipe:
    if row["difficulty"] not in DIFFICULTY_LEVELS:
        raise ValueError(
            f"Recipe {row['id']} has unknown difficulty: {row['difficulty']}"
        )
    nutrition = row.get("nutrition") or {}
    return Recipe(
        id=str(row["id"]),
        title=row["title"],
        description=row.get("description", ""),
        cuisine=row.get("cuisine", ""),
        difficulty=row["difficulty"],
        cooking_time=int(row["cookingTime"]),
        base_servings=int(row["baseServings"]),
        dietary_tags=tuple(row.get("dietaryTags", [])),
        ingredients=tuple(_to_ingredient(item) for item in row.get("ingredients", [])),
        steps=tuple(row.get("steps", [])),
        nutrition=NutritionFacts(
            calories=nutrition.get("calories", 0),
            protein=nutrition.get("protein", 0),
            carbs=nutrition.get("carbs", 0),
            fat=nutrition.get("fat", 0),
            fiber=nutrition.get("fiber"),
            sugar=nutrition.get("sugar"),
        ),
        substitution_suggestions=tuple(
            SubstitutionSuggestion(
                ingredient=item["ingredient"],
                substitutes=tuple(item.get("substitutes", [])),
                note=item.get("note"),
            )
            for item in row.get("substitutionSuggestions", [])
        ),
        image=row.get("image"),
    )


def _to_ingredient(item: dict) -> Ingredient:
    return Ingredient(
        name=item["name"],
        quantity=item["quantity"],
        unit=item.get("unit", ""),
        preparation=item.get("preparation"),
        optional=bool(item.get("optional", False)),
    )
