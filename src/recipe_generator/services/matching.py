"""Ingredient matching and scoring engine."""

from collections.abc import Iterable, Sequence
from dataclasses import replace
from decimal import ROUND_HALF_UP, Decimal

from recipe_generator.domain.matching import MatchResult, SearchFilters, SearchQuery
from recipe_generator.domain.recipes import (
    Ingredient,
    Recipe,
    SubstitutionSuggestion,
    fold_accents,
    normalize,
)

MIN_SCORE = 0.1
DIETARY_BONUS = 0.05
SUBSTITUTION_NOTE = "Try suggested substitutions to complete this recipe."


def search_recipes(catalog: Sequence[Recipe], query: SearchQuery) -> list[MatchResult]:
    """Return recipes matching the query, best score first.

    Recipes failing a hard filter are skipped; the rest are scored by the share
    of their ingredients covered by the query. Results scoring 0.1 or less are
    dropped. Ties keep catalog order.
    """
    ingredients = normalize_ingredients(query.ingredients)
    filters = query.filters or SearchFilters()

    results: list[MatchResult] = []
    for recipe in catalog:
        if not _passes_filters(recipe, filters):
            continue
        result = _match_recipe(recipe, ingredients, query)
        if result.score > MIN_SCORE:
            results.append(result)

    # sorted() is stable, so equal scores stay in catalog order
    return sorted(results, key=lambda result: result.score, reverse=True)


def normalize_ingredients(values: Iterable[str]) -> list[str]:
    """Normalize and deduplicate ingredients, keeping first-seen order.

    Blank entries are dropped since an empty name is contained in every other.
    """
    seen: dict[str, None] = {}
    for value in values:
        name = normalize(value)
        if name:
            seen.setdefault(name, None)
    return list(seen)


def _passes_filters(recipe: Recipe, filters: SearchFilters) -> bool:
    return (
        matches_dietary_restrictions(recipe, filters.dietary_restrictions)
        and matches_difficulty(recipe, filters.difficulty)
        and matches_cooking_time(recipe, filters.max_cooking_time)
    )


def matches_dietary_restrictions(
    recipe: Recipe, restrictions: Sequence[str] | None
) -> bool:
    """Return True when the recipe carries every requested dietary tag."""
    if not restrictions:
        return True
    recipe_tags = {normalize(tag) for tag in recipe.dietary_tags}
    return all(normalize(restriction) in recipe_tags for restriction in restrictions)


def matches_difficulty(recipe: Recipe, difficulty: str | None) -> bool:
    """Return True when no difficulty is requested or it matches exactly."""
    if not difficulty or difficulty == "any":
        return True
    return recipe.difficulty == difficulty


def matches_cooking_time(recipe: Recipe, max_cooking_time: int | None) -> bool:
    """Return True when the recipe fits within the time budget."""
    if not max_cooking_time:
        return True
    return recipe.cooking_time <= max_cooking_time


def ingredient_matches(recipe_ingredient: str, user_ingredient: str) -> bool:
    """Loose match: equal ignoring case and accents, or one name contains the other."""
    return (
        fold_accents(recipe_ingredient) == fold_accents(user_ingredient)
        or user_ingredient in recipe_ingredient
        or recipe_ingredient in user_ingredient
    )


def compute_match_score(
    recipe: Recipe,
    ingredients: Sequence[str],
    dietary_preferences: Sequence[str] | None,
) -> tuple[float, list[str], list[str]]:
    """Score a recipe against normalized user ingredients.

    Returns the score together with the matched and missing recipe ingredient
    names (both normalized, in recipe order).
    """
    recipe_ingredients = [normalize(item.name) for item in recipe.ingredients]
    matched = [
        name
        for name in recipe_ingredients
        if any(ingredient_matches(name, value) for value in ingredients)
    ]
    missing = [name for name in recipe_ingredients if name not in matched]

    if not recipe_ingredients:
        return 0.0, matched, missing

    base_score = len(matched) / len(recipe_ingredients)
    bonus = (
        DIETARY_BONUS
        if dietary_preferences
        and any(pref in recipe.dietary_tags for pref in dietary_preferences)
        else 0.0
    )
    return max(0.0, min(1.0, base_score + bonus)), matched, missing


def substitutions_for(
    recipe: Recipe, missing_ingredients: Sequence[str]
) -> list[SubstitutionSuggestion]:
    """Return the recipe substitutions that cover missing ingredients."""
    if not missing_ingredients:
        return []
    return [
        suggestion
        for suggestion in recipe.substitution_suggestions
        if normalize(suggestion.ingredient) in missing_ingredients
    ]


def scale_ingredients(recipe: Recipe, servings: int | None) -> list[Ingredient] | None:
    """Scale quantities to the requested servings.

    Returns None when no scaling is needed, meaning base quantities apply.
    """
    if not servings or servings == recipe.base_servings:
        return None
    factor = servings / recipe.base_servings
    return [
        replace(ingredient, quantity=round_quantity(ingredient.quantity * factor))
        for ingredient in recipe.ingredients
    ]


def round_quantity(value: float, places: int = 2) -> float:
    """Round half-up to a fixed number of decimal places."""
    exponent = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(exponent, rounding=ROUND_HALF_UP))


def build_notes(
    missing_ingredients: Sequence[str],
    substitution_options: Sequence[SubstitutionSuggestion],
) -> list[str]:
    """Build human-readable notes for a match."""
    notes: list[str] = []
    if missing_ingredients:
        notes.append(
            f"Missing {len(missing_ingredients)} ingredients: "
            f"{', '.join(missing_ingredients)}."
        )
    if substitution_options:
        notes.append(SUBSTITUTION_NOTE)
    return notes


def _match_recipe(
    recipe: Recipe, ingredients: Sequence[str], query: SearchQuery
) -> MatchResult:
    score, matched, missing = compute_match_score(
        recipe, ingredients, query.dietary_preferences
    )
    substitutions = substitutions_for(recipe, missing)
    scaled = scale_ingredients(recipe, query.servings)
    notes = build_notes(missing, substitutions)
    return MatchResult(
        recipe=recipe,
        score=score,
        matched_ingredients=tuple(matched),
        missing_ingredients=tuple(missing),
        substitution_options=tuple(substitutions),
        servings=query.servings or None,
        scaled_ingredients=tuple(scaled) if scaled is not None else None,
        notes=tuple(notes) or None,
    )
