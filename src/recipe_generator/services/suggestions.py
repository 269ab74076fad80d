"""Personalized recipe suggestions."""

from collections.abc import Sequence

from recipe_generator.domain.matching import MatchResult
from recipe_generator.domain.recipes import Recipe
from recipe_generator.domain.users import UserData

SUGGESTION_LIMIT = 5
COLD_START_SCORE = 0.3
FAVORITE_WEIGHT = 0.6
TOP_RATED_WEIGHT = 0.4
CUISINE_WEIGHT = 0.2
DIETARY_WEIGHT = 0.1
TOP_RATING = 4


def suggest_recipes(
    catalog: Sequence[Recipe], user_data: UserData, limit: int = SUGGESTION_LIMIT
) -> list[MatchResult]:
    """Rank recipes for the user from favorites, ratings and preferences.

    Users without favorites or ratings get the first catalog recipes at a flat
    score so there is always something to show.
    """
    if not user_data.favorites and not user_data.ratings:
        return [
            MatchResult(recipe=recipe, score=COLD_START_SCORE)
            for recipe in catalog[:limit]
        ]

    favorite_ids = {favorite.recipe_id for favorite in user_data.favorites}
    top_rated_ids = {
        rating.recipe_id for rating in user_data.ratings if rating.rating >= TOP_RATING
    }
    cuisines = {cuisine.lower() for cuisine in user_data.preferences.favorite_cuisines}
    dietary = set(user_data.preferences.dietary_preferences)

    scored: list[MatchResult] = []
    for recipe in catalog:
        score = 0.0
        if recipe.id in favorite_ids:
            score += FAVORITE_WEIGHT
        if recipe.id in top_rated_ids:
            score += TOP_RATED_WEIGHT
        if recipe.cuisine.lower() in cuisines:
            score += CUISINE_WEIGHT
        if any(tag in dietary for tag in recipe.dietary_tags):
            score += DIETARY_WEIGHT
        if score > 0:
            scored.append(MatchResult(recipe=recipe, score=round(score, 2)))

    return sorted(scored, key=lambda result: result.score, reverse=True)[:limit]
