"""JSON shaping for API responses."""

from recipe_generator.domain.matching import MatchResult
from recipe_generator.domain.recipes import Ingredient, Recipe, SubstitutionSuggestion
from recipe_generator.domain.users import UserData, UserPreferences


def ingredient_to_dict(ingredient: Ingredient) -> dict[str, object]:
    data: dict[str, object] = {
        "name": ingredient.name,
        "quantity": ingredient.quantity,
        "unit": ingredient.unit,
    }
    if ingredient.preparation is not None:
        data["preparation"] = ingredient.preparation
    if ingredient.optional:
        data["optional"] = True
    return data


def substitution_to_dict(suggestion: SubstitutionSuggestion) -> dict[str, object]:
    data: dict[str, object] = {
        "ingredient": suggestion.ingredient,
        "substitutes": list(suggestion.substitutes),
    }
    if suggestion.note is not None:
        data["note"] = suggestion.note
    return data


def recipe_to_dict(recipe: Recipe) -> dict[str, object]:
    """Serialize a recipe using the catalog's camelCase field names."""
    nutrition = {
        key: value
        for key, value in (
            ("calories", recipe.nutrition.calories),
            ("protein", recipe.nutrition.protein),
            ("carbs", recipe.nutrition.carbs),
            ("fat", recipe.nutrition.fat),
            ("fiber", recipe.nutrition.fiber),
            ("sugar", recipe.nutrition.sugar),
        )
        if value is not None
    }
    data: dict[str, object] = {
        "id": recipe.id,
        "title": recipe.title,
        "description": recipe.description,
        "cuisine": recipe.cuisine,
        "difficulty": recipe.difficulty,
        "cookingTime": recipe.cooking_time,
        "baseServings": recipe.base_servings,
        "dietaryTags": list(recipe.dietary_tags),
        "ingredients": [ingredient_to_dict(item) for item in recipe.ingredients],
        "steps": list(recipe.steps),
        "nutrition": nutrition,
        "substitutionSuggestions": [
            substitution_to_dict(item) for item in recipe.substitution_suggestions
        ],
    }
    if recipe.image is not None:
        data["image"] = recipe.image
    return data


def match_to_dict(result: MatchResult) -> dict[str, object]:
    """Serialize a match; optional fields are omitted when unset."""
    data: dict[str, object] = {
        "recipe": recipe_to_dict(result.recipe),
        "score": result.score,
        "matchedIngredients": list(result.matched_ingredients),
        "missingIngredients": list(result.missing_ingredients),
        "substitutionOptions": [
            substitution_to_dict(item) for item in result.substitution_options
        ],
    }
    if result.servings is not None:
        data["servings"] = result.servings
    if result.scaled_ingredients is not None:
        data["scaledIngredients"] = [
            ingredient_to_dict(item) for item in result.scaled_ingredients
        ]
    if result.notes is not None:
        data["notes"] = list(result.notes)
    return data


def preferences_to_dict(preferences: UserPreferences) -> dict[str, list[str]]:
    return {
        "dietaryPreferences": list(preferences.dietary_preferences),
        "dislikedIngredients": list(preferences.disliked_ingredients),
        "favoriteCuisines": list(preferences.favorite_cuisines),
    }


def favorites_to_list(data: UserData) -> list[dict[str, str]]:
    return [
        {"recipeId": item.recipe_id, "savedAt": item.saved_at}
        for item in data.favorites
    ]


def ratings_to_list(data: UserData) -> list[dict[str, object]]:
    return [
        {"recipeId": item.recipe_id, "rating": item.rating, "ratedAt": item.rated_at}
        for item in data.ratings
    ]
