"""JSON file repository for the shared user state."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from recipe_generator.domain.users import (
    FavoriteRecipe,
    RatedRecipe,
    UserData,
    UserPreferences,
)
from recipe_generator.services.users import UserStateRepository

_logger = logging.getLogger(__name__)


@dataclass
class JsonUserStateRepository(UserStateRepository):
    """Stores the user state as a pretty-printed JSON document.

    A missing or unreadable file is replaced with the default empty state.
    """

    path: Path

    @classmethod
    def create(cls, path: str | Path) -> "JsonUserStateRepository":
        """Create a repository rooted at the given file path."""
        return cls(path=Path(path).resolve())

    def read(self) -> UserData:
        """Return the stored state, reinitializing it when missing or corrupt."""
        if not self.path.exists():
            return self._reset("missing")
        try:
            with self.path.open("r", encoding="utf-8") as handle:
                return _from_json(json.load(handle))
        except (OSError, ValueError, KeyError, TypeError, AttributeError) as exc:
            _logger.warning("Unreadable user data at %s: %s", self.path, exc)
            return self._reset("corrupt")

    def write(self, data: UserData) -> None:
        """Persist the full state."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", encoding="utf-8") as handle:
            json.dump(_to_json(data), handle, indent=2)

    def _reset(self, reason: str) -> UserData:
        _logger.info("Initializing %s user data file at %s", reason, self.path)
        defaults = UserData()
        self.write(defaults)
        return defaults


def _from_json(payload: dict) -> UserData:
    prefs = payload.get("preferences") or {}
    return UserData(
        ratings=tuple(
            RatedRecipe(
                recipe_id=str(item["recipeId"]),
                rating=int(item["rating"]),
                rated_at=item["ratedAt"],
            )
            for item in payload.get("ratings", [])
        ),
        favorites=tuple(
            FavoriteRecipe(recipe_id=str(item["recipeId"]), saved_at=item["savedAt"])
            for item in payload.get("favorites", [])
        ),
        preferences=UserPreferences(
            dietary_preferences=tuple(prefs.get("dietaryPreferences", [])),
            disliked_ingredients=tuple(prefs.get("dislikedIngredients", [])),
            favorite_cuisines=tuple(prefs.get("favoriteCuisines", [])),
        ),
    )


def _to_json(data: UserData) -> dict[str, object]:
    return {
        "ratings": [
            {
                "recipeId": item.recipe_id,
                "rating": item.rating,
                "ratedAt": item.rated_at,
            }
            for item in data.ratings
        ],
        "favorites": [
            {"recipeId": item.recipe_id, "savedAt": item.saved_at}
            for item in data.favorites
        ],
        "preferences": {
            "dietaryPreferences": list(data.preferences.dietary_preferences),
            "dislikedIngredients": list(data.preferences.disliked_ingredients),
            "favoriteCuisines": list(data.preferences.favorite_cuisines),
        },
    }
