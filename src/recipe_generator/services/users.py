"""User state: favorites, ratings, preferences and suggestions."""

import threading
from collections.abc import Sequence
from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from typing import Protocol

from recipe_generator.domain.matching import MatchResult
from recipe_generator.domain.recipes import Recipe, sanitize_dietary_tags
from recipe_generator.domain.users import (
    FavoriteRecipe,
    RatedRecipe,
    UserData,
    UserPreferences,
)
from recipe_generator.services.suggestions import suggest_recipes

MIN_RATING = 1
MAX_RATING = 5


class UserStateRepository(Protocol):
    """Persistence interface for the shared user state."""

    def read(self) -> UserData:
        """Return the current user state, initializing defaults if needed."""

    def write(self, data: UserData) -> None:
        """Persist the full user state."""


@dataclass
class UserService:
    """Application service for user actions.

    Each mutation is a read-modify-write of the whole record. The lock keeps
    writers within one process from overwriting each other.
    """

    repository: UserStateRepository
    catalog: tuple[Recipe, ...]
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def get_user_data(self) -> UserData:
        """Return the stored user state."""
        return self.repository.read()

    def update_preferences(
        self,
        *,
        dietary_preferences: Sequence[str] | None = None,
        disliked_ingredients: Sequence[str] | None = None,
        favorite_cuisines: Sequence[str] | None = None,
    ) -> UserData:
        """Merge the given preference fields over the stored ones."""
        with self._lock:
            current = self.repository.read()
            prefs = current.preferences
            if dietary_preferences is not None:
                prefs = replace(
                    prefs,
                    dietary_preferences=sanitize_dietary_tags(dietary_preferences)
                    or (),
                )
            if disliked_ingredients is not None:
                prefs = replace(prefs, disliked_ingredients=tuple(disliked_ingredients))
            if favorite_cuisines is not None:
                prefs = replace(prefs, favorite_cuisines=tuple(favorite_cuisines))
            updated = replace(current, preferences=prefs)
            self.repository.write(updated)
            return updated

    def toggle_favorite(self, recipe_id: str) -> UserData:
        """Add the recipe to favorites, or remove it if already saved."""
        with self._lock:
            current = self.repository.read()
            if any(fav.recipe_id == recipe_id for fav in current.favorites):
                favorites = tuple(
                    fav for fav in current.favorites if fav.recipe_id != recipe_id
                )
            else:
                favorites = (
                    *current.favorites,
                    FavoriteRecipe(recipe_id=recipe_id, saved_at=_now_iso()),
                )
            updated = replace(current, favorites=favorites)
            self.repository.write(updated)
            return updated

    def rate_recipe(self, recipe_id: str, rating: int) -> UserData:
        """Store a rating clamped to 1-5, replacing any earlier rating."""
        entry = RatedRecipe(
            recipe_id=recipe_id,
            rating=min(MAX_RATING, max(MIN_RATING, rating)),
            rated_at=_now_iso(),
        )
        with self._lock:
            current = self.repository.read()
            if any(item.recipe_id == recipe_id for item in current.ratings):
                ratings = tuple(
                    entry if item.recipe_id == recipe_id else item
                    for item in current.ratings
                )
            else:
                ratings = (*current.ratings, entry)
            updated = replace(current, ratings=ratings)
            self.repository.write(updated)
            return updated

    def get_preferences(self) -> UserPreferences:
        """Return the stored preferences."""
        return self.repository.read().preferences

    def get_suggestions(self) -> list[MatchResult]:
        """Return personalized suggestions for the stored user state."""
        return suggest_recipes(self.catalog, self.repository.read())


def _now_iso() -> str:
    return datetime.now(tz=UTC).isoformat()
