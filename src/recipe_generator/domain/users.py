"""Domain models for the shared user state."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class RatedRecipe:
    """A user's rating for a recipe."""

    recipe_id: str
    rating: int
    rated_at: str


@dataclass(frozen=True)
class FavoriteRecipe:
    """A recipe saved to favorites."""

    recipe_id: str
    saved_at: str


@dataclass(frozen=True)
class UserPreferences:
    """Dietary and cuisine preferences."""

    dietary_preferences: tuple[str, ...] = ()
    disliked_ingredients: tuple[str, ...] = ()
    favorite_cuisines: tuple[str, ...] = ()


@dataclass(frozen=True)
class UserData:
    """The single persisted user-state record."""

    ratings: tuple[RatedRecipe, ...] = ()
    favorites: tuple[FavoriteRecipe, ...] = ()
    preferences: UserPreferences = field(default_factory=UserPreferences)
