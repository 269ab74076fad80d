"""Recipe catalog domain models."""

import logging
import unicodedata
from collections.abc import Iterable
from dataclasses import dataclass, field

DIFFICULTY_LEVELS = ("easy", "medium", "hard")

DIETARY_TAGS = (
    "vegetarian",
    "vegan",
    "gluten-free",
    "dairy-free",
    "nut-free",
    "pescatarian",
    "keto",
    "halal",
    "kosher",
)

_DIETARY_TAG_SET = frozenset(DIETARY_TAGS)

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Ingredient:
    """Single ingredient line of a recipe."""

    name: str
    quantity: float
    unit: str
    preparation: str | None = None
    optional: bool = False


@dataclass(frozen=True)
class NutritionFacts:
    """Nutrition facts per serving, as provided by the catalog."""

    calories: float
    protein: float
    carbs: float
    fat: float
    fiber: float | None = None
    sugar: float | None = None


@dataclass(frozen=True)
class SubstitutionSuggestion:
    """Substitutes for an ingredient the user may be missing."""

    ingredient: str
    substitutes: tuple[str, ...]
    note: str | None = None


@dataclass(frozen=True)
class Recipe:
    """Immutable recipe record from the catalog."""

    id: str
    title: str
    description: str
    cuisine: str
    difficulty: str
    cooking_time: int
    base_servings: int
    dietary_tags: tuple[str, ...]
    ingredients: tuple[Ingredient, ...]
    steps: tuple[str, ...]
    nutrition: NutritionFacts
    substitution_suggestions: tuple[SubstitutionSuggestion, ...] = field(
        default_factory=tuple
    )
    image: str | None = None


def normalize(value: str) -> str:
    """Trim and lowercase a free-text ingredient or tag."""
    return value.strip().lower()


def fold_accents(value: str) -> str:
    """Casefold and drop diacritics for accent-insensitive comparison."""
    decomposed = unicodedata.normalize("NFKD", value)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch)).casefold()


def sanitize_dietary_tags(values: Iterable[str] | None) -> tuple[str, ...] | None:
    """Keep only known dietary tags; return None when nothing is left.

    Unknown values are dropped silently rather than rejected.
    """
    if values is None:
        return None
    kept: list[str] = []
    for value in values:
        tag = normalize(value)
        if tag in _DIETARY_TAG_SET:
            if tag not in kept:
                kept.append(tag)
        else:
            _logger.debug("Dropping unknown dietary tag: %s", value)
    return tuple(kept) or None
