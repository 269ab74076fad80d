"""Shared test fixtures."""

from dataclasses import dataclass, field
from pathlib import Path

import pytest

from recipe_generator.adapters.json_recipe_catalog import load_catalog
from recipe_generator.config import Settings
from recipe_generator.containers import AppContainer
from recipe_generator.domain.recipes import (
    Ingredient,
    NutritionFacts,
    Recipe,
    SubstitutionSuggestion,
)
from recipe_generator.domain.users import UserData
from recipe_generator.services.recipes import RecipeService
from recipe_generator.services.recognition import (
    IngredientClassifier,
    RecognitionService,
)
from recipe_generator.services.users import UserService, UserStateRepository


def make_recipe(  # noqa: PLR0913
    recipe_id: str,
    ingredients: list[str] | list[tuple[str, float]],
    *,
    tags: tuple[str, ...] = (),
    cuisine: str = "Italian",
    difficulty: str = "easy",
    cooking_time: int = 20,
    base_servings: int = 2,
    substitutions: tuple[SubstitutionSuggestion, ...] = (),
) -> Recipe:
    """Build a recipe with sensible defaults for tests."""
    items = []
    for entry in ingredients:
        name, quantity = entry if isinstance(entry, tuple) else (entry, 1)
        items.append(Ingredient(name=name, quantity=quantity, unit="pcs"))
    return Recipe(
        id=recipe_id,
        title=f"Recipe {recipe_id}",
        description="",
        cuisine=cuisine,
        difficulty=difficulty,
        cooking_time=cooking_time,
        base_servings=base_servings,
        dietary_tags=tags,
        ingredients=tuple(items),
        steps=("Cook.",),
        nutrition=NutritionFacts(calories=100, protein=1, carbs=1, fat=1),
        substitution_suggestions=substitutions,
    )


@dataclass
class InMemoryUserStateRepository(UserStateRepository):
    """In-memory user state store for tests."""

    data: UserData = field(default_factory=UserData)
    writes: int = 0

    def read(self) -> UserData:
        return self.data

    def write(self, data: UserData) -> None:
        self.data = data
        self.writes += 1


@dataclass
class FakeClassifier(IngredientClassifier):
    """Fake classifier returning a fixed payload."""

    payload: list[dict[str, object]] = field(
        default_factory=lambda: [
            {"label": "tomato", "score": 0.41},
            {"label": "garlic", "score": 0.93},
            {"label": "onion", "score": 0.12},
        ]
    )
    error: Exception | None = None
    calls: int = 0

    async def classify(self, image_bytes: bytes) -> list[dict[str, object]]:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.payload


@pytest.fixture
def catalog() -> tuple[Recipe, ...]:
    return load_catalog()


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        hf_api_token="hf-token",
        user_data_path=str(tmp_path / "user-data.json"),
    )


@pytest.fixture
def user_repository() -> InMemoryUserStateRepository:
    return InMemoryUserStateRepository()


@pytest.fixture
def classifier() -> FakeClassifier:
    return FakeClassifier()


@pytest.fixture
def container(
    settings: Settings,
    catalog: tuple[Recipe, ...],
    user_repository: InMemoryUserStateRepository,
    classifier: FakeClassifier,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        recipe_service=RecipeService(catalog),
        user_service=UserService(repository=user_repository, catalog=catalog),
        recognition_service=RecognitionService(client=classifier),
        close_resources=close_resources,
    )
