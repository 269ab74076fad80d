"""Tests for user state service."""

from recipe_generator.domain.users import RatedRecipe, UserData, UserPreferences
from recipe_generator.services.users import UserService
from tests.conftest import InMemoryUserStateRepository, make_recipe


def _service(repository: InMemoryUserStateRepository | None = None) -> UserService:
    catalog = (make_recipe("r1", ["egg"]), make_recipe("r9", ["egg"]))
    return UserService(
        repository=repository or InMemoryUserStateRepository(), catalog=catalog
    )


def test_rating_is_clamped() -> None:
    service = _service()

    high = service.rate_recipe("r9", 7)
    low = service.rate_recipe("r1", 0)

    assert high.ratings[0].rating == 5
    assert low.ratings[1].rating == 1


def test_rating_replaces_previous_entry_in_place() -> None:
    repository = InMemoryUserStateRepository(
        data=UserData(
            ratings=(
                RatedRecipe(recipe_id="r1", rating=2, rated_at="old"),
                RatedRecipe(recipe_id="r9", rating=3, rated_at="old"),
            )
        )
    )
    service = _service(repository)

    updated = service.rate_recipe("r1", 4)

    assert [(item.recipe_id, item.rating) for item in updated.ratings] == [
        ("r1", 4),
        ("r9", 3),
    ]
    assert updated.ratings[0].rated_at != "old"
    assert repository.data == updated


def test_toggle_favorite_adds_then_removes() -> None:
    repository = InMemoryUserStateRepository()
    service = _service(repository)

    added = service.toggle_favorite("r1")
    assert [fav.recipe_id for fav in added.favorites] == ["r1"]
    assert added.favorites[0].saved_at

    removed = service.toggle_favorite("r1")
    assert removed.favorites == ()
    assert repository.writes == 2


def test_update_preferences_merges_fields() -> None:
    repository = InMemoryUserStateRepository(
        data=UserData(
            preferences=UserPreferences(
                dietary_preferences=("vegan",),
                disliked_ingredients=("olives",),
                favorite_cuisines=("Thai",),
            )
        )
    )
    service = _service(repository)

    updated = service.update_preferences(favorite_cuisines=["Italian", "Greek"])

    assert updated.preferences == UserPreferences(
        dietary_preferences=("vegan",),
        disliked_ingredients=("olives",),
        favorite_cuisines=("Italian", "Greek"),
    )


def test_update_preferences_drops_unknown_dietary_tags() -> None:
    service = _service()

    updated = service.update_preferences(
        dietary_preferences=["Vegan", "paleo", "keto"], disliked_ingredients=[]
    )

    assert updated.preferences.dietary_preferences == ("vegan", "keto")
    assert updated.preferences.disliked_ingredients == ()


def test_suggestions_use_stored_state() -> None:
    service = _service()
    service.toggle_favorite("r9")

    suggestions = service.get_suggestions()

    assert [(item.recipe.id, item.score) for item in suggestions] == [("r9", 0.6)]
