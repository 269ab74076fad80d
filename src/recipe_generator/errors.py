"""Domain errors surfaced to the API layer."""


class RecipeNotFoundError(LookupError):
    """Raised when a recipe id is not present in the catalog."""

    def __init__(self, recipe_id: str) -> None:
        super().__init__(f"Recipe not found: {recipe_id}")
        self.recipe_id = recipe_id


class RecognitionError(RuntimeError):
    """Base error for ingredient recognition failures."""


class RecognitionNotConfiguredError(RecognitionError):
    """Raised when no recognition credential is available."""

    def __init__(self, credential_name: str = "HF_API_TOKEN") -> None:
        super().__init__(
            f"{credential_name} is not configured. Set it in the backend .env file "
            "to enable image ingredient recognition."
        )
        self.credential_name = credential_name


class RecognitionFailedError(RecognitionError):
    """Raised when the upstream recognition call fails."""
