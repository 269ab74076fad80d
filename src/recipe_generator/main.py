"""Run the API with uvicorn."""

import uvicorn

from recipe_generator.config import Settings


def main() -> None:
    """Start the HTTP server on the configured host and port."""
    settings = Settings()
    uvicorn.run(
        "recipe_generator.api.asgi:app",
        host=settings.host,
        port=settings.port,
        log_level="info",
    )


if __name__ == "__main__":
    main()
