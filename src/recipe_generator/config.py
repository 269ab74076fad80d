"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    hf_api_token: str = ""
    hf_model: str = "nateraw/food"
    hf_base_url: str = "https://api-inference.huggingface.co/models"
    recognition_provider: str = "huggingface"
    openai_api_key: str | None = None
    openai_model: str = "gpt-4o-mini"
    recognition_timeout_seconds: float = 30.0
    max_upload_bytes: int = 5 * 1024 * 1024
    recipes_path: str | None = None
    user_data_path: str = "data/user-data.json"
    cors_allowed_origins: str = "*"
    host: str = "0.0.0.0"
    port: int = 4000
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_cors_origins(raw: str | None) -> list[str]:
    """Parse allowed CORS origins from env."""
    if raw is None:
        return []
    cleaned = raw.strip()
    if cleaned == "*":
        return ["*"]
    origins: list[str] = []
    for chunk in cleaned.split(","):
        value = chunk.strip().rstrip("/")
        if value:
            origins.append(value)
    return origins
