"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

MAX_UPLOAD_BYTES = 10 * 1024 * 1024


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    host: str = "0.0.0.0"  # noqa: S104
    port: int = 3000
    upload_dir: str = "uploads"
    max_upload_bytes: int = MAX_UPLOAD_BYTES
    cors_allow_origins: str = "*"
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_cors_origins(raw: str | None) -> list[str]:
    """Parse allowed CORS origins from env, defaulting to any origin."""
    if raw is None:
        return ["*"]
    cleaned = raw.strip()
    if cleaned in {"", "*"}:
        return ["*"]
    origins: list[str] = []
    for chunk in cleaned.split(","):
        value = chunk.strip().rstrip("/")
        if value and value not in origins:
            origins.append(value)
    return origins or ["*"]
