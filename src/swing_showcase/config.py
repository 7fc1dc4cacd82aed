"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

DEFAULT_CORS_ORIGINS = ("http://localhost:5173", "http://localhost:8080")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    jwt_secret: str
    jwt_algorithm: str = "HS256"
    token_ttl_hours: int = 24
    google_client_id: str | None = None
    admin_token: str
    cors_origins: str | None = None
    storage_backend: str = "memory"
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    upload_dir: str = "uploads"
    max_upload_bytes: int = 5 * 1024 * 1024
    max_upload_files: int = 10
    profile_api_base_url: str = "https://api.swingboudoirmag.com/api/v1"
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_cors_origins(raw: str | None) -> list[str]:
    """Parse allowed CORS origins from env."""
    if raw is None:
        return list(DEFAULT_CORS_ORIGINS)
    cleaned = raw.strip()
    if cleaned == "*":
        return ["*"]
    origins = [chunk.strip().rstrip("/") for chunk in cleaned.split(",")]
    return [origin for origin in origins if origin] or list(DEFAULT_CORS_ORIGINS)
