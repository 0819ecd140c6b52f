"""
Configuration management using Pydantic Settings.
Single source of truth for environment variables (connection string, signing secret, ports).
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SECRET_KEY = "change-me-in-production"


class Settings(BaseSettings):
    """Application settings loaded from environment. Validates at startup."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "Sellfurniture API"
    debug: bool = False
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 3000
    cors_allow_origins: list[str] = ["*"]

    # Database: no default, a missing connection string stops the process
    database_url: str
    db_pool_size: int = 10
    db_max_overflow: int = 20

    # JWT
    secret_key: str = DEFAULT_SECRET_KEY
    jwt_algorithm: str = "HS256"
    jwt_expire_minutes: int = 60

    # Earlier clients created locations anonymously; set to false to allow that again
    locations_require_auth: bool = True

    # Visit logging must not hold a page load hostage to a slow store
    visit_write_timeout_seconds: float = 5.0


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance. Avoids re-reading env on every request."""
    return Settings()
