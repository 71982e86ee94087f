"""Typed settings configuration - single source of truth."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url: str = "sqlite+aiosqlite:///./itinerary.db"

    # Catalog
    seed_catalog: bool = True

    # Chat - non-admin messages are always addressed to this user
    admin_user_id: str = "admin"

    # Reviews
    upload_dir: str = "./uploads"
    default_review_image: str = "/images/default-image.png"

    # Logging
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
