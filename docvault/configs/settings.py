"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from docvault.configs.auth import AuthSettings
from docvault.configs.base import BaseSettings
from docvault.configs.database import DatabaseSettings
from docvault.configs.storage import S3StorageSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    cors_origins: list[str] = Field(
        default=["http://localhost:3000"],
        description="Origins allowed by the CORS policy",
    )

    # Aggregated settings
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    storage: S3StorageSettings = Field(default_factory=S3StorageSettings)
    auth: AuthSettings = Field(default_factory=AuthSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from docvault.configs import get_settings
        settings = get_settings()
    """
    return Settings()
