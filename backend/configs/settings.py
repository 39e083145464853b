"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from backend.configs.auth import AuthSettings
from backend.configs.base import BaseSettings
from backend.configs.database import DatabaseSettings
from backend.configs.server import ServerSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    # Sub-settings are built on instantiation so a missing MONGO_URI or
    # TOKEN_SECRET fails when settings are loaded, not at import.
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    auth: AuthSettings = Field(default_factory=AuthSettings)
    server: ServerSettings = Field(default_factory=ServerSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Raises:
        pydantic.ValidationError: If required variables (MONGO_URI,
            TOKEN_SECRET) are missing

    Usage:
        from backend.configs import get_settings
        settings = get_settings()
    """
    return Settings()
