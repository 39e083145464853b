"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
All config modules support environment variable mapping with validation.
"""

from backend.configs.auth import AuthSettings
from backend.configs.database import DatabaseSettings
from backend.configs.server import ServerSettings
from backend.configs.settings import Settings, get_settings

__all__ = [
    "AuthSettings",
    "DatabaseSettings",
    "ServerSettings",
    "Settings",
    "get_settings",
]
