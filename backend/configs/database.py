"""
Database configuration settings.

Manages MongoDB connection parameters for the motor client.

Dependencies: pydantic, pydantic_settings
System role: Document database connection configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from backend.configs.base import BaseSettings


class DatabaseSettings(BaseSettings):
    """MongoDB configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="MONGO_",
        case_sensitive=False,
        extra="ignore",
    )

    uri: str = Field(..., min_length=1, description="MongoDB connection string")
    db_name: str = Field(default="sctp02_University", description="MongoDB database name")
    server_selection_timeout_ms: int = Field(
        default=5000,
        description="How long the client waits for a reachable server at startup",
    )
