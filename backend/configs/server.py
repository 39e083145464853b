"""
HTTP server configuration settings.

Dependencies: pydantic, pydantic_settings
System role: Bind address for uvicorn
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from backend.configs.base import BaseSettings


class ServerSettings(BaseSettings):
    """uvicorn bind configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="APP_",
        case_sensitive=False,
        extra="ignore",
    )

    host: str = Field(default="0.0.0.0", description="Interface to bind")
    port: int = Field(default=3000, description="Port to listen on")
