"""
Authentication configuration settings.

Signing secret and token lifetime for session tokens, and the bcrypt
work factor for stored passwords.

Dependencies: pydantic, pydantic_settings
System role: Credential and token configuration
"""

from pydantic import Field

from backend.configs.base import BaseSettings


class AuthSettings(BaseSettings):
    """Token signing and password hashing configuration."""

    token_secret: str = Field(..., min_length=1, description="HMAC secret used to sign tokens")
    token_algorithm: str = Field(default="HS256", description="JWT signing algorithm")
    token_expires_in: int = Field(default=3600, description="Token lifetime in seconds")
    password_hash_rounds: int = Field(
        default=12,
        ge=4,
        le=31,
        description="bcrypt cost factor (log2 of iterations)",
    )
