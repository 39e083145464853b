"""
Account and session schemas.

Dependencies: pydantic
System role: Registration, login and token API contracts
"""

from pydantic import BaseModel, Field


class CredentialsRequest(BaseModel):
    """Email/password pair used for both registration and login."""

    email: str = Field(..., description="Account email (not format-checked)")
    password: str = Field(..., description="Plaintext password")


class TokenResponse(BaseModel):
    """Successful login response."""

    token: str


class TokenPayload(BaseModel):
    """Claims embedded in a session token."""

    user_id: str
    email: str
    iat: int
    exp: int


class ProfileResponse(BaseModel):
    """Response schema for the profile route."""

    message: str
    payload: TokenPayload
