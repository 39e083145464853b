"""
Dependency injection container.

Factory functions for FastAPI dependencies. Every collaborator is built from
the settings and gateway stored on app.state by create_app/lifespan.

Dependencies: fastapi, backend.configs, backend.application, backend.boundary, backend.core
System role: DI container for service injection
"""

import logging

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from backend.application.services import AccountService, CourseService
from backend.boundary.db.connection import MongoGateway
from backend.configs import Settings
from backend.core.auth import PasswordHasher, TokenService
from backend.core.exceptions import MissingTokenError
from backend.models.auth import TokenPayload

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def get_settings_dependency(request: Request) -> Settings:
    """Get the settings the application was created with."""
    return request.app.state.settings


def get_database(request: Request) -> MongoGateway:
    """Get the shared database gateway."""
    return request.app.state.database


def get_password_hasher(
    settings: Settings = Depends(get_settings_dependency),
) -> PasswordHasher:
    """Get password hasher configured with the bcrypt cost factor."""
    return PasswordHasher(rounds=settings.auth.password_hash_rounds)


def get_token_service(
    settings: Settings = Depends(get_settings_dependency),
) -> TokenService:
    """Get token service configured with the signing secret."""
    return TokenService(
        secret=settings.auth.token_secret,
        algorithm=settings.auth.token_algorithm,
        expires_in=settings.auth.token_expires_in,
    )


def get_course_service(db: MongoGateway = Depends(get_database)) -> CourseService:
    """
    Get course service instance.

    Args:
        db: Database gateway (injected via Depends)

    Returns:
        CourseService: Course service instance
    """
    return CourseService(db=db)


def get_account_service(
    db: MongoGateway = Depends(get_database),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: TokenService = Depends(get_token_service),
) -> AccountService:
    """
    Get account service instance.

    Args:
        db: Database gateway (injected via Depends)
        hasher: Password hasher (injected via Depends)
        tokens: Token service (injected via Depends)

    Returns:
        AccountService: Account service instance
    """
    return AccountService(db=db, hasher=hasher, tokens=tokens)


async def require_token(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    tokens: TokenService = Depends(get_token_service),
) -> TokenPayload:
    """
    Gate for protected routes.

    Reads the bearer token from the Authorization header, verifies it and
    attaches the decoded payload to request.state.token_payload.

    Raises:
        MissingTokenError: No bearer token was sent (401)
        InvalidTokenError: Token failed signature or expiry checks (403)
    """
    if credentials is None:
        raise MissingTokenError()

    payload = tokens.verify(credentials.credentials)
    request.state.token_payload = payload
    logger.debug("Token verified", extra={"user_id": payload.user_id})
    return payload
