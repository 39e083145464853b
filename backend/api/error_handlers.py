"""
Application-wide exception handlers.

Renders authentication, request validation and persistence errors as JSON
bodies with an "error" field.

Dependencies: fastapi, pymongo, backend.core.exceptions
System role: Error-to-response mapping outside the course routers
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from backend.core.exceptions import (
    InvalidCredentialsError,
    InvalidTokenError,
    MissingTokenError,
)

logger = logging.getLogger(__name__)


async def invalid_credentials_handler(request: Request, exc: InvalidCredentialsError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": exc.message},
    )


async def missing_token_handler(request: Request, exc: MissingTokenError) -> JSONResponse:
    logger.info("Protected route called without token", extra={"path": request.url.path})
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"error": exc.message},
        headers={"WWW-Authenticate": "Bearer"},
    )


async def invalid_token_handler(request: Request, exc: InvalidTokenError) -> JSONResponse:
    logger.info(
        "Token rejected",
        extra={"path": request.url.path, "reason": exc.message},
    )
    return JSONResponse(
        status_code=status.HTTP_403_FORBIDDEN,
        content={"error": exc.message},
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning(
        "Malformed request",
        extra={"path": request.url.path, "errors": str(exc.errors())},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Invalid request body", "detail": jsonable_encoder(exc.errors())},
    )


async def database_error_handler(request: Request, exc: PyMongoError) -> JSONResponse:
    logger.exception(
        "Database operation failed",
        extra={"path": request.url.path, "error": str(exc)},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": str(exc)},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach all application-wide exception handlers."""
    app.add_exception_handler(InvalidCredentialsError, invalid_credentials_handler)
    app.add_exception_handler(MissingTokenError, missing_token_handler)
    app.add_exception_handler(InvalidTokenError, invalid_token_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(PyMongoError, database_error_handler)
