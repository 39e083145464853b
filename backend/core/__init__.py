"""
Core business logic module.

Contains the exception hierarchy and the credential/token primitives.
"""

from backend.core.exceptions import (
    AuthenticationError,
    CourseCatalogError,
    CourseError,
    CourseNotFoundError,
    CourseOperationError,
    DatabaseConnectionError,
    InvalidCourseDataError,
    InvalidCredentialsError,
    InvalidTokenError,
    MissingTokenError,
)

__all__ = [
    "AuthenticationError",
    "CourseCatalogError",
    "CourseError",
    "CourseNotFoundError",
    "CourseOperationError",
    "DatabaseConnectionError",
    "InvalidCourseDataError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "MissingTokenError",
]
