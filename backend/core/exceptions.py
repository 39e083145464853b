"""
Exception hierarchy for the course catalog application.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class CourseCatalogError(Exception):
    """Base exception for all course catalog application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class DatabaseConnectionError(CourseCatalogError):
    """Raised when the document database cannot be reached at startup."""


class CourseError(CourseCatalogError):
    """Base class for course-related errors."""

    def __init__(
        self,
        message: str,
        course_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize course error.

        Args:
            message: Error message
            course_id: Identifier of the course involved, if any
            details: Additional context
        """
        self.course_id = course_id
        details = details or {}
        if course_id:
            details["course_id"] = course_id
        super().__init__(message, details)


class CourseNotFoundError(CourseError):
    """Raised when a course is not found."""


class InvalidCourseDataError(CourseError):
    """Raised when course data is missing or malformed."""


class CourseOperationError(CourseError):
    """Raised when a course operation fails at the service or boundary layer."""


class AuthenticationError(CourseCatalogError):
    """Base class for credential and token errors."""


class InvalidCredentialsError(AuthenticationError):
    """Raised when an email/password pair does not match a stored account."""

    def __init__(self, details: dict[str, Any] | None = None) -> None:
        super().__init__("Invalid login credentials", details)


class MissingTokenError(AuthenticationError):
    """Raised when a protected route is called without a bearer token."""

    def __init__(self) -> None:
        super().__init__("Authentication required")


class InvalidTokenError(AuthenticationError):
    """Raised when a bearer token fails signature or expiry checks."""
