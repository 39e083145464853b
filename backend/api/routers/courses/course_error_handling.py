"""
Course error handling utilities.

Provides a decorator for consistent error handling across course-related
API endpoints.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import status
from fastapi.responses import JSONResponse

from backend.core.exceptions import (
    CourseNotFoundError,
    CourseOperationError,
    InvalidCourseDataError,
)

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])


def _operation_error_body(e: CourseOperationError) -> dict[str, Any]:
    cause = e.details.get("error")
    if cause is None:
        return {"error": e.message}
    return {"message": e.message, "error": cause}


def handle_course_errors(func: F) -> F:
    """
    Decorator to handle course-related errors and transform them into JSON responses.

    This centralizes:
    - Logging of errors with context (course_id)
    - Mapping specific exceptions to HTTP status codes
    - Ensuring uniform error response formats
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except CourseNotFoundError as e:
            logger.warning(
                "Course not found",
                extra={"course_id": e.course_id, "error": e.message}
            )
            return JSONResponse(
                status_code=status.HTTP_404_NOT_FOUND,
                content={"message": e.message},
            )

        except InvalidCourseDataError as e:
            logger.warning(
                "Invalid course request",
                extra={"course_id": e.course_id, "error": e.message}
            )
            return JSONResponse(
                status_code=status.HTTP_400_BAD_REQUEST,
                content={"error": e.message},
            )

        except CourseOperationError as e:
            logger.error(
                "Course operation failed",
                extra={"course_id": e.course_id, "error": str(e)}
            )
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content=_operation_error_body(e),
            )

        except Exception as e:
            logger.exception(
                "Unexpected failure in course operation",
                extra={"error": str(e)}
            )
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"error": "Internal Server Error"},
            )

    return wrapper # type: ignore
