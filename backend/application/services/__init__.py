"""Service orchestrators."""

from .account_service import AccountService
from .course_service import CourseService

__all__ = [
    "AccountService",
    "CourseService",
]
