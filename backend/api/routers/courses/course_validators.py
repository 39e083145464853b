"""
Course validation utilities.

Presence and shape checks not covered by the Pydantic models. Each check
raises with the message the route documents for that failure.

Dependencies: backend.models.course
System role: Course request validation
"""

from backend.core.exceptions import InvalidCourseDataError
from backend.models.course import (
    AssignInstructorRequest,
    CreateCourseRequest,
    ReplaceCourseRequest,
)


def validate_course_creation(request: CreateCourseRequest) -> None:
    """
    Validate course creation request.

    Args:
        request: CreateCourseRequest with course_name, subjects, datetime

    Raises:
        InvalidCourseDataError: If the name is missing or subjects is not an array
    """
    if not request.course_name:
        raise InvalidCourseDataError("A coursename must be provided")

    if not isinstance(request.subjects, list):
        raise InvalidCourseDataError("subjects must be provided and must be an array")


def validate_course_replacement(course_id: str, request: ReplaceCourseRequest) -> None:
    """
    Validate full course replacement request.

    Raises:
        InvalidCourseDataError: If the name is missing or subjects is not an array
    """
    if not request.coursename or not isinstance(request.subjects, list):
        raise InvalidCourseDataError("Invalid data provided", course_id=course_id)


def validate_instructor_assignment(course_id: str, request: AssignInstructorRequest) -> None:
    """
    Validate instructor assignment request.

    Raises:
        InvalidCourseDataError: If the instructor is missing or empty
    """
    if not request.instructor:
        raise InvalidCourseDataError("bad input", course_id=course_id)
