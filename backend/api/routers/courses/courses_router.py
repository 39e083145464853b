"""
Course API endpoints.

Routes:
- GET /course - List courses (optional coursename/subjects filters)
- POST /course - Create course
- GET /course/{id} - Get single course
- PATCH /course/{id} - Attach instructor
- PUT /course/{id} - Replace name, subjects and time
- DELETE /course/{id} - Delete course

Dependencies: backend.application.services, backend.models
System role: Course management HTTP API
"""

import logging

from fastapi import APIRouter, Depends, status

from backend.application.services.course_service import CourseService
from backend.api.deps.dependencies import get_course_service
from backend.models.common import InsertResponse, MessageResponse, UpdateResponse
from backend.models.course import (
    AcceptedResponse,
    AssignInstructorRequest,
    CourseListResponse,
    CourseRecord,
    CreateCourseRequest,
    ReplaceCourseRequest,
)

from .course_error_handling import handle_course_errors
from .course_validators import (
    validate_course_creation,
    validate_course_replacement,
    validate_instructor_assignment,
)
from .course_responses import (
    map_course_to_response,
    map_courses_to_response,
    map_insert_to_response,
    map_update_to_response,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/course", tags=["courses"])


@router.get("", response_model=CourseListResponse)
@handle_course_errors
async def list_courses(
    coursename: str | None = None,
    subjects: str | None = None,
    course_service: CourseService = Depends(get_course_service),
) -> CourseListResponse:
    """
    List courses, optionally filtered.

    Args:
        coursename: Case-insensitive substring of the course name
        subjects: Subject tag the course must include
        course_service: Injected CourseService

    Returns:
        CourseListResponse: Matching courses under "course"

    Error responses:
        500: Retrieval failed
    """
    courses = await course_service.list_courses(coursename=coursename, subjects=subjects)
    return map_courses_to_response(courses)


@router.post("", response_model=InsertResponse)
@handle_course_errors
async def create_course(
    request: CreateCourseRequest,
    course_service: CourseService = Depends(get_course_service),
) -> InsertResponse:
    """
    Create new course.

    Args:
        request: CreateCourseRequest with course_name, subjects, datetime
        course_service: Injected CourseService

    Returns:
        InsertResponse: Insert outcome with the new id

    Error responses:
        400: Missing name or subjects
        500: Creation failed
    """
    validate_course_creation(request)

    logger.info(
        "Creating new course",
        extra={"course_name": request.course_name, "subject_count": len(request.subjects)}
    )

    result = await course_service.create_course(
        name=request.course_name,
        subjects=request.subjects,
        scheduled_at=request.datetime,
    )
    return map_insert_to_response(result)


@router.get("/{course_id}", response_model=CourseRecord)
@handle_course_errors
async def get_course(
    course_id: str,
    course_service: CourseService = Depends(get_course_service),
) -> CourseRecord:
    """
    Get single course by ID.

    Error responses:
        404: Course not found
        500: Malformed id or retrieval failed
    """
    course_data = await course_service.get_course(course_id)
    return map_course_to_response(course_data)


@router.patch(
    "/{course_id}",
    response_model=AcceptedResponse,
    status_code=status.HTTP_202_ACCEPTED,
)
@handle_course_errors
async def assign_instructor(
    course_id: str,
    request: AssignInstructorRequest,
    course_service: CourseService = Depends(get_course_service),
) -> AcceptedResponse:
    """
    Attach an instructor to a course.

    The submitted instructor only has to be present; the stored record is
    the default instructor. Accepted even if no course matched.

    Error responses:
        400: Instructor missing
    """
    validate_instructor_assignment(course_id, request)

    await course_service.assign_instructor(course_id)
    return AcceptedResponse()


@router.put("/{course_id}", response_model=UpdateResponse)
@handle_course_errors
async def replace_course(
    course_id: str,
    request: ReplaceCourseRequest,
    course_service: CourseService = Depends(get_course_service),
) -> UpdateResponse:
    """
    Replace a course's name, subjects and scheduled time.

    Args:
        course_id: Course id
        request: ReplaceCourseRequest with coursename, subjects, datetime
        course_service: Injected CourseService

    Returns:
        UpdateResponse: Update outcome

    Error responses:
        400: Invalid data
        500: Update failed
    """
    validate_course_replacement(course_id, request)

    result = await course_service.replace_course(
        course_id=course_id,
        name=request.coursename,
        subjects=request.subjects,
        scheduled_at=request.datetime,
    )
    return map_update_to_response(result)


@router.delete("/{course_id}", response_model=MessageResponse)
@handle_course_errors
async def delete_course(
    course_id: str,
    course_service: CourseService = Depends(get_course_service),
) -> MessageResponse:
    """Delete course by ID. Succeeds whether or not the course existed."""
    await course_service.delete_course(course_id)
    return MessageResponse(message="Deleted")
