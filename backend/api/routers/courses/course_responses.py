"""
Course response mapping utilities.

Transforms stored documents and driver write results into Pydantic
response models.

Dependencies: backend.models
System role: Course response transformation
"""

from typing import Any

from pymongo.results import InsertOneResult, UpdateResult

from backend.models.common import InsertOutcome, InsertResponse, UpdateOutcome, UpdateResponse
from backend.models.course import CourseListResponse, CourseRecord


def map_course_to_response(course_data: dict[str, Any]) -> CourseRecord:
    """
    Transform a course document into CourseRecord.

    Args:
        course_data: Stored course document including _id

    Returns:
        CourseRecord: Pydantic model for API response
    """
    return CourseRecord.model_validate(course_data)


def map_courses_to_response(courses_data: list[dict[str, Any]]) -> CourseListResponse:
    """Wrap course documents under the "course" field."""
    return CourseListResponse(course=[map_course_to_response(c) for c in courses_data])


def map_insert_to_response(result: InsertOneResult) -> InsertResponse:
    return InsertResponse(result=InsertOutcome.from_result(result))


def map_update_to_response(result: UpdateResult) -> UpdateResponse:
    return UpdateResponse(result=UpdateOutcome.from_result(result))
