"""
Course domain models and schemas.

Request/response schemas for course operations. Request fields are loosely
typed so the course validators decide what is acceptable and answer with the
route-specific 400 messages. Stored records are returned as found, so
documents written by older clients still list.

Dependencies: pydantic, bson
System role: Course API contracts
"""

import datetime as dt
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Written by PATCH /course/{id} regardless of the submitted instructor value
DEFAULT_INSTRUCTOR: dict[str, str] = {
    "name": "John Smith",
    "department": "Computer Science",
    "office": "Room 123",
}


class CreateCourseRequest(BaseModel):
    """Request schema for creating a new course."""

    course_name: str | None = Field(None, description="Course name")
    subjects: Any = Field(None, description="Subject tags (must be an array)")
    datetime: dt.datetime | None = Field(None, description="Scheduled time (defaults to now)")


class ReplaceCourseRequest(BaseModel):
    """Request schema for replacing a course's name, subjects and time."""

    coursename: str | None = Field(None, description="Course name")
    subjects: Any = Field(None, description="Subject tags (must be an array)")
    datetime: dt.datetime | None = Field(None, description="Scheduled time (defaults to now)")


class AssignInstructorRequest(BaseModel):
    """Request schema for attaching an instructor."""

    instructor: Any = Field(None, description="Any non-empty value; the stored record is fixed")


class CourseRecord(BaseModel):
    """Stored course document as returned to clients."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str = Field(alias="_id")
    coursename: Any = None
    subjects: Any = None
    datetime: Any = None
    instructor: Any = None

    @field_validator("id", mode="before")
    @classmethod
    def stringify_object_id(cls, value: Any) -> str:
        return str(value)


class CourseListResponse(BaseModel):
    """Response schema for filtered course listing."""

    course: list[CourseRecord]


class AcceptedResponse(BaseModel):
    """Response schema for accepted partial updates."""

    result: str = "accepted"
