"""
Course service orchestrator.

Coordinates course lifecycle operations.

Dependencies: backend.boundary.db
System role: Course use case orchestration
"""

import logging
from datetime import datetime, timezone

from bson.errors import InvalidId
from pymongo.errors import PyMongoError
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult

from backend.boundary.db.connection import MongoGateway
from backend.boundary.db.CRUD.course_crud import course_crud
from backend.core.exceptions import CourseNotFoundError, CourseOperationError
from backend.models.course import DEFAULT_INSTRUCTOR

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(timezone.utc)


class CourseService:
    """Course service orchestrator."""

    def __init__(self, db: MongoGateway) -> None:
        """
        Initialize course service with the database gateway.

        Args:
            db: Shared MongoDB gateway
        """
        self.db = db

    async def list_courses(
        self,
        coursename: str | None = None,
        subjects: str | None = None,
    ) -> list[dict]:
        """
        List courses, optionally filtered.

        Args:
            coursename: Case-insensitive substring of the course name
            subjects: Tag that must appear in the course's subjects

        Returns:
            list[dict]: Matching course documents

        Raises:
            CourseOperationError: If the query fails
        """
        try:
            courses = await course_crud.search(self.db, coursename=coursename, subjects=subjects)
        except PyMongoError as e:
            logger.error("Failed to list courses", extra={"error": str(e)})
            raise CourseOperationError("Error listing courses", details={"error": str(e)}) from e

        logger.info(
            "Courses listed",
            extra={"count": len(courses), "coursename": coursename, "subjects": subjects},
        )
        return courses

    async def create_course(
        self,
        name: str,
        subjects: list[str],
        scheduled_at: datetime | None = None,
    ) -> InsertOneResult:
        """
        Create a course.

        Args:
            name: Course name
            subjects: Subject tags
            scheduled_at: Scheduled time (defaults to now)

        Returns:
            InsertOneResult: Insert outcome including the new _id

        Raises:
            CourseOperationError: If the insert fails
        """
        try:
            result = await course_crud.create(
                self.db,
                {
                    "coursename": name,
                    "subjects": subjects,
                    "datetime": scheduled_at or _now(),
                },
            )
        except PyMongoError as e:
            logger.error("Failed to create course", extra={"error": str(e), "course_name": name})
            raise CourseOperationError("Error creating course", details={"error": str(e)}) from e

        logger.info(
            "Course created",
            extra={"course_id": str(result.inserted_id), "course_name": name},
        )
        return result

    async def get_course(self, course_id: str) -> dict:
        """
        Get course by ID.

        Args:
            course_id: ObjectId hex string

        Returns:
            dict: Course document

        Raises:
            CourseNotFoundError: If no course has this id
            CourseOperationError: If the id is malformed or the lookup fails
        """
        try:
            course = await course_crud.get_by_id(self.db, course_id)
        except (InvalidId, TypeError, PyMongoError) as e:
            logger.error(
                "Failed to get course",
                extra={"error": str(e), "course_id": course_id},
            )
            raise CourseOperationError(
                "Error fetching course",
                course_id=course_id,
                details={"error": str(e)},
            ) from e

        if not course:
            raise CourseNotFoundError("course not found", course_id=course_id)
        return course

    async def assign_instructor(self, course_id: str) -> UpdateResult:
        """
        Attach the default instructor record to a course.

        The caller's instructor payload is only checked for presence; the
        stored value is always DEFAULT_INSTRUCTOR. A missing course is not
        an error.

        Args:
            course_id: ObjectId hex string

        Returns:
            UpdateResult: Update outcome

        Raises:
            CourseOperationError: If the id is malformed or the update fails
        """
        try:
            result = await course_crud.update_by_id(
                self.db,
                course_id,
                {"instructor": dict(DEFAULT_INSTRUCTOR)},
            )
        except (InvalidId, TypeError, PyMongoError) as e:
            logger.error(
                "Failed to assign instructor",
                extra={"error": str(e), "course_id": course_id},
            )
            raise CourseOperationError(
                "Error assigning instructor",
                course_id=course_id,
                details={"error": str(e)},
            ) from e

        logger.info(
            "Instructor assigned",
            extra={"course_id": course_id, "matched": result.matched_count},
        )
        return result

    async def replace_course(
        self,
        course_id: str,
        name: str,
        subjects: list[str],
        scheduled_at: datetime | None = None,
    ) -> UpdateResult:
        """
        Replace a course's name, subjects and scheduled time.

        Args:
            course_id: ObjectId hex string
            name: New course name
            subjects: New subject tags
            scheduled_at: New scheduled time (defaults to now)

        Returns:
            UpdateResult: Update outcome (matched_count 0 if absent)

        Raises:
            CourseOperationError: Generic failure, without driver detail
        """
        try:
            result = await course_crud.update_by_id(
                self.db,
                course_id,
                {
                    "coursename": name,
                    "subjects": subjects,
                    "datetime": scheduled_at or _now(),
                },
            )
        except (InvalidId, TypeError, PyMongoError) as e:
            logger.error(
                "Failed to replace course",
                extra={"error": str(e), "course_id": course_id},
            )
            raise CourseOperationError("Internal Server Error", course_id=course_id) from e

        logger.info(
            "Course replaced",
            extra={
                "course_id": course_id,
                "matched": result.matched_count,
                "modified": result.modified_count,
            },
        )
        return result

    async def delete_course(self, course_id: str) -> DeleteResult:
        """
        Delete a course. Deleting a missing course is not an error.

        Args:
            course_id: ObjectId hex string

        Returns:
            DeleteResult: Delete outcome

        Raises:
            CourseOperationError: If the id is malformed or the delete fails
        """
        try:
            result = await course_crud.delete_by_id(self.db, course_id)
        except (InvalidId, TypeError, PyMongoError) as e:
            logger.error(
                "Failed to delete course",
                extra={"error": str(e), "course_id": course_id},
            )
            raise CourseOperationError(
                "Error deleting course",
                course_id=course_id,
                details={"error": str(e)},
            ) from e

        logger.info(
            "Course deleted",
            extra={"course_id": course_id, "deleted": result.deleted_count},
        )
        return result
