"""
Course CRUD operations.

Provides Create, Read, Update, Delete operations for the course collection
with course-specific filter construction.

Dependencies: motor, backend.boundary.db.CRUD.base_crud
System role: Course persistence operations
"""

import re
from typing import Any

from backend.boundary.db.connection import MongoGateway
from backend.boundary.db.CRUD.base_crud import BaseCRUD, Document


class CourseCRUD(BaseCRUD):
    """
    CRUD operations for the course collection.

    Extends BaseCRUD with name/subject filtering.
    """

    def __init__(self) -> None:
        """Initialize CourseCRUD with the course collection."""
        super().__init__("course")

    @staticmethod
    def build_criteria(
        coursename: str | None = None,
        subjects: str | None = None,
    ) -> dict[str, Any]:
        """
        Build a course filter from optional query parameters.

        Args:
            coursename: Case-insensitive substring matched against coursename
            subjects: Exact tag that must be a member of subjects

        Returns:
            dict: MongoDB filter, empty when no parameter is given
        """
        criteria: dict[str, Any] = {}
        if coursename:
            criteria["coursename"] = {"$regex": re.escape(coursename), "$options": "i"}
        if subjects:
            criteria["subjects"] = {"$in": [subjects]}
        return criteria

    async def search(
        self,
        db: MongoGateway,
        coursename: str | None = None,
        subjects: str | None = None,
    ) -> list[Document]:
        """Retrieve courses matching the optional name/subject filters."""
        return await self.find(db, self.build_criteria(coursename, subjects))


course_crud = CourseCRUD()
