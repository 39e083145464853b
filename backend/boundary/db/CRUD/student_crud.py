"""
Student account CRUD operations.

Dependencies: motor, backend.boundary.db.CRUD.base_crud
System role: Account persistence operations
"""

from backend.boundary.db.connection import MongoGateway
from backend.boundary.db.CRUD.base_crud import BaseCRUD, Document


class StudentCRUD(BaseCRUD):
    """CRUD operations for the student collection."""

    def __init__(self) -> None:
        """Initialize StudentCRUD with the student collection."""
        super().__init__("student")

    async def get_by_email(self, db: MongoGateway, email: str) -> Document | None:
        """
        Retrieve the first account with an exact email match.

        Email is not unique in the collection; the first match wins.
        """
        return await self.find_one(db, {"email": email})


student_crud = StudentCRUD()
