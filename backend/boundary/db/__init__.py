"""
Database boundary layer: MongoDB gateway and CRUD operations.

Exports:
  - MongoGateway: Process-lifetime connection and collection accessor
  - BaseCRUD, CourseCRUD, StudentCRUD: Collection operations
  - course_crud, student_crud: CRUD operation singletons

Dependencies: motor, pymongo, backend.configs
System role: Database adapter providing persistent storage for courses
and student accounts.
"""

from backend.boundary.db.connection import MongoGateway
from backend.boundary.db.CRUD import (
    BaseCRUD,
    CourseCRUD,
    StudentCRUD,
    course_crud,
    student_crud,
    to_object_id,
)

__all__ = [
    "MongoGateway",
    "BaseCRUD",
    "CourseCRUD",
    "StudentCRUD",
    "course_crud",
    "student_crud",
    "to_object_id",
]
