"""
CRUD operations for database collections.

Exports base CRUD class and collection-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from backend.boundary.db.CRUD import course_crud, student_crud

    course = await course_crud.get_by_id(db, course_id)
"""

from backend.boundary.db.CRUD.base_crud import BaseCRUD, to_object_id
from backend.boundary.db.CRUD.course_crud import CourseCRUD, course_crud
from backend.boundary.db.CRUD.student_crud import StudentCRUD, student_crud

__all__ = [
    "BaseCRUD",
    "to_object_id",
    "CourseCRUD",
    "course_crud",
    "StudentCRUD",
    "student_crud",
]
