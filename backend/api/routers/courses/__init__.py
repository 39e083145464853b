"""
Course catalog routes: list, create, fetch, assign instructor, replace, delete.
"""

from .courses_router import router

__all__ = ["router"]
