"""
API routes module.

FastAPI routers for all HTTP endpoints.
"""

from fastapi import APIRouter

from .routers import (
    accounts_router,
    courses_router,
    health_router,
    protected_router,
)

api_router = APIRouter()

# Include all routers
api_router.include_router(health_router)
api_router.include_router(courses_router)
api_router.include_router(accounts_router)
api_router.include_router(protected_router)

__all__ = ["api_router"]
