"""API routers."""

from .accounts import router as accounts_router
from .courses import router as courses_router
from .health import router as health_router
from .protected import router as protected_router

__all__ = [
    "accounts_router",
    "courses_router",
    "health_router",
    "protected_router",
]
