"""
FastAPI application entry point.

Initializes FastAPI app, registers routers, adds middleware, and configures lifespan.

Dependencies: fastapi, uvicorn, backend.api, backend.observability, backend.configs
System role: Application initialization and configuration
"""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.api import api_router
from backend.api.error_handlers import register_exception_handlers
from backend.boundary.db.connection import MongoGateway
from backend.configs import Settings, get_settings
from backend.observability.logger import configure_logging
from backend.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Connects the shared database gateway on startup and closes it on
    shutdown. A failed connection aborts startup.
    """
    settings: Settings = app.state.settings
    configure_logging(settings.log_level)
    logger.info("Application startup: logging configured")

    database: MongoGateway = app.state.database
    try:
        await database.connect()
    except Exception as e:
        logger.exception(
            "Failed to initialize application resources",
            extra={"error": str(e)},
        )
        raise

    logger.info("Application startup complete")

    yield

    # Shutdown
    database.close()
    logger.info("Application shutdown")


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        settings: Application settings (loaded from the environment if None)

    Returns:
        FastAPI: Configured application instance
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Course Catalog API",
        description="Course CRUD with student accounts and token-protected routes",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = MongoGateway.from_settings(settings.database)

    # Add observability middleware (added first = last to execute)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(api_router)

    return app


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        create_app(settings),
        host=settings.server.host,
        port=settings.server.port,
    )
