"""
Health check API endpoints.

Routes: GET /health, GET /health/db

Dependencies: backend.boundary
System role: Health check HTTP API
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from backend.api.deps.dependencies import get_database
from backend.boundary.db.connection import MongoGateway


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/db", response_model=HealthResponse)
async def health_check_db(db: MongoGateway = Depends(get_database)):
    """Database health check."""
    if await db.ping():
        return HealthResponse(status="healthy", message="Database connection OK")
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "unhealthy", "message": "Database unreachable"},
    )
