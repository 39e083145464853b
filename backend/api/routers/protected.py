"""
Token-protected API endpoints.

Routes: GET /profile, GET /payment

Both routes sit behind the require_token gate and never run for a missing,
malformed or expired token.

Dependencies: backend.api.deps
System role: Protected routes demonstrating the token gate
"""

from fastapi import APIRouter, Depends

from backend.api.deps.dependencies import require_token
from backend.models.auth import ProfileResponse, TokenPayload
from backend.models.common import ErrorResponse, MessageResponse

router = APIRouter(
    tags=["protected"],
    responses={
        401: {"model": ErrorResponse, "description": "Authentication required"},
        403: {"model": ErrorResponse, "description": "Invalid or expired token"},
    },
)


@router.get("/profile", response_model=ProfileResponse)
async def profile(payload: TokenPayload = Depends(require_token)) -> ProfileResponse:
    """Echo the decoded token payload."""
    return ProfileResponse(message="success in accessing protected route", payload=payload)


@router.get("/payment", response_model=MessageResponse, dependencies=[Depends(require_token)])
async def payment() -> MessageResponse:
    """Protected placeholder route."""
    return MessageResponse(message="accessing protected payment route")
