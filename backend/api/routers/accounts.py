"""
Account API endpoints.

Routes: POST /student, POST /login

Dependencies: backend.application.services, backend.models
System role: Registration and login HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from backend.application.services.account_service import AccountService
from backend.api.deps.dependencies import get_account_service
from backend.api.routers.courses.course_responses import map_insert_to_response
from backend.models.auth import CredentialsRequest, TokenResponse
from backend.models.common import ErrorResponse, InsertResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["accounts"])


@router.post("/student", response_model=InsertResponse)
async def register_student(
    request: CredentialsRequest,
    account_service: AccountService = Depends(get_account_service),
) -> InsertResponse:
    """
    Register a student account.

    The password is bcrypt-hashed before it is stored.
    """
    result = await account_service.register(email=request.email, password=request.password)
    return map_insert_to_response(result)


@router.post(
    "/login",
    response_model=TokenResponse,
    responses={400: {"model": ErrorResponse, "description": "Invalid login credentials"}},
)
async def login(
    request: CredentialsRequest,
    account_service: AccountService = Depends(get_account_service),
) -> TokenResponse:
    """
    Exchange email and password for a one-hour session token.

    Unknown email and wrong password produce the same 400 response.
    """
    token = await account_service.login(email=request.email, password=request.password)
    return TokenResponse(token=token)
