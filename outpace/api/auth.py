"""Auth endpoints.

POST /api/auth/register - create an account, returns {user, token}
POST /api/auth/login    - exchange credentials for {user, token}
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from outpace.api.deps import get_auth_service
from outpace.schemas.auth import AuthResult, LoginRequest, RegisterRequest
from outpace.schemas.common import ApiResponse
from outpace.services.auth_service import AuthService

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post(
    "/register",
    response_model=ApiResponse[AuthResult],
    response_model_exclude_unset=True,
    status_code=201,
)
def register(
    request: RegisterRequest,
    service: AuthService = Depends(get_auth_service),
) -> ApiResponse[AuthResult]:
    result = service.register(request.name, request.email, request.password)
    return ApiResponse[AuthResult](success=True, data=result, message="Registration successful")


@router.post("/login", response_model=ApiResponse[AuthResult], response_model_exclude_unset=True)
def login(
    request: LoginRequest,
    service: AuthService = Depends(get_auth_service),
) -> ApiResponse[AuthResult]:
    result = service.login(request.email, request.password)
    return ApiResponse[AuthResult](success=True, data=result, message="Login successful")
