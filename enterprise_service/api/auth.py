"""
Authentication API routes.

Provides endpoints for:
- Admin registration
- Login (JWT generation)
- Token verification
- Token refresh

Responses from these routes are not wrapped in the response envelope.
"""

from typing import Optional

from fastapi import APIRouter, Depends, status

from enterprise_service.api.dependencies import get_auth_service
from enterprise_service.middleware.auth import get_bearer_token, get_current_principal
from enterprise_service.schemas.admin import AdminResponse
from enterprise_service.schemas.auth import (
    AuthResponse,
    LoginRequest,
    RegisterRequest,
    TokenPayload,
)
from enterprise_service.services.auth import AuthResult, AuthService

router = APIRouter(prefix="/auth", tags=["authentication"])


def _auth_response(result: AuthResult) -> AuthResponse:
    return AuthResponse(
        access_token=result.access_token,
        admin=AdminResponse.model_validate(result.admin),
    )


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(
    register_data: RegisterRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Register a new admin.

    Args:
        register_data: Email, password and names
        auth_service: Auth service

    Returns:
        Access token and the created admin

    Raises:
        UnauthorizedError: If the email is already registered
    """
    return _auth_response(await auth_service.register(register_data))


@router.post("/login", response_model=AuthResponse)
async def login(
    login_data: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Authenticate an admin and return a JWT.

    Raises:
        UnauthorizedError: If credentials are invalid
    """
    return _auth_response(await auth_service.login(login_data.email, login_data.password))


@router.get("/verify", response_model=dict)
async def verify(
    principal: TokenPayload = Depends(get_current_principal),
    token: Optional[str] = Depends(get_bearer_token),
    auth_service: AuthService = Depends(get_auth_service),
):
    """Return the decoded payload of the presented token."""
    return auth_service.verify(token)


@router.post("/refresh", response_model=AuthResponse)
async def refresh(
    principal: TokenPayload = Depends(get_current_principal),
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Issue a new token for the authenticated admin.

    Raises:
        UnauthorizedError: If the admin no longer exists
    """
    return _auth_response(await auth_service.refresh(principal.admin_id))
