"""Auth Service

Registration, login, token verification and refresh for admins. Tokens are
stateless: nothing is stored server-side between requests.
"""

import logging
from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from enterprise_service.exceptions import ConflictError, NotFoundError, UnauthorizedError
from enterprise_service.models import Admin
from enterprise_service.schemas.auth import RegisterRequest
from enterprise_service.security import (
    InvalidTokenError,
    TokenExpiredError,
    create_access_token,
    decode_token,
    hash_password,
    verify_password,
    verify_token,
)
from enterprise_service.services.admin import AdminService

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


@dataclass
class AuthResult:
    """Issued token and the admin it was issued for."""

    access_token: str
    admin: Admin


def authenticate_token(token: Optional[str]) -> dict:
    """
    Verify a bearer token and return its payload.

    Args:
        token: Raw JWT, or None when no Authorization header was sent

    Returns:
        Decoded token payload

    Raises:
        UnauthorizedError: If the token is missing, expired or invalid
    """
    if not token:
        raise UnauthorizedError("Token not provided")

    try:
        return verify_token(token)
    except TokenExpiredError:
        claims = decode_token(token) or {}
        logger.info(f"Expired token presented for admin {claims.get('admin_id')}")
        raise UnauthorizedError("Token has expired")
    except InvalidTokenError:
        raise UnauthorizedError("Invalid token")


class AuthService:
    """Composes password hashing and token signing with AdminService."""

    def __init__(self, admin_service: AdminService):
        self.admin_service = admin_service

    async def register(self, data: RegisterRequest) -> AuthResult:
        """Register a new admin and issue a token for it.

        Raises:
            UnauthorizedError: If the email is already registered
        """
        try:
            admin = await self.admin_service.create(
                email=data.email,
                first_name=data.first_name,
                last_name=data.last_name,
                password_hash=hash_password(data.password),
            )
        except ConflictError:
            raise UnauthorizedError("Email is already registered")
        return self._issue(admin)

    async def login(self, email: str, password: str) -> AuthResult:
        """Authenticate with email and password.

        Unknown email and wrong password fail the same way.

        Raises:
            UnauthorizedError: If the credentials are invalid
        """
        admin = await self.admin_service.find_by_email(email)
        if admin is None:
            raise UnauthorizedError(INVALID_CREDENTIALS)

        try:
            password_ok = verify_password(password, admin.password_hash)
        except ValueError:
            logger.warning(f"Stored password hash for admin {admin.admin_id} is malformed")
            password_ok = False

        if not password_ok:
            raise UnauthorizedError(INVALID_CREDENTIALS)

        return self._issue(admin)

    def verify(self, token: Optional[str]) -> dict:
        return authenticate_token(token)

    async def refresh(self, admin_id: UUID) -> AuthResult:
        """Issue a fresh token for an already authenticated admin.

        Raises:
            UnauthorizedError: If the admin no longer exists
        """
        try:
            admin = await self.admin_service.find_one(admin_id)
        except NotFoundError:
            raise UnauthorizedError("Admin no longer exists")
        return self._issue(admin)

    def _issue(self, admin: Admin) -> AuthResult:
        token = create_access_token(admin_id=admin.admin_id, email=admin.email)
        return AuthResult(access_token=token, admin=admin)
