"""
JWT authentication guard.

Provides FastAPI dependencies for:
- Bearer token extraction
- Token verification into the current principal
"""

from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from enterprise_service.exceptions import UnauthorizedError
from enterprise_service.schemas.auth import TokenPayload
from enterprise_service.services.auth import authenticate_token

# HTTP Bearer token scheme; a missing header is reported as 401 below
security = HTTPBearer(auto_error=False)


def get_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Optional[str]:
    """Raw bearer token from the Authorization header, if any."""
    return credentials.credentials if credentials else None


def get_current_principal(token: Optional[str] = Depends(get_bearer_token)) -> TokenPayload:
    """
    Validate the bearer token and return the authenticated principal.

    Args:
        token: Bearer token from the Authorization header

    Returns:
        Principal with admin_id and email

    Raises:
        UnauthorizedError: If the token is missing, expired, invalid,
            or lacks the admin claims
    """
    payload = authenticate_token(token)

    admin_id = payload.get("admin_id")
    email = payload.get("email")
    if admin_id is None or email is None:
        raise UnauthorizedError("Invalid token")

    try:
        return TokenPayload(admin_id=admin_id, email=email)
    except ValueError:
        raise UnauthorizedError("Invalid token")
