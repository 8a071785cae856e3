"""
Security utilities.

Provides password hashing and verification using bcrypt, and signing,
verification and inspection of JWT access tokens.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import UUID

import bcrypt
from jose import ExpiredSignatureError, JWTError, jwt
from jose.exceptions import JOSEError

from enterprise_service.config.settings import get_settings

BCRYPT_ROUNDS = 10


class TokenError(Exception):
    """Base class for token failures."""


class TokenSigningError(TokenError):
    """Token could not be produced."""


class TokenExpiredError(TokenError):
    """Token signature is valid but the token is past its expiry."""


class InvalidTokenError(TokenError):
    """Token is malformed, tampered with, or signed with another key."""


def hash_password(password: str) -> str:
    """
    Hash a password using bcrypt.

    Args:
        password: Plain text password

    Returns:
        Hashed password as string
    """
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    hashed = bcrypt.hashpw(password.encode("utf-8"), salt)
    return hashed.decode("utf-8")


def verify_password(password: str, hashed_password: str) -> bool:
    """
    Verify a password against its hash.

    Args:
        password: Plain text password to verify
        hashed_password: Previously hashed password

    Returns:
        True if password matches, False otherwise

    Raises:
        ValueError: If hashed_password is not a bcrypt hash
    """
    return bcrypt.checkpw(password.encode("utf-8"), hashed_password.encode("utf-8"))


def create_access_token(
    admin_id: UUID, email: str, expires_delta: Optional[timedelta] = None
) -> str:
    """
    Create a JWT access token.

    Args:
        admin_id: Admin UUID
        email: Admin email
        expires_delta: Optional custom expiration time

    Returns:
        Encoded JWT token string

    Raises:
        TokenSigningError: If the token cannot be encoded
    """
    settings = get_settings()
    now = datetime.now(timezone.utc)
    if expires_delta:
        expire = now + expires_delta
    else:
        expire = now + timedelta(minutes=settings.jwt_expires_in_minutes)

    to_encode = {
        "sub": str(admin_id),  # Subject (admin ID)
        "admin_id": str(admin_id),
        "email": email,
        "iat": now,
        "exp": expire,
    }

    try:
        return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)
    except JOSEError as e:
        raise TokenSigningError(f"Failed to generate JWT token: {e}") from e


def verify_token(token: str) -> dict:
    """
    Verify and decode a JWT token.

    Args:
        token: JWT token string

    Returns:
        Decoded token payload

    Raises:
        TokenExpiredError: If the token has expired
        InvalidTokenError: If the token is invalid for any other reason
    """
    settings = get_settings()
    try:
        return jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except ExpiredSignatureError as e:
        raise TokenExpiredError("Token has expired") from e
    except JWTError as e:
        raise InvalidTokenError("Invalid token") from e


def decode_token(token: str) -> Optional[dict]:
    """Read token claims without checking the signature. For inspection only."""
    try:
        return jwt.get_unverified_claims(token)
    except JWTError:
        return None
