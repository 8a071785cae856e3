"""Authentication schemas."""

import re
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field, field_validator

from enterprise_service.schemas.admin import AdminResponse

NAME_PATTERN = r"^[a-zA-ZÀ-ÿ\s]+$"
PASSWORD_PATTERN = re.compile(r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)[a-zA-Z\d\W]{8,}$")


class RegisterRequest(BaseModel):
    """Schema for admin self-registration."""

    email: EmailStr
    first_name: str = Field(..., min_length=1, max_length=100, pattern=NAME_PATTERN)
    last_name: str = Field(..., min_length=1, max_length=100, pattern=NAME_PATTERN)
    password: str = Field(..., min_length=8)

    @field_validator("password")
    @classmethod
    def password_complexity(cls, value: str) -> str:
        if not PASSWORD_PATTERN.match(value):
            raise ValueError(
                "Password must contain at least one uppercase letter, "
                "one lowercase letter and one number"
            )
        return value


class LoginRequest(BaseModel):
    """Schema for login request."""

    email: EmailStr
    password: str = Field(..., min_length=8)


class AuthResponse(BaseModel):
    """Token plus the authenticated admin."""

    access_token: str
    admin: AdminResponse


class TokenPayload(BaseModel):
    """Principal extracted from a verified access token."""

    admin_id: UUID
    email: str
