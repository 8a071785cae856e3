"""
Request and response schemas.

Request schemas validate input before any service runs; response schemas
list exactly the fields that are serialized to clients.
"""

from enterprise_service.schemas.admin import AdminCreate, AdminResponse, AdminUpdate
from enterprise_service.schemas.auth import (
    AuthResponse,
    LoginRequest,
    RegisterRequest,
    TokenPayload,
)
from enterprise_service.schemas.enterprise import (
    EnterpriseCreate,
    EnterpriseResponse,
    EnterpriseSettingsResponse,
    EnterpriseSettingsSchema,
    EnterpriseUpdate,
    MessageResponse,
)

__all__ = [
    "AdminCreate",
    "AdminUpdate",
    "AdminResponse",
    "RegisterRequest",
    "LoginRequest",
    "AuthResponse",
    "TokenPayload",
    "EnterpriseCreate",
    "EnterpriseUpdate",
    "EnterpriseSettingsSchema",
    "EnterpriseResponse",
    "EnterpriseSettingsResponse",
    "MessageResponse",
]
