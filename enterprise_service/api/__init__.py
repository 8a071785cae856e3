"""
API routes.

Provides REST API endpoints for:
- Authentication (register, login, verify, refresh)
- Admin management
- Enterprise management
"""

from enterprise_service.api.admins import router as admins_router
from enterprise_service.api.auth import router as auth_router
from enterprise_service.api.enterprises import router as enterprises_router

__all__ = [
    "auth_router",
    "admins_router",
    "enterprises_router",
]
