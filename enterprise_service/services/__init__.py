"""
Application services.

Each service receives its collaborators through the constructor.
"""

from enterprise_service.services.admin import AdminService
from enterprise_service.services.auth import AuthResult, AuthService, authenticate_token
from enterprise_service.services.enterprise import EnterpriseService

__all__ = [
    "AdminService",
    "AuthService",
    "AuthResult",
    "authenticate_token",
    "EnterpriseService",
]
