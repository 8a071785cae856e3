"""
Authentication guard and response shaping for the API.
"""

from enterprise_service.middleware.auth import get_bearer_token, get_current_principal
from enterprise_service.middleware.response import ResponseEnvelopeMiddleware

__all__ = [
    "get_bearer_token",
    "get_current_principal",
    "ResponseEnvelopeMiddleware",
]
