"""
Factories that build services for a request.

Every service used by a request shares the request's database session.
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from enterprise_service.database import get_db
from enterprise_service.events import EventPublisher, NullEventPublisher
from enterprise_service.services import AdminService, AuthService, EnterpriseService


def get_admin_service(db: AsyncSession = Depends(get_db)) -> AdminService:
    return AdminService(db)


def get_enterprise_service(db: AsyncSession = Depends(get_db)) -> EnterpriseService:
    return EnterpriseService(db)


def get_auth_service(admin_service: AdminService = Depends(get_admin_service)) -> AuthService:
    return AuthService(admin_service)


def get_event_publisher(request: Request) -> EventPublisher:
    """Publisher created at startup, or a no-op one when events are unavailable."""
    publisher = getattr(request.app.state, "event_publisher", None)
    return publisher or NullEventPublisher()
