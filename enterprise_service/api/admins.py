"""
Admin management API routes.

Provides CRUD operations for admins. All routes require a bearer token.
"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status

from enterprise_service.api.dependencies import get_admin_service
from enterprise_service.middleware.auth import get_current_principal
from enterprise_service.schemas.admin import AdminCreate, AdminResponse, AdminUpdate
from enterprise_service.security import hash_password
from enterprise_service.services.admin import AdminService

router = APIRouter(
    prefix="/admins",
    tags=["admins"],
    dependencies=[Depends(get_current_principal)],
)


@router.post("", response_model=AdminResponse, status_code=status.HTTP_201_CREATED)
async def create_admin(
    admin: AdminCreate,
    admin_service: AdminService = Depends(get_admin_service),
):
    """
    Create a new admin.

    The password is hashed before it reaches the service.

    Args:
        admin: Admin data
        admin_service: Admin service

    Returns:
        Created admin

    Raises:
        ConflictError: If the email is already registered
    """
    return await admin_service.create(
        email=admin.email,
        first_name=admin.first_name,
        last_name=admin.last_name,
        password_hash=hash_password(admin.password),
    )


@router.get("", response_model=List[AdminResponse])
async def list_admins(admin_service: AdminService = Depends(get_admin_service)):
    """List all admins."""
    return await admin_service.find_all()


@router.get("/{admin_id}", response_model=AdminResponse)
async def get_admin(
    admin_id: UUID,
    admin_service: AdminService = Depends(get_admin_service),
):
    """
    Get admin by ID.

    Raises:
        NotFoundError: If admin not found
    """
    return await admin_service.find_one(admin_id)


@router.patch("/{admin_id}", response_model=AdminResponse)
async def update_admin(
    admin_id: UUID,
    admin_update: AdminUpdate,
    admin_service: AdminService = Depends(get_admin_service),
):
    """
    Update admin.

    Args:
        admin_id: Admin UUID
        admin_update: Fields to update
        admin_service: Admin service

    Returns:
        Updated admin

    Raises:
        NotFoundError: If admin not found
        ConflictError: If the new email belongs to another admin
    """
    update_data = admin_update.model_dump(exclude_unset=True, exclude_none=True)
    if "password" in update_data:
        update_data["password_hash"] = hash_password(update_data.pop("password"))

    return await admin_service.update(admin_id, update_data)


@router.delete("/{admin_id}", status_code=status.HTTP_200_OK)
async def delete_admin(
    admin_id: UUID,
    admin_service: AdminService = Depends(get_admin_service),
):
    """
    Delete admin.

    Raises:
        NotFoundError: If admin not found
    """
    await admin_service.remove(admin_id)
