"""Admin Service

Persistence operations for Admin accounts.
"""

import logging
from typing import Any, List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from enterprise_service.exceptions import ConflictError, NotFoundError
from enterprise_service.models import Admin

logger = logging.getLogger(__name__)

EMAIL_TAKEN = "Email is already registered"
WRITE_REJECTED = "Admin could not be saved: a database constraint was violated"


class AdminService:
    """CRUD over the admins table.

    Email uniqueness is checked before writing. Two concurrent writers can
    both pass that check; the unique index then rejects the second one,
    which is reported as a conflict as well.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(
        self, email: str, first_name: str, last_name: str, password_hash: str
    ) -> Admin:
        """Create a new admin.

        Args:
            email: Admin email, unique across admins
            first_name: First name(s)
            last_name: Last name(s)
            password_hash: Already-hashed password

        Returns:
            The persisted admin

        Raises:
            ConflictError: If the email is already registered
        """
        if await self.find_by_email(email):
            raise ConflictError(EMAIL_TAKEN)

        admin = Admin(
            email=email,
            first_name=first_name,
            last_name=last_name,
            password_hash=password_hash,
        )
        self.db.add(admin)
        await self._commit()
        await self.db.refresh(admin)

        logger.info(f"Created admin {admin.admin_id}")
        return admin

    async def find_all(self) -> List[Admin]:
        result = await self.db.execute(select(Admin).order_by(Admin.created_at))
        return list(result.scalars().all())

    async def find_one(self, admin_id: UUID) -> Admin:
        """Return the admin with the given id.

        Raises:
            NotFoundError: If no admin has that id
        """
        result = await self.db.execute(select(Admin).where(Admin.admin_id == admin_id))
        admin = result.scalar_one_or_none()

        if admin is None:
            raise NotFoundError(f"Admin with ID {admin_id} not found")

        return admin

    async def find_by_email(self, email: str) -> Optional[Admin]:
        """Return the admin with the given email, or None."""
        result = await self.db.execute(select(Admin).where(Admin.email == email))
        return result.scalar_one_or_none()

    async def update(self, admin_id: UUID, changes: dict[str, Any]) -> Admin:
        """Apply a partial update.

        Args:
            admin_id: Admin UUID
            changes: Field values to set; a new password must already be
                hashed into ``password_hash``

        Returns:
            The updated admin

        Raises:
            NotFoundError: If the admin does not exist
            ConflictError: If the new email belongs to another admin
        """
        admin = await self.find_one(admin_id)

        new_email = changes.get("email")
        if new_email and new_email != admin.email:
            existing = await self.find_by_email(new_email)
            if existing is not None and existing.admin_id != admin.admin_id:
                raise ConflictError(EMAIL_TAKEN)

        for field, value in changes.items():
            setattr(admin, field, value)

        await self._commit()
        await self.db.refresh(admin)
        return admin

    async def remove(self, admin_id: UUID) -> None:
        admin = await self.find_one(admin_id)
        await self.db.delete(admin)
        await self.db.commit()
        logger.info(f"Deleted admin {admin_id}")

    async def _commit(self) -> None:
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            logger.info(f"Admin write rejected by constraint: {e.orig}")
            raise ConflictError(self._conflict_message(e)) from e

    @staticmethod
    def _conflict_message(error: IntegrityError) -> str:
        """Name the email only when the unique email constraint is what failed."""
        detail = str(error.orig).lower()
        if "email" in detail and ("unique" in detail or "duplicate" in detail):
            return EMAIL_TAKEN
        return WRITE_REJECTED
