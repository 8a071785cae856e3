"""Enterprise Service

Persistence operations for enterprises and their settings.
"""

import logging
from typing import List, Union
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from enterprise_service.exceptions import NotFoundError
from enterprise_service.models import Enterprise, EnterpriseSettings
from enterprise_service.schemas.enterprise import EnterpriseCreate, EnterpriseUpdate

logger = logging.getLogger(__name__)

# Accepted by the API but not stored
TRANSIENT_FIELDS = {"contact_email", "settings"}


class EnterpriseService:
    """CRUD over enterprises. Settings are saved and deleted with their enterprise."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, data: EnterpriseCreate) -> Enterprise:
        """
        Create an enterprise together with its settings.

        Settings fields that are not supplied take their defaults
        (immediate report generation, full access).

        Args:
            data: Validated enterprise input

        Returns:
            The persisted enterprise with settings loaded
        """
        enterprise = Enterprise(**data.model_dump(exclude=TRANSIENT_FIELDS))

        settings_values = data.settings.model_dump(exclude_none=True) if data.settings else {}
        enterprise.settings = EnterpriseSettings(**settings_values)

        self.db.add(enterprise)
        await self.db.commit()

        logger.info(f"Created enterprise {enterprise.enterprise_id}")
        return await self.find_one(enterprise.enterprise_id)

    async def find_all(self) -> List[Enterprise]:
        result = await self.db.execute(
            select(Enterprise)
            .options(selectinload(Enterprise.settings))
            .order_by(Enterprise.created_at)
        )
        return list(result.scalars().all())

    async def find_one(self, enterprise_id: UUID) -> Enterprise:
        """
        Get an enterprise with its settings.

        Raises:
            NotFoundError: If the enterprise does not exist
        """
        result = await self.db.execute(
            select(Enterprise)
            .options(selectinload(Enterprise.settings))
            .where(Enterprise.enterprise_id == enterprise_id)
            .execution_options(populate_existing=True)
        )
        enterprise = result.scalar_one_or_none()

        if enterprise is None:
            raise NotFoundError(f"Enterprise with ID {enterprise_id} not found")

        return enterprise

    async def update(
        self, enterprise_id: UUID, data: Union[EnterpriseCreate, EnterpriseUpdate]
    ) -> Enterprise:
        """
        Update an enterprise and merge settings into it.

        A full ``EnterpriseCreate`` body replaces the enterprise's own fields,
        so optional fields it omits are cleared. An ``EnterpriseUpdate`` only
        touches the fields it sets. In both cases supplied settings are merged
        into the existing row, which is created when the enterprise has none.

        Args:
            enterprise_id: Enterprise UUID
            data: Replacement or partial enterprise data

        Returns:
            The updated enterprise

        Raises:
            NotFoundError: If the enterprise does not exist
        """
        enterprise = await self.find_one(enterprise_id)

        replace = isinstance(data, EnterpriseCreate)
        update_data = data.model_dump(exclude_unset=not replace, exclude=TRANSIENT_FIELDS)
        for field, value in update_data.items():
            setattr(enterprise, field, value)

        if data.settings is not None:
            settings_data = data.settings.model_dump(exclude_unset=True, exclude_none=True)
            if enterprise.settings is None:
                enterprise.settings = EnterpriseSettings(**settings_data)
            else:
                for field, value in settings_data.items():
                    setattr(enterprise.settings, field, value)

        await self.db.commit()
        return await self.find_one(enterprise_id)

    async def remove(self, enterprise_id: UUID) -> None:
        enterprise = await self.find_one(enterprise_id)
        await self.db.delete(enterprise)
        await self.db.commit()
        logger.info(f"Deleted enterprise {enterprise_id}")
