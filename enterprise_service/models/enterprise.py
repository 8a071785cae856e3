"""
Enterprise and EnterpriseSettings models.

Each enterprise owns at most one settings row. The settings row keeps only
the parent id; the parent reaches its settings through a one-directional
relationship that cascades saves and deletes.
"""

import enum
from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import DateTime, Enum, ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from enterprise_service.models.base import Base, utc_now


class ReportGenerationType(str, enum.Enum):
    """When enterprise reports are produced."""

    IMMEDIATE = "immediate"
    BATCH = "batch"


class AccessType(str, enum.Enum):
    """Access level granted to an enterprise."""

    FULL = "full"
    LIMITED = "limited"
    CUSTOM = "custom"


def _enum_values(enum_cls: type[enum.Enum]) -> list[str]:
    return [member.value for member in enum_cls]


class Enterprise(Base):
    """
    Enterprise (tenant) record.

    The contact email supplied at creation is validated but not stored.
    """

    __tablename__ = "enterprises"

    # Primary key
    enterprise_id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)

    # Enterprise details
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(String(1000), nullable=True)
    website: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    industry: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, onupdate=utc_now, nullable=False
    )

    # Relationships
    settings: Mapped[Optional["EnterpriseSettings"]] = relationship(
        "EnterpriseSettings",
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    def __repr__(self) -> str:
        return f"<Enterprise(enterprise_id={self.enterprise_id}, name={self.name})>"

    @property
    def formatted_website(self) -> str:
        """Website with a scheme, or an empty string."""
        if not self.website:
            return ""
        return self.website if self.website.startswith("http") else f"https://{self.website}"


class EnterpriseSettings(Base):
    """Per-enterprise settings. Deleted together with the owning enterprise."""

    __tablename__ = "enterprise_settings"

    # Primary key
    setting_id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)

    report_generation_type: Mapped[ReportGenerationType] = mapped_column(
        Enum(
            ReportGenerationType,
            name="report_generation_type",
            values_callable=_enum_values,
        ),
        default=ReportGenerationType.IMMEDIATE,
        nullable=False,
    )
    access_type: Mapped[AccessType] = mapped_column(
        Enum(AccessType, name="access_type", values_callable=_enum_values),
        default=AccessType.FULL,
        nullable=False,
    )

    # Owning enterprise
    enterprise_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("enterprises.enterprise_id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
    )

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, onupdate=utc_now, nullable=False
    )

    def __repr__(self) -> str:
        return (
            f"<EnterpriseSettings(setting_id={self.setting_id}, "
            f"enterprise_id={self.enterprise_id})>"
        )
