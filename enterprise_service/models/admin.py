"""
Admin model.

Operator accounts that authenticate against the API.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import DateTime, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from enterprise_service.models.base import Base, utc_now


class Admin(Base):
    """
    Admin account.

    Email is unique across all admins. The password hash is stored here
    but never leaves the service; response schemas list the exposed fields.
    """

    __tablename__ = "admins"

    # Primary key
    admin_id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)

    # Credentials
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    # Profile
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, onupdate=utc_now, nullable=False
    )

    def __repr__(self) -> str:
        return f"<Admin(admin_id={self.admin_id}, email={self.email})>"

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
