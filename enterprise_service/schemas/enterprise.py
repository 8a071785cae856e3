"""Enterprise schemas."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field, field_validator

from enterprise_service.models.enterprise import AccessType, ReportGenerationType

# Scheme is optional, as in "example.com" or "https://example.com/about"
WEBSITE_PATTERN = r"^(https?://)?([A-Za-z0-9-]+\.)+[A-Za-z]{2,}(:\d+)?(/\S*)?$"


class EnterpriseSettingsSchema(BaseModel):
    """Nested settings accepted on create and update."""

    report_generation_type: Optional[ReportGenerationType] = None
    access_type: Optional[AccessType] = None


class EnterpriseCreate(BaseModel):
    """Schema for creating an enterprise. Also accepted by PUT."""

    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = Field(None, max_length=1000)
    website: Optional[str] = Field(None, max_length=255, pattern=WEBSITE_PATTERN)
    industry: Optional[str] = Field(None, max_length=100)
    contact_email: EmailStr
    settings: Optional[EnterpriseSettingsSchema] = None


class EnterpriseUpdate(BaseModel):
    """Schema for partially updating an enterprise."""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = Field(None, max_length=1000)
    website: Optional[str] = Field(None, max_length=255, pattern=WEBSITE_PATTERN)
    industry: Optional[str] = Field(None, max_length=100)
    contact_email: Optional[EmailStr] = None
    settings: Optional[EnterpriseSettingsSchema] = None

    @field_validator("name")
    @classmethod
    def name_not_null(cls, value: Optional[str]) -> str:
        if value is None:
            raise ValueError("name cannot be null")
        return value


class EnterpriseSettingsResponse(BaseModel):
    """Settings as returned to clients, without the owning enterprise."""

    setting_id: UUID
    report_generation_type: ReportGenerationType
    access_type: AccessType
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class EnterpriseResponse(BaseModel):
    """Schema for enterprise response."""

    enterprise_id: UUID
    name: str
    description: Optional[str]
    website: Optional[str]
    industry: Optional[str]
    settings: Optional[EnterpriseSettingsResponse]
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class MessageResponse(BaseModel):
    """Generic message response."""

    message: str
