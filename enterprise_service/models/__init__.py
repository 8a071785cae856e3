"""
Database models.

- Admin (operator accounts)
- Enterprise (tenant records)
- EnterpriseSettings (one settings row owned by each enterprise)
"""

from enterprise_service.models.admin import Admin
from enterprise_service.models.enterprise import (
    AccessType,
    Enterprise,
    EnterpriseSettings,
    ReportGenerationType,
)

__all__ = [
    "Admin",
    "Enterprise",
    "EnterpriseSettings",
    "ReportGenerationType",
    "AccessType",
]
