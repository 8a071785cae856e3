"""Configuration for the enterprise service."""

from enterprise_service.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
