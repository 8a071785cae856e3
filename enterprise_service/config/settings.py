"""Configuration Settings for Enterprise Service

Manages environment variables and application configuration.
"""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings"""

    # Service info
    service_name: str = "enterprise-service"
    service_version: str = "1.0.0"
    environment: str = "development"

    # Server configuration
    host: str = "0.0.0.0"
    port: int = 3001
    debug: bool = False

    # PostgreSQL database
    db_host: str = "localhost"
    db_port: int = 5432
    db_username: str = "postgres"
    db_password: str = ""
    db_database: str = "enterprise_service"
    database_url: Optional[str] = None  # Overrides the DB_* components when set
    db_sync: bool = False  # Create tables on startup
    sql_echo: bool = False

    @property
    def sqlalchemy_url(self) -> str:
        """Async SQLAlchemy URL built from DATABASE_URL or the DB_* components"""
        url = self.database_url or (
            f"postgresql://{self.db_username}:{self.db_password}"
            f"@{self.db_host}:{self.db_port}/{self.db_database}"
        )
        if url.startswith("postgresql://"):
            url = url.replace("postgresql://", "postgresql+asyncpg://", 1)
        return url

    # JWT configuration
    jwt_secret: str = "change-me-in-production"
    jwt_algorithm: str = "HS256"
    jwt_expires_in_minutes: int = 60

    # Redis event side-channel
    events_enabled: bool = True
    redis_host: str = "localhost"
    redis_port: int = 6380
    redis_password: Optional[str] = None
    redis_tls: bool = False
    redis_retry_attempts: int = 5
    redis_retry_base_seconds: float = 1.0
    redis_retry_cap_seconds: float = 5.0
    redis_connect_timeout_seconds: float = 2.0  # Socket connect and health check bound
    cache_lookup_timeout_seconds: float = 0.5

    @property
    def redis_use_tls(self) -> bool:
        """TLS is always on in production"""
        return self.redis_tls or self.environment == "production"

    # CORS configuration
    cors_origins: list[str] = ["*"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Logging
    log_level: str = "INFO"

    # Error reporting
    sentry_dsn: Optional[str] = None

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance

    Returns:
        Settings instance
    """
    return Settings()
