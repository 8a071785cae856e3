"""
Pytest configuration and fixtures for enterprise service tests.

Provides fixtures for:
- Database session
- Test client
- Test admins and enterprises
- JWT tokens
- Recording event publisher
"""

from typing import Any, AsyncGenerator, Optional

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from enterprise_service.api.dependencies import get_event_publisher
from enterprise_service.database import Base, enable_sqlite_foreign_keys, get_db
from enterprise_service.main import app
from enterprise_service.models import Admin, Enterprise, EnterpriseSettings
from enterprise_service.models.enterprise import AccessType, ReportGenerationType
from enterprise_service.security import create_access_token, hash_password

ADMIN_PASSWORD = "Admin1234"


class RecordingEventPublisher:
    """In-memory publisher that records events and serves canned lookups."""

    def __init__(self):
        self.emitted: list[tuple[str, Any]] = []
        self.sent: list[tuple[str, Any]] = []
        self.replies: dict[str, Any] = {}

    async def emit(self, pattern: str, data: Any) -> None:
        self.emitted.append((pattern, data))

    async def send(self, pattern: str, data: Any, timeout: Optional[float] = None) -> Optional[Any]:
        self.sent.append((pattern, data))
        return self.replies.get(pattern)

    def patterns(self) -> list[str]:
        return [pattern for pattern, _ in self.emitted]


@pytest_asyncio.fixture
async def test_engine(tmp_path):
    """Create test database engine."""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'test_db.sqlite'}", poolclass=NullPool, echo=False
    )
    enable_sqlite_foreign_keys(engine)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture
async def test_db(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create test database session."""
    async_session = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)

    async with async_session() as session:
        yield session


@pytest_asyncio.fixture
async def test_admin(test_db: AsyncSession) -> Admin:
    """Create test admin."""
    admin = Admin(
        email="admin@testorg.com",
        first_name="Test",
        last_name="Admin",
        password_hash=hash_password(ADMIN_PASSWORD),
    )
    test_db.add(admin)
    await test_db.commit()
    await test_db.refresh(admin)
    return admin


@pytest_asyncio.fixture
async def other_admin(test_db: AsyncSession) -> Admin:
    """Create a second admin."""
    admin = Admin(
        email="other@testorg.com",
        first_name="Other",
        last_name="Admin",
        password_hash=hash_password(ADMIN_PASSWORD),
    )
    test_db.add(admin)
    await test_db.commit()
    await test_db.refresh(admin)
    return admin


@pytest_asyncio.fixture
async def test_enterprise(test_db: AsyncSession) -> Enterprise:
    """Create test enterprise with batch/limited settings."""
    enterprise = Enterprise(
        name="Test Enterprise",
        description="Enterprise used in tests",
        website="https://testenterprise.com",
        industry="Software",
    )
    enterprise.settings = EnterpriseSettings(
        report_generation_type=ReportGenerationType.BATCH,
        access_type=AccessType.LIMITED,
    )
    test_db.add(enterprise)
    await test_db.commit()
    return enterprise


@pytest.fixture
def admin_password() -> str:
    return ADMIN_PASSWORD


@pytest.fixture
def admin_access_token(test_admin: Admin) -> str:
    """Create access token for the test admin."""
    return create_access_token(admin_id=test_admin.admin_id, email=test_admin.email)


@pytest.fixture
def auth_headers(admin_access_token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {admin_access_token}"}


@pytest.fixture
def event_publisher() -> RecordingEventPublisher:
    return RecordingEventPublisher()


@pytest_asyncio.fixture
async def client(
    test_db: AsyncSession, event_publisher: RecordingEventPublisher
) -> AsyncGenerator[AsyncClient, None]:
    """Create test HTTP client with database and publisher overrides."""

    async def override_get_db():
        yield test_db

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_event_publisher] = lambda: event_publisher

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
