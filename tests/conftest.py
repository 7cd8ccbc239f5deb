"""Pytest configuration and fixtures."""
import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy import func, select

from workhours.config import Settings
from workhours.context import AppContext
from workhours.database import Database
from workhours.main import create_app
from workhours.models.employee import EmployeeCreate
from workhours.services.employee_service import EmployeeService
from workhours.tables import work_hours


@pytest.fixture
def test_settings(tmp_path):
    """Settings pointing at a throwaway SQLite database."""
    return Settings(
        _env_file=None,
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        database_ssl="disable",
        session_secret="test-secret",
        admin_password="letmein",
    )


@pytest_asyncio.fixture
async def database(test_settings):
    """Connected database with empty tables."""
    db = Database(test_settings)
    await db.connect()
    yield db
    await db.disconnect()


@pytest_asyncio.fixture
async def app_context(test_settings):
    """Application context, started up like the lifespan would."""
    context = AppContext(test_settings)
    await context.startup()
    yield context
    await context.shutdown()


@pytest.fixture
def app(test_settings, app_context):
    """
    Application built around the test context.

    ASGITransport does not run the lifespan, so ``app_context`` is started
    by its own fixture.
    """
    return create_app(test_settings, app_context)


@pytest_asyncio.fixture
async def app_client(app):
    """Create a test client with a clean test database."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://testserver"
    ) as client:
        yield client


@pytest_asyncio.fixture
async def alice(app_context):
    """Employee Alice, created out of band."""
    service = EmployeeService(app_context.database)
    return await service.create_employee(EmployeeCreate(name="Alice", mo_hours=8))


@pytest.fixture
def count_work_hours():
    """Count stored work_hours rows."""

    async def count(db: Database) -> int:
        async with db.connection() as conn:
            result = await conn.execute(select(func.count()).select_from(work_hours))
            return result.scalar_one()

    return count
