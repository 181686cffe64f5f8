"""
Job Board Backend — Test Configuration (conftest.py)
=====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Every test gets its own SQLite file under pytest's tmp_path, so tests
       never share rows and never touch ./data.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── settings:      Settings pointing at a temporary database file
    ├── database:      Initialised Database (schema created), disposed afterwards
    ├── db_session:    AsyncSession for service-level tests
    ├── app:           FastAPI app built from `settings` with its database ready
    ├── test_client:   HTTPX AsyncClient talking to `app` in-process
    ├── employer / job_seeker: Users created through the service layer
    └── job:           A posting owned by `employer`

Note:
    ASGITransport does not run the lifespan, so the `app` fixture opens the
    database itself, the same way the lifespan handler does.
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from jobboard.config import Settings
from jobboard.database import Database
from jobboard.main import create_app
from jobboard.models.user import UserRole
from jobboard.schemas.job import JobCreate
from jobboard.schemas.user import UserCreate
from jobboard.services.job_service import job_service
from jobboard.services.user_service import user_service


# ══════════════════════════════════════════════════════════════════════════
# Database Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def make_settings(tmp_path):
    """
    Factory for test settings on a temporary database file; a local .env
    file is ignored.

    Usage:
        settings = make_settings(api_key_mode="require", api_key="k")
    """
    def _make(**overrides) -> Settings:
        values = {
            "database_url": str(tmp_path / "jobboard-test.db"),
            "secret_key": "test-secret",
            "log_level": "WARNING",
        }
        values.update(overrides)
        return Settings(_env_file=None, **values)
    return _make


@pytest.fixture
def settings(make_settings) -> Settings:
    return make_settings()


@pytest_asyncio.fixture
async def database(settings) -> AsyncGenerator[Database, None]:
    """A Database with its schema created on a fresh file."""
    db = Database(settings)
    await db.init()
    yield db
    await db.dispose()


@pytest_asyncio.fixture
async def db_session(database) -> AsyncGenerator[AsyncSession, None]:
    """
    Session used directly by service tests.

    Usage:
        async def test_create(db_session):
            user = await user_service.create_user(db_session, UserCreate(...))
    """
    async with database.session_factory() as session:
        yield session
        await session.rollback()


# ══════════════════════════════════════════════════════════════════════════
# HTTP Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def app(settings):
    application = create_app(settings)
    await application.state.database.init()
    yield application
    await application.state.database.dispose()


@pytest_asyncio.fixture
async def test_client(app) -> AsyncGenerator[AsyncClient, None]:
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


# ══════════════════════════════════════════════════════════════════════════
# Sample Data
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def employer(db_session):
    return await user_service.create_user(
        db_session,
        UserCreate(
            name="Acme Hiring",
            email="hiring@acme.example",
            password="s3cret",
            role=UserRole.EMPLOYER,
        ),
    )


@pytest_asyncio.fixture
async def job_seeker(db_session):
    return await user_service.create_user(
        db_session,
        UserCreate(name="John Doe", email="john.doe@example.com", password="hunter2"),
    )


@pytest_asyncio.fixture
async def job(db_session, employer):
    return await job_service.create_job(
        db_session,
        JobCreate(
            employer_id=employer.id,
            title="Software Engineer",
            description="Build and maintain the job board.",
            location="San Francisco, CA",
            salary="$120,000 - $150,000",
            employment_type="full_time",
        ),
    )
