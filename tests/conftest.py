"""
Pytest configuration and shared fixtures.
"""

import os

# Settings are read at import time; the app engine is never connected in tests
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./.pytest-jobtracker.db")

from datetime import datetime, timezone
from typing import Any, Dict

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from jobtracker.database import get_db
from jobtracker.models import Base, Job, JobStatus, JobType
from main import app

OWNER = "user-1"
OTHER_OWNER = "user-2"


@pytest.fixture
async def engine(tmp_path):
    """Create a temporary SQLite database with all tables."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db_session(session_factory):
    """Session for seeding and direct service calls."""
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory):
    """HTTP client against the app with get_db bound to the test database."""

    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers() -> Dict[str, str]:
    return {"X-User-Id": OWNER}


@pytest.fixture
def make_job(db_session):
    """Insert a job directly, optionally with an explicit creation time."""

    async def _make_job(
        position: str = "software engineer",
        company: str = "acme",
        status: JobStatus = JobStatus.PENDING,
        job_type: JobType = JobType.FULL_TIME,
        owner: str = OWNER,
        created_at: datetime | None = None,
    ) -> Job:
        fields: Dict[str, Any] = dict(
            created_by=owner,
            company=company,
            position=position,
            status=status,
            job_type=job_type,
        )
        if created_at is not None:
            fields["created_at"] = created_at
        job = Job(**fields)
        db_session.add(job)
        await db_session.commit()
        return job

    return _make_job


def utc(year: int, month: int, day: int = 1, hour: int = 12) -> datetime:
    return datetime(year, month, day, hour, tzinfo=timezone.utc)
