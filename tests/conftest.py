"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- An in-memory SQLite database (aiosqlite) with foreign keys enforced
- A session seeded with companies c1..c3 and jobs j1..j3
"""

from decimal import Decimal

import pytest_asyncio
from sqlalchemy import event
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from jobly.db.models import Company, Job
from jobly.db.session import init_models
from jobly.repositories.job import JobRepository


# Use in-memory SQLite for testing (fast, isolated)
SQLALCHEMY_TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def engine():
    """Fresh database with all tables for each test."""
    engine = create_async_engine(
        SQLALCHEMY_TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # SQLite ignores foreign keys unless asked per connection
    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    await init_models(engine)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    maker = async_sessionmaker(bind=engine, expire_on_commit=False, autoflush=False)
    async with maker() as session:
        yield session


@pytest_asyncio.fixture
async def job_ids(db_session):
    """
    Seed companies and jobs; return {title: id}.

    Ids rather than ORM objects, since a rollback inside a test expires
    every loaded instance.
    """
    db_session.add_all([
        Company(handle="c1", name="C1", num_employees=1, description="Desc1", logo_url="http://c1.img"),
        Company(handle="c2", name="C2", num_employees=2, description="Desc2", logo_url="http://c2.img"),
        Company(handle="c3", name="C3", num_employees=3, description="Desc3", logo_url="http://c3.img"),
    ])
    await db_session.flush()

    jobs = [
        Job(title="j1", salary=100000, equity=Decimal("0.98"), company_handle="c1"),
        Job(title="j2", salary=150000, equity=Decimal("0.95"), company_handle="c2"),
        Job(title="j3", salary=50000, equity=Decimal("0"), company_handle="c1"),
    ]
    db_session.add_all(jobs)
    await db_session.commit()
    return {job.title: job.id for job in jobs}


@pytest_asyncio.fixture
async def repo(db_session, job_ids):
    return JobRepository(db_session)
