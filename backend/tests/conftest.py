"""
Rhythm90 Backend — Test Configuration (conftest.py)
====================================================

What:  Shared pytest fixtures for the entire test suite.
Why:   Route and service tests run against a real SQL engine (in-memory
       SQLite through aiosqlite) so statements are actually executed, while
       the Gemini SDK is always mocked.
How:   Each test gets a fresh database with every table created from
       Base.metadata, and an app whose session dependency points at it.

Fixture Hierarchy (all function-scoped):
    engine ──► session_factory ──┬─► store        (service-level tests)
                                 ├─► seed         (insert rows directly)
                                 └─► app ──► test_client (HTTP-level tests)
    demo_mode: turns DEMO_MODE on for one test
"""

import os

# Override settings for testing BEFORE any rhythm90 import
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["GEMINI_API_KEY"] = "test-key-not-real"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["DEMO_MODE"] = "false"

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from rhythm90.config import settings
from rhythm90.database import Base, get_db_session
from rhythm90.main import create_app
from rhythm90.store import Store
import rhythm90.models  # noqa: F401


# ══════════════════════════════════════════════════════════════════════════
# Database
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def engine():
    """
    A private in-memory database.

    StaticPool keeps the single connection alive, otherwise every new
    connection would see its own empty :memory: database.
    """
    test_engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def store(session_factory) -> AsyncGenerator[Store, None]:
    """A Store on one session; committed after the test body so reads see writes."""
    async with session_factory() as session:
        yield Store(session)
        await session.commit()


@pytest.fixture
def seed(session_factory):
    """
    Insert ORM rows directly, bypassing the routes.

    Usage:
        async def test_x(seed, test_client):
            await seed(Play(id="p1", team_id="team-123", name="A"))
    """
    async def _seed(*rows):
        async with session_factory() as session:
            session.add_all(rows)
            await session.commit()

    return _seed


@pytest.fixture
def fetch(session_factory):
    """Run a select on a fresh session and return the rows as dicts."""
    async def _fetch(statement):
        async with session_factory() as session:
            return await Store(session).all(statement)

    return _fetch


# ══════════════════════════════════════════════════════════════════════════
# Application
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def app(session_factory):
    """A fresh FastAPI app whose session dependency uses the test database."""
    application = create_app()

    async def override_get_db_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    application.dependency_overrides[get_db_session] = override_get_db_session
    return application


@pytest_asyncio.fixture
async def test_client(app):
    """
    HTTPX AsyncClient routed straight into the app via ASGITransport.

    raise_app_exceptions=False lets tests observe the 500 response produced
    by the catch-all handler instead of the re-raised exception.
    """
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def demo_mode(monkeypatch):
    monkeypatch.setattr(settings, "demo_mode", True)
