"""
BookStore Backend: Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Every test gets a fresh in-memory SQLite database (aiosqlite with a
       StaticPool, so all sessions share one connection) with the schema
       already created.

Fixture Hierarchy (all function-scoped):
    ├── test_engine:     in-memory async engine with tables created
    ├── session_factory: async_sessionmaker bound to test_engine
    ├── store:           BookStore over one open session
    ├── mock_db_session: AsyncMock session for fault injection
    └── test_client:     HTTPX AsyncClient whose requests use test_engine
"""

import os

# Settings are read at import time: point the app at throwaway storage
# before anything from bookstore is imported.
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["LOG_LEVEL"] = "WARNING"

from typing import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from bookstore.database import create_schema, get_db_session
from bookstore.storage import BookStore


@pytest_asyncio.fixture
async def test_engine() -> AsyncGenerator[AsyncEngine, None]:
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_schema(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(test_engine):
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def store(session_factory) -> AsyncGenerator[BookStore, None]:
    """
    A BookStore over a single open session.

    Usage:
        async def test_add(store):
            author_id = await store.authors.add(Author(name="Orwell"))
    """
    async with session_factory() as session:
        yield BookStore(session)


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        mock_db_session.execute.side_effect = OperationalError("SELECT", {}, Exception("disk I/O"))
        await author_service.list_all(BookStore(mock_db_session))
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.delete = AsyncMock()
    session.add = MagicMock()
    return session


@pytest_asyncio.fixture
async def test_client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    """
    HTTPX AsyncClient talking to the FastAPI app in-process.

    ASGITransport does not run the lifespan, so the schema comes from the
    test_engine fixture and every request's session is drawn from it.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/books")
            assert response.status_code == 200
    """
    from bookstore.main import app

    async def override_get_db_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_get_db_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
