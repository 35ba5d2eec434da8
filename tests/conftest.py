"""Shared test fixtures."""
import os

# Settings are read at import time; keep the app off the production database
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from books_api.cli import SAMPLE_BOOKS
from books_api.database import Base, get_db
from books_api.main import app
from books_api.models.book import Book


@pytest.fixture
async def engine(tmp_path):
    """Fresh SQLite database per test."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'books.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def seeded(session_factory):
    """Insert the two sample books, one commit each to fix storage order."""
    async with session_factory() as session:
        for data in SAMPLE_BOOKS:
            session.add(Book(**data))
            await session.commit()
    return [dict(data) for data in SAMPLE_BOOKS]


@pytest.fixture
def override_db(session_factory):
    """Point the get_db dependency at the test database."""

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    yield
    app.dependency_overrides.clear()


@pytest.fixture
async def client(override_db):
    """Create test client."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
