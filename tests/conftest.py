"""Shared fixtures for tests that need a real database.

Uses an on-disk SQLite database through the aiosqlite driver; the
schema is created from the ORM metadata.
"""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from app.newsletter.infrastructure.db.models import Base


@pytest.fixture
def database_url(tmp_path: Path) -> str:
    """Build a SQLite URL for a fresh database file."""
    return f"sqlite+aiosqlite:///{tmp_path / 'newsletter.db'}"


@pytest_asyncio.fixture
async def engine(database_url: str) -> AsyncGenerator[AsyncEngine, None]:
    """Create an engine with the schema in place."""
    engine = create_async_engine(database_url)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create a session factory bound to the test engine."""
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
