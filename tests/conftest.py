"""Shared test fixtures.

Tests run against an in-memory SQLite database; the environment is set
before any application module builds its engine.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

# Registers all models on Base.metadata
import product_management.attribute.models  # noqa: E402,F401
import product_management.product.models  # noqa: E402,F401
from product_management.infrastructure.database import Base  # noqa: E402
from product_management.infrastructure.seed import seed_demo_data  # noqa: E402


@pytest_asyncio.fixture
async def engine():
    """Create a fresh in-memory database with all tables."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the test database."""
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def session(session_factory):
    """Database session for a test."""
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def demo_data(session) -> dict[str, int]:
    """Seed and commit the demo locales, attributes and product."""
    counts = await seed_demo_data(session)
    await session.commit()
    session.expunge_all()
    return counts
