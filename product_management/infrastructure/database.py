"""Async SQLAlchemy engine, sessions and the declarative model base."""

from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from product_management.infrastructure.config import settings

engine = create_async_engine(
    settings.database_url,
    echo=settings.debug,
    pool_pre_ping=True,
)

async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)

Base = declarative_base()


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Yield a request-scoped session.

    The product management module only reads, so the session is
    rolled back rather than committed when the request ends.

    Yields:
        Session bound to the configured database.
    """
    async with async_session_factory() as session:
        try:
            yield session
        finally:
            await session.rollback()
