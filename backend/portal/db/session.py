"""Async Session Factory: DB sessions for scripts outside FastAPI.

Invariants:
    - Accepts DATABASE_URL in any form config.async_database_url understands
    - Caller owns the engine lifecycle (dispose when done)
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker,
)

from portal.config import async_database_url


def create_session_factory(
    database_url: str,
) -> tuple[AsyncEngine, async_sessionmaker[AsyncSession]]:
    """Create an engine and async session factory for the given database URL."""
    engine = create_async_engine(async_database_url(database_url), echo=False)
    return engine, async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False,
    )
