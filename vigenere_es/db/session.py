from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from vigenere_es.core.config import get_settings
from vigenere_es.models.database import Base


@lru_cache
def get_engine(database_url: str) -> AsyncEngine:
    """Get the cached engine for `database_url`."""
    return create_async_engine(database_url, echo=get_settings().debug)


@lru_cache
def get_session_factory(database_url: str) -> async_sessionmaker[AsyncSession]:
    """Get the cached session factory for `database_url`."""
    return async_sessionmaker(get_engine(database_url), expire_on_commit=False)


async def init_db() -> None:
    """Create all tables that do not exist yet."""
    engine = get_engine(get_settings().database_url)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_db() -> None:
    """Close pooled connections of the configured engine."""
    await get_engine(get_settings().database_url).dispose()


@asynccontextmanager
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Open a session, rolling back if the caller raises."""
    session_factory = get_session_factory(get_settings().database_url)
    async with session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
