"""Database configuration and session management.

Provides the async SQLAlchemy engine, the per-request session dependency
and small helpers used by startup scripts and readiness checks.
"""

from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool

from app.infrastructure.config import settings


def build_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """Create an async engine for the given URL.

    In-memory SQLite databases live inside a single connection, so they
    get a static pool; every other backend uses the default pool with
    pre-ping enabled.

    Args:
        database_url: SQLAlchemy database URL.
        echo: Whether to log emitted SQL.

    Returns:
        Configured AsyncEngine.
    """
    kwargs: dict[str, Any] = {"echo": echo}
    url = make_url(database_url)
    if url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:"):
        kwargs["poolclass"] = StaticPool
        kwargs["connect_args"] = {"check_same_thread": False}
    else:
        kwargs["pool_pre_ping"] = True
    return create_async_engine(database_url, **kwargs)


engine = build_engine(settings.database_url, echo=settings.debug)

# Session factory
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)

# Base class for models
Base = declarative_base()


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session for a single request.

    Yields:
        AsyncSession for database operations.
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def create_tables(bind: AsyncEngine | None = None) -> None:
    """Create all catalog tables if they don't exist.

    Args:
        bind: Engine to use (defaults to the application engine).
    """
    # Register models on Base.metadata
    import app.catalog.models  # noqa: F401

    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def ping(session: AsyncSession) -> None:
    """Run a trivial query to prove the database is reachable.

    Args:
        session: Session to probe.
    """
    await session.execute(text("SELECT 1"))
