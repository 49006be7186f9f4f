"""
Database connection management.

Builds the process-wide async engine and session factory, and provides the
per-request session scope used by the FastAPI dependencies.

Dependencies: sqlalchemy, docvault.configs
System role: Database connection lifecycle management
"""

from typing import AsyncGenerator

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from docvault.configs.database import DatabaseSettings


def create_engine_from_settings(db_config: DatabaseSettings) -> AsyncEngine:
    """
    Create async SQLAlchemy engine with a bounded connection pool.

    pool_pre_ping=True verifies connections before use to detect
    stale/broken connections early. SQLite URLs (tests, local runs) keep
    SQLAlchemy's default pool since it does not accept sizing arguments.

    Args:
        db_config: Database settings

    Returns:
        AsyncEngine: Configured async SQLAlchemy engine

    Raises:
        ArgumentError: If database URL is invalid
    """
    url = db_config.async_database_url
    if make_url(url).get_backend_name() == "sqlite":
        return create_async_engine(url, echo=db_config.echo_sql)

    return create_async_engine(
        url,
        echo=db_config.echo_sql,
        pool_size=db_config.pool_size,
        max_overflow=db_config.max_overflow,
        pool_timeout=db_config.pool_timeout,
        pool_pre_ping=True,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """
    Create async session factory for database operations.

    autoflush=False and expire_on_commit=False keep ORM instances usable
    after the service commits.

    Args:
        engine: Engine the sessions bind to

    Returns:
        async_sessionmaker: Async session factory

    Usage:
        SessionFactory = create_session_factory(engine)
        async with SessionFactory() as session:
            session.add(obj)
            await session.commit()
    """
    return async_sessionmaker(
        bind=engine,
        autoflush=False,
        expire_on_commit=False,
    )


async def session_scope(
    factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """
    Yield one session and return its connection to the pool on every exit path.

    Uncommitted work is rolled back when the session closes.

    Args:
        factory: Session factory bound to the process engine

    Yields:
        AsyncSession: Session scoped to the caller (one request)
    """
    async with factory() as session:
        yield session
