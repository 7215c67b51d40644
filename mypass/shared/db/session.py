"""
Database Session Management

Async SQLAlchemy engine, session factory and request-scoped sessions.

Key Concepts:
=============

1. ENGINE: Connection pool for the configured DATABASE_URL
   - PostgreSQL (asyncpg): pooled, pool_size + max_overflow connections
   - SQLite (aiosqlite): used for tests and local runs; an in-memory
     database is pinned to one connection with StaticPool

2. SESSION: One unit of work per request
   - Repositories only flush(); the request commits or rolls back
   - Concurrent writes to the same row are last-write-wins

Request Lifecycle:
==================
    1. Request arrives at a FastAPI endpoint
    2. get_db() opens an AsyncSession
    3. Handlers and services use the session through repositories
    4. On success: commit()
    5. On exception: rollback(), then re-raise
       (after_commit callbacks registered by services run only on commit)
    6. Finally: close() returns the connection to the pool
"""

from typing import Any, AsyncGenerator, Callable

from sqlalchemy import event, text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from mypass.config.settings import settings
from mypass.shared.core.logging import logger
from mypass.shared.models import Base


# ═══════════════════════════════════════════════════════════════════════════════
# DATABASE ENGINE
# ═══════════════════════════════════════════════════════════════════════════════


def build_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """
    Create an async engine for the given URL.

    Pool sizing only applies to server databases. SQLite gets foreign key
    enforcement switched on for every connection, matching PostgreSQL.

    Args:
        database_url: SQLAlchemy async URL
        echo: Log every SQL statement

    Returns:
        AsyncEngine
    """
    if database_url.startswith("sqlite"):
        kwargs: dict[str, Any] = {"connect_args": {"check_same_thread": False}}
        if make_url(database_url).database in (None, "", ":memory:"):
            kwargs["poolclass"] = StaticPool
        sqlite_engine = create_async_engine(database_url, echo=echo, **kwargs)

        @event.listens_for(sqlite_engine.sync_engine, "connect")
        def _enable_foreign_keys(dbapi_connection, _connection_record):  # type: ignore[no-untyped-def]
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        return sqlite_engine

    return create_async_engine(
        database_url,
        echo=echo,
        pool_size=settings.DATABASE_POOL_SIZE,
        max_overflow=settings.DATABASE_MAX_OVERFLOW,
        # Test connections before use, survives database restarts
        pool_pre_ping=True,
    )


def build_session_factory(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """
    Create a session factory bound to an engine.

    expire_on_commit=False keeps loaded DTO sources usable after commit.
    """
    return async_sessionmaker(
        bind=bind,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


engine = build_engine(settings.DATABASE_URL, echo=settings.DEBUG)

AsyncSessionLocal = build_session_factory(engine)


def after_commit(session: AsyncSession, callback: Callable[[], None]) -> None:
    """
    Run `callback` once, after the session's current transaction commits.

    Services use this to evict cache entries a second time, once the new
    state is visible to other sessions.
    """
    event.listen(session.sync_session, "after_commit", lambda _session: callback(), once=True)


# ═══════════════════════════════════════════════════════════════════════════════
# FASTAPI DEPENDENCY: get_db()
# ═══════════════════════════════════════════════════════════════════════════════


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency for database sessions.

    Every request runs in a single transaction: committed when the handler
    returns, rolled back when anything raises.

    Yields:
        AsyncSession: Database session for the current request
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# ═══════════════════════════════════════════════════════════════════════════════
# LIFECYCLE FUNCTIONS
# ═══════════════════════════════════════════════════════════════════════════════


async def init_db() -> None:
    """
    Verify database connectivity on application startup.

    SQLite databases get their tables created here; PostgreSQL schemas are
    managed by Alembic migrations.

    Raises:
        Exception: If the database cannot be reached (prevents startup)
    """
    logger.info("Initializing database connection", sqlite=settings.is_sqlite)
    try:
        async with engine.begin() as conn:
            await conn.execute(text("SELECT 1"))
            if settings.is_sqlite:
                await conn.run_sync(Base.metadata.create_all)

        logger.info("Database connection established successfully")

    except Exception as e:
        logger.error("Failed to connect to database", error=str(e))
        raise


async def close_db() -> None:
    """Dispose of the engine and its pooled connections on shutdown."""
    logger.info("Closing database connection")
    await engine.dispose()
    logger.info("Database connection closed successfully")
