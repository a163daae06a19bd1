"""Database engine and session management."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy import event, text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession as SQLModelAsyncSession

from app.configs import settings
from app.errors.base import BaseAppError
from app.monitoring import get_logger

logger = get_logger(__name__)


def _configure_engine_events(engine: AsyncEngine) -> None:
    """Configure connection pool events for monitoring."""

    @event.listens_for(engine.sync_engine, "connect")
    def on_connect(dbapi_connection: object, connection_record: object) -> None:
        logger.debug("New database connection established")

    @event.listens_for(engine.sync_engine, "checkout")
    def on_checkout(
        dbapi_connection: object,
        connection_record: object,
        connection_proxy: object,
    ) -> None:
        logger.debug("Connection checked out from pool")


def engine_options(database_url: str) -> dict[str, Any]:
    """
    Return engine keyword arguments suited to the database backend.

    SQLite has no server-side pool to size, so the pool settings only apply
    to server databases.

    Args:
        database_url: SQLAlchemy database URL.

    Returns:
        dict[str, Any]: Keyword arguments for ``create_async_engine``.
    """
    options: dict[str, Any] = {"echo": settings.DATABASE_ECHO}
    if make_url(database_url).get_backend_name() == "sqlite":
        return options

    options.update(
        pool_size=settings.POOL_SIZE,
        max_overflow=settings.MAX_OVERFLOW,
        pool_timeout=settings.POOL_TIMEOUT,
        pool_recycle=settings.POOL_RECYCLE,
        pool_pre_ping=True,
    )
    return options


engine: AsyncEngine = create_async_engine(
    settings.DATABASE_URL,
    **engine_options(settings.DATABASE_URL),
)

if settings.DEBUG:
    _configure_engine_events(engine)

async_session_maker: async_sessionmaker[SQLModelAsyncSession] = async_sessionmaker(
    engine,
    class_=SQLModelAsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def get_session() -> AsyncGenerator[AsyncSession]:
    """
    Dependency for getting async database sessions.

    Yields:
        AsyncSession: Database session

    Example:
        ```python
        @router.get("/types")
        async def get_types(session: AsyncSession = Depends(get_session)):
            result = await session.execute(select(TypeDB))
            return result.scalars().all()
        ```
    """
    async with transaction() as session:
        yield session


@asynccontextmanager
async def transaction() -> AsyncGenerator[AsyncSession]:
    """
    Context manager for explicit transaction management.

    Yields:
        AsyncSession: Database session within a transaction

    Example:
        ```python
        async with transaction() as session:
            session.add(TypeDB(name="Travel"))
            # Commits on successful exit, rolls back on exception
        ```
    """
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except BaseAppError:
            await session.rollback()
            raise
        except Exception:
            await session.rollback()
            logger.exception("Transaction error")
            raise


async def init_db() -> None:
    """
    Initialize database tables.

    Creates all tables defined in SQLModel models. There is no migration
    mechanism; tables are created if missing.
    """
    async with engine.begin() as conn:
        # Import all models to ensure they are registered
        from app.models import BlogDB, TypeDB, UserDB  # noqa: F401, PLC0415

        await conn.run_sync(SQLModel.metadata.create_all)
        logger.info("Database initialized successfully!")


async def ping_db() -> bool:
    """Return True when the database answers a trivial query."""
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception:
        logger.exception("Database ping failed")
        return False
    return True


async def close_db() -> None:
    """
    Close database connections.

    This function should be called on application shutdown
    to properly close all database connections.
    """
    await engine.dispose()
    logger.info("Database connections closed")
