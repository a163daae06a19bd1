"""
Database initialization script.

Creates any missing tables. There are no migrations; the schema follows
the SQLModel models and is also created on application startup.

Usage:
    python -m app.db.init_db
"""

from asyncio import run as asyncio_run

from app.db.database import close_db, init_db
from app.monitoring import configure_logging, get_logger

logger = get_logger(__name__)


async def main() -> None:
    """Create tables and close the engine."""
    try:
        logger.info("Creating database tables...")
        await init_db()
        logger.info("Database ready!")
    finally:
        await close_db()


if __name__ == "__main__":
    configure_logging()
    asyncio_run(main())
