"""
KB Notes Backend — Database Engine & Initialization
====================================================

What:  Async SQLAlchemy engine for the local SQLite file and the startup
       routine that creates the `folders` table.
Why:   The service reserves a database file for folders but still serves
       everything from memory; the table is created and left empty.
How:   `init_database()` opens the engine and runs CREATE TABLE for every
       registered model (skipped when the table already exists).
Who:   Called by the lifespan handler in main.py and probed by /health.
When:  Engine is created at module import; initialization runs once on startup.
"""

import logging
from typing import Optional

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from kbnotes.config import settings

logger = logging.getLogger(__name__)


def build_engine(url: str) -> AsyncEngine:
    """Create an async engine, echoing SQL only in DEBUG mode."""
    return create_async_engine(url, echo=settings.log_level == "DEBUG")


# ── Engine Configuration ──────────────────────────────────────────────────
engine = build_engine(settings.database_url)


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models."""
    pass


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def init_database(db_engine: Optional[AsyncEngine] = None) -> None:
    """
    Create the database file and its tables if they are not present.

    What:    Connects (which creates the SQLite file) and issues CREATE TABLE
             for each model registered on `Base.metadata`.
    When:    Called once during app startup.

    Raises:
        DatabaseError: The file could not be opened or the table created.
    """
    from kbnotes.exceptions import DatabaseError
    from kbnotes.models import folder  # noqa: F401  registers the table

    db_engine = db_engine or engine
    try:
        async with db_engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    except (SQLAlchemyError, OSError) as e:
        raise DatabaseError(
            context={"url": str(db_engine.url), "error_type": type(e).__name__},
        ) from e

    logger.info("Database ready: %s", db_engine.url.database)


async def ping_database(db_engine: Optional[AsyncEngine] = None) -> bool:
    """Return True when `SELECT 1` succeeds against the database."""
    db_engine = db_engine or engine
    try:
        async with db_engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError) as e:
        logger.warning("Database unreachable: %s", str(e))
        return False
    return True


async def dispose_engine() -> None:
    """Close all pooled connections; called during application shutdown."""
    await engine.dispose()
