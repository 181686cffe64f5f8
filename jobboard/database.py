"""
Job Board — Database Engine & Session Management
=================================================

What:  Async SQLAlchemy engine, session factory, and FastAPI session dependency
       for the embedded SQLite database file.
How:   `Database` is built from `Settings` by the app factory and stored on
       `app.state.database`. On startup `init()` creates the database file (and
       its parent directory) and the schema; on shutdown `dispose()` closes
       pooled connections.
Who:   Route handlers receive sessions through `Depends(get_db_session)`.

SQLite specifics:
    - The aiosqlite driver runs sqlite3 calls in a worker thread so queries do
      not block the event loop.
    - Foreign keys are off by default in SQLite; every new connection enables
      them with PRAGMA foreign_keys = ON.
    - Schema creation is idempotent (CREATE TABLE IF NOT EXISTS semantics).
"""

import logging
from datetime import datetime, timezone
from typing import AsyncGenerator, Optional

from fastapi import Request
from sqlalchemy import DateTime, event, text
from sqlalchemy.types import TypeDecorator
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from jobboard.config import Settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Every model registers its table on `Base.metadata`, which `Database.init()`
    uses to create the schema.
    """
    pass


class UTCDateTime(TypeDecorator):
    """
    Timezone-aware UTC timestamp column.

    SQLite has no timestamp type and SQLAlchemy stores naive ISO strings, so
    values are converted to UTC on the way in and tagged as UTC on the way out.
    """

    impl = DateTime
    cache_ok = True

    def process_bind_param(self, value: Optional[datetime], dialect) -> Optional[datetime]:
        if value is None:
            return None
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc).replace(tzinfo=None)

    def process_result_value(self, value: Optional[datetime], dialect) -> Optional[datetime]:
        if value is None:
            return None
        return value.replace(tzinfo=timezone.utc)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _enable_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys = ON")
    cursor.close()


class Database:
    """
    Owns the engine and session factory for one database file.

    Attributes:
        url:              Normalised sqlite+aiosqlite URL
        engine:           AsyncEngine (connections are opened lazily)
        session_factory:  async_sessionmaker producing AsyncSession objects
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        self.url = settings.database_url
        self.engine: AsyncEngine = create_async_engine(
            self.url,
            pool_pre_ping=True,
            # SQL echo only when debugging; it is very noisy
            echo=settings.log_level == "DEBUG",
        )
        event.listen(self.engine.sync_engine, "connect", _enable_foreign_keys)

        # expire_on_commit=False: attributes stay readable after commit
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    async def init(self) -> None:
        """
        Open or create the database file and create all tables.

        Raises:
            OSError: The parent directory cannot be created.
            sqlalchemy.exc.OperationalError: SQLite cannot open or write the file.
        """
        # Import models so their tables are registered on Base.metadata
        from jobboard import models  # noqa: F401

        path = self.settings.database_path
        if path is not None:
            path.parent.mkdir(parents=True, exist_ok=True)
            logger.info("Database file: %s", path.resolve())
        else:
            logger.info("Database: in-memory")

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database schema ready (%d tables)", len(Base.metadata.tables))

    async def ping(self) -> bool:
        """Runs SELECT 1; returns False instead of raising when unreachable."""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.warning("Database ping failed: %s", str(e))
            return False

    async def dispose(self) -> None:
        """Closes all pooled connections."""
        await self.engine.dispose()


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Creates a session from the app's Database
        2. Yields it to the route handler
        3. On success: commits the transaction
        4. On error: rolls back and re-raises for the global error handlers
        5. Always: closes the session

    Example usage in a route:
        @router.get("/jobs")
        async def list_jobs(db: AsyncSession = Depends(get_db_session)):
            ...
    """
    database: Database = request.app.state.database
    async with database.session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
