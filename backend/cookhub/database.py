"""
CookHub Backend — Store (Database Engine & Session Management)
================================================================

What:  The Store object owning the async SQLAlchemy engine, its session
       factory, and the FastAPI dependency that hands it to route handlers.
How:   A Store is constructed once in the application lifespan and attached
       to `app.state.store`. Routes declare `store: Store = Depends(get_store)`
       and pass it to services, which open one short-lived session per call.
       Tests build their own Store against a temporary file and attach it to
       the app they exercise.

Lifecycle:
    store = Store(settings.database_path)
    await store.prepare_file(recover=True)   # integrity check (may delete the file)
    await store.connect()                    # create engine + ping (fatal on failure)
    ...                                      # serve requests
    await store.dispose()                    # close pooled connections

Driver:
    aiosqlite behind SQLAlchemy's asyncio extension. The database is a single
    file; SQLite serializes writers itself.
"""

import asyncio
import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator, Optional

from fastapi import Request
from sqlalchemy import event, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import NullPool

from cookhub.exceptions import StoreUnavailableError

logger = logging.getLogger(__name__)


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Every model registers its table on `Base.metadata`; the schema manager
    creates the tables from that metadata on startup.
    """
    pass


def _enable_foreign_keys(dbapi_connection, connection_record) -> None:
    """Connect-event hook: turn on SQLite foreign key enforcement."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Store:
    """
    Shared handle on the relational store.

    Attributes:
        database_path:        Filesystem path of the SQLite file
        echo:                 Log every SQL statement (sqlalchemy.engine logger)
        enforce_foreign_keys: Enable `PRAGMA foreign_keys` on each connection
        enrollment_lock:      Serializes the enrollment capacity check + insert
                              within this process
    """

    def __init__(
        self,
        database_path: str,
        echo: bool = False,
        enforce_foreign_keys: bool = False,
    ):
        self.database_path = database_path
        self.echo = echo
        self.enforce_foreign_keys = enforce_foreign_keys
        self.enrollment_lock = asyncio.Lock()
        self._engine: Optional[AsyncEngine] = None
        self._session_factory: Optional[async_sessionmaker[AsyncSession]] = None

    @property
    def url(self) -> str:
        return f"sqlite+aiosqlite:///{self.database_path}"

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise StoreUnavailableError("Store is not connected. Call connect() on startup.")
        return self._engine

    # ── Startup ───────────────────────────────────────────────────────────
    async def prepare_file(self, recover: bool = True) -> bool:
        """
        Check an existing database file and delete it if it is unreadable.

        How:     Opens a throwaway connection and runs a trivial metadata query
                 (`SELECT COUNT(*) FROM sqlite_master`). A missing file is left
                 alone; SQLite creates it on first connect.
        Returns: True if a corrupted file was removed, False otherwise.

        Raises:
            StoreUnavailableError: the check failed and `recover` is False, or
                                   the corrupted file could not be removed.

        WARNING: recovery is destructive. All data in the removed file is lost.
        """
        path = Path(self.database_path)
        if not path.exists():
            return False

        checker = create_async_engine(self.url, poolclass=NullPool)
        try:
            async with checker.connect() as conn:
                await conn.execute(text("SELECT COUNT(*) FROM sqlite_master"))
            return False
        except SQLAlchemyError as e:
            if not recover:
                logger.critical("Database file %s failed the integrity check: %s", path, e)
                raise StoreUnavailableError(
                    message="Existing database file is corrupted",
                    context={"path": str(path), "error": str(e)},
                )
            logger.warning("Existing database %s is corrupted, removing: %s", path, e)
        finally:
            await checker.dispose()

        try:
            os.remove(path)
        except OSError as e:
            logger.critical("Failed to remove corrupted database %s: %s", path, e)
            raise StoreUnavailableError(
                message="Could not remove corrupted database file",
                context={"path": str(path), "os_error": str(e)},
            )
        return True

    async def connect(self) -> None:
        """
        Create the engine and verify it can reach the database.

        Raises:
            StoreUnavailableError: the file cannot be opened (missing directory,
                                   permissions, not a database).
        """
        engine = create_async_engine(self.url, echo=self.echo)
        if self.enforce_foreign_keys:
            event.listen(engine.sync_engine, "connect", _enable_foreign_keys)

        try:
            async with engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            await engine.dispose()
            logger.critical("Error connecting to database %s: %s", self.database_path, e)
            raise StoreUnavailableError(
                message="Error connecting to database",
                context={"path": self.database_path, "error": str(e)},
            )

        self._engine = engine
        self._session_factory = async_sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        logger.info("Database connected successfully: %s", self.database_path)

    # ── Sessions ──────────────────────────────────────────────────────────
    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Provide a transactional session.

        How it works:
            1. Creates a new session from the factory
            2. Yields it to the caller (the service performs queries)
            3. On success: commits the transaction
            4. On error: rolls back and re-raises
            5. Always: closes the session (returns connection to pool)

        Example:
            async with store.session() as session:
                result = await session.execute(select(Chef))
        """
        if self._session_factory is None:
            raise StoreUnavailableError("Store is not connected. Call connect() on startup.")

        async with self._session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise
            finally:
                await session.close()

    async def ping(self) -> bool:
        """Lightweight connectivity check used by the health route."""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except (SQLAlchemyError, StoreUnavailableError) as e:
            logger.warning("Store ping failed: %s", e)
            return False

    # ── Shutdown ──────────────────────────────────────────────────────────
    async def dispose(self) -> None:
        """Close all pooled connections. Safe to call when never connected."""
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
            self._session_factory = None


# ── Store Dependency ──────────────────────────────────────────────────────
def get_store(request: Request) -> Store:
    """
    FastAPI dependency returning the Store attached to the running app.

    Example usage in a route:
        @router.get("/chefs")
        async def list_chefs(store: Store = Depends(get_store)):
            return await catalog_service.list_chefs(store)
    """
    return request.app.state.store
