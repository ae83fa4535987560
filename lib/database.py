# =============================================================================
# lib/database.py - Database Handle
# =============================================================================
# Owns the SQLAlchemy async engine and session factory for one application.
# The handle has an explicit lifecycle instead of a module-level connection:
#
#   database = Database(settings.DATABASE_URL)
#   await database.connect()      # startup: probe + create tables
#   async with database.session() as session:
#       ...
#   await database.dispose()      # shutdown
#
# The FastAPI app keeps its handle on app.state.database (see app/main.py).
# =============================================================================

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

from app.exceptions import DatabaseConnectionError, DatabaseError

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Declarative base for every ORM table."""


def _is_memory_sqlite(url: str) -> bool:
    parsed = make_url(url)
    return parsed.get_backend_name() == "sqlite" and parsed.database in (None, "", ":memory:")


class Database:
    """
    Connection handle for the product store.

    Attributes:
        url: SQLAlchemy async URL
        echo: Log every SQL statement
        connected: True once connect() succeeded
    """

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        self.echo = echo
        self.connected = False
        self._engine: AsyncEngine | None = None
        self._sessionmaker: async_sessionmaker[AsyncSession] | None = None

    @property
    def engine(self) -> AsyncEngine:
        return self._ensure_engine()

    def _ensure_engine(self) -> AsyncEngine:
        if self._engine is None:
            self._engine = self._create_engine()
            self._sessionmaker = async_sessionmaker(self._engine, expire_on_commit=False)
        return self._engine

    def _create_engine(self) -> AsyncEngine:
        if _is_memory_sqlite(self.url):
            # One shared connection, otherwise every session gets its own empty database
            return create_async_engine(
                self.url,
                echo=self.echo,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
        return create_async_engine(self.url, echo=self.echo, pool_pre_ping=True)

    async def connect(self, fail_fast: bool = False) -> bool:
        """
        Probe the database and synchronize the schema.

        Failures are logged. With fail_fast the failure is raised as
        DatabaseConnectionError, otherwise the handle stays usable and
        later queries fail on their own.

        Returns:
            True if the database is reachable and the tables exist
        """
        try:
            async with self.engine.begin() as conn:
                await conn.execute(text("SELECT 1"))
                await conn.run_sync(Base.metadata.create_all)
        except (SQLAlchemyError, ImportError, OSError) as e:
            self.connected = False
            logger.error(f"Failed to connect to the database: {e}")
            if fail_fast:
                raise DatabaseConnectionError(str(e)) from e
            return False

        self.connected = True
        logger.info(f"Database connected: {make_url(self.url).render_as_string(hide_password=True)}")
        return True

    async def ping(self) -> bool:
        """Return True if a trivial query succeeds."""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except (SQLAlchemyError, ImportError, OSError) as e:
            logger.warning(f"Database ping failed: {e}")
            return False

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Open a session bound to this handle's engine."""
        try:
            self._ensure_engine()
        except (SQLAlchemyError, ImportError) as e:
            raise DatabaseError("open a database session", str(e)) from e

        async with self._sessionmaker() as session:
            yield session

    async def dispose(self) -> None:
        """Close every pooled connection."""
        if self._engine is not None:
            await self._engine.dispose()
            logger.info("Database connections closed")
        self._engine = None
        self._sessionmaker = None
        self.connected = False
