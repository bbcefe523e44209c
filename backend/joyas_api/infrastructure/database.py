"""Database Session Manager — async connection pool, single-statement reads, health checks.

Invariants:
    - One engine (and pool) per process, built at startup, disposed at shutdown
    - fetch_all is one round trip: no transaction management, no retry
    - All SQLAlchemy exceptions mapped to DatabaseError (core/errors.py)

Design Decisions:
    - Manager lives on app.state and reaches handlers through get_db_manager:
      no module-level singleton, handlers receive the pool explicitly
    - Pool sizing only applied to server databases; SQLite URLs keep the
      dialect's default pool
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.exc import DBAPIError, OperationalError, SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncConnection, AsyncEngine, create_async_engine,
)

from joyas_api.core.errors import DatabaseError

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """Wraps the async engine: pooled connections, error mapping, health checks."""

    def __init__(self, engine: AsyncEngine):
        self.engine = engine

    @asynccontextmanager
    async def connection(self) -> AsyncGenerator[AsyncConnection, None]:
        """Provide a pooled connection, mapping driver errors to DatabaseError."""
        try:
            async with self.engine.connect() as conn:
                yield conn
        except OperationalError as e:
            logger.error(f"DB operational error: {e}")
            raise DatabaseError("Connection or operational error", "execute") from e
        except DBAPIError as e:
            logger.error(f"DB driver error: {e}")
            raise DatabaseError("Database driver error", "query") from e
        except SQLAlchemyError as e:
            logger.error(f"SQLAlchemy error: {e}")
            raise DatabaseError("Database operation failed", "unknown") from e

    async def fetch_all(
        self, sql: str, params: dict[str, Any] | None = None,
    ) -> list[dict[str, Any]]:
        """Execute one statement and return every row as a plain dict."""
        async with self.connection() as conn:
            result = await conn.execute(text(sql), params or {})
            return [dict(row) for row in result.mappings()]

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            await self.fetch_all("SELECT 1")
            return True
        except DatabaseError as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()


def create_db_manager(
    database_url: str, pool_size: int = 10, max_overflow: int = 5,
) -> DatabaseSessionManager:
    if database_url.startswith("sqlite"):
        engine = create_async_engine(database_url)
    else:
        engine = create_async_engine(
            database_url,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_pre_ping=True,
            pool_recycle=3600,
        )
    return DatabaseSessionManager(engine)


def get_db_manager(request: Request) -> DatabaseSessionManager:
    """FastAPI dependency — the pool built in the app lifespan."""
    db_manager = getattr(request.app.state, "db_manager", None)
    if db_manager is None:
        raise RuntimeError("Database not initialized")
    return db_manager
