"""
Async database access helpers (raw SQL) using asyncpg.

This module owns the connection pool. FastAPI initializes it on startup and
closes it on shutdown (see `api/main.py`). Each request checks out exactly one
connection through the `connection` dependency and hands it to the feature
repositories explicitly.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, AsyncIterator

import asyncpg

from . import settings
from .errors import internal_error

logger = logging.getLogger(__name__)

_pool: asyncpg.Pool | None = None

# Raised while checking out a connection: timeout, pool closing, connect/auth failure.
ACQUIRE_ERRORS = (asyncio.TimeoutError, asyncpg.PostgresError, asyncpg.InterfaceError, OSError)


async def init_pool() -> None:
    global _pool
    if _pool is not None:
        return None
    _pool = await asyncpg.create_pool(
        dsn=settings.database_url(),
        min_size=settings.pool_min_size(),
        max_size=settings.pool_max_size(),
    )
    logger.info("db_pool_ready max_size=%s", settings.pool_max_size())


async def close_pool() -> None:
    global _pool
    if _pool is None:
        return None
    await _pool.close()
    _pool = None
    logger.info("db_pool_closed")


def pool() -> asyncpg.Pool:
    if _pool is None:
        raise RuntimeError("DB pool is not initialized. Call init_pool() on startup.")
    return _pool


async def connection() -> AsyncIterator[asyncpg.Connection]:
    """
    FastAPI dependency: one pooled connection per request.

    Fails the request with a 500 before the handler runs when no connection
    can be acquired in time. The connection goes back to the pool on every
    exit path.
    """
    db_pool = pool()
    try:
        conn = await db_pool.acquire(timeout=settings.acquire_timeout())
    except ACQUIRE_ERRORS as exc:
        logger.error("db_acquire_failed error=%r", exc)
        raise internal_error() from exc

    try:
        yield conn
    finally:
        await db_pool.release(conn)


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


async def fetch_one(conn: asyncpg.Connection, sql: str, *args: Any) -> dict[str, Any] | None:
    """
    Run a query and return a single row as a dict (or None).
    """
    row = await conn.fetchrow(sql, *args)
    return _record_to_dict(row) if row is not None else None


async def fetch_column(conn: asyncpg.Connection, sql: str, column: str, *args: Any) -> list[Any]:
    """
    Run a query and project every row to the value of one column.
    """
    rows = await conn.fetch(sql, *args)
    return [r[column] for r in rows]


async def execute(conn: asyncpg.Connection, sql: str, *args: Any) -> None:
    """
    Run a statement (INSERT/UPDATE/DELETE/DDL). No result returned.
    """
    await conn.execute(sql, *args)
