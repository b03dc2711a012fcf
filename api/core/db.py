"""
Async database access helpers (raw SQL) using aiosqlite.

This module owns the single shared connection. FastAPI opens it on startup and
closes it on shutdown (see `api/main.py`).

SQL parameter style:
- sqlite uses positional placeholders: ?, ?, ?, ...

All access goes through one asyncio lock, so a scoped transaction is never
interleaved with statements from another request.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

import aiosqlite

logger = logging.getLogger(__name__)

_conn: aiosqlite.Connection | None = None
_lock: asyncio.Lock | None = None


async def connect(path: str | Path) -> None:
    global _conn, _lock
    if _conn is not None:
        return None
    # isolation_level=None: no implicit transactions, BEGIN/COMMIT are explicit.
    conn = await aiosqlite.connect(str(path), isolation_level=None)
    conn.row_factory = aiosqlite.Row
    _conn = conn
    _lock = asyncio.Lock()
    logger.info("db_connected path=%s", path)


async def close() -> None:
    global _conn, _lock
    if _conn is None:
        return None
    await _conn.close()
    _conn = None
    _lock = None
    logger.info("db_closed")


def connection() -> aiosqlite.Connection:
    if _conn is None:
        raise RuntimeError("DB connection is not initialized. Call connect() on startup.")
    return _conn


def _guard() -> asyncio.Lock:
    if _lock is None:
        raise RuntimeError("DB connection is not initialized. Call connect() on startup.")
    return _lock


def _row_to_dict(row: aiosqlite.Row) -> dict[str, Any]:
    return dict(row)


@asynccontextmanager
async def transaction() -> AsyncIterator[aiosqlite.Connection]:
    """
    Scoped transaction on the shared connection.

    Commits when the block exits normally, rolls back on any exception and
    re-raises it. Use the yielded connection for every statement inside the
    block; the module-level helpers below would wait on the held lock.
    """
    conn = connection()
    async with _guard():
        await conn.execute("BEGIN")
        try:
            yield conn
            await conn.execute("COMMIT")
        except BaseException:
            if conn.in_transaction:
                await conn.execute("ROLLBACK")
            raise


async def fetch_one(sql: str, *args: Any) -> dict[str, Any] | None:
    """
    Run a query and return a single row as a dict (or None).
    """
    async with _guard():
        async with connection().execute(sql, args) as cursor:
            row = await cursor.fetchone()
    return _row_to_dict(row) if row is not None else None


async def fetch_all(sql: str, *args: Any) -> list[dict[str, Any]]:
    """
    Run a query and return all rows as a list of dicts.
    """
    async with _guard():
        async with connection().execute(sql, args) as cursor:
            rows = await cursor.fetchall()
    return [_row_to_dict(r) for r in rows]


async def execute(sql: str, *args: Any) -> None:
    """
    Run a statement (INSERT/UPDATE/DELETE/DDL). No result returned.
    """
    async with _guard():
        await connection().execute(sql, args)
