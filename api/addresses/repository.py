"""
Address persistence (raw SQL).

Addresses are always scoped by `customer_id`. The `conn`-taking helpers run
inside a caller's scoped transaction (see `customers/repository.py`).
"""

from __future__ import annotations

import aiosqlite

from core import db


async def customer_exists(customer_id: int) -> bool:
    row = await db.fetch_one(
        """
        SELECT 1 AS ok
        FROM customers
        WHERE id = ?
        LIMIT 1
        """,
        customer_id,
    )
    return row is not None


async def list_addresses(customer_id: int) -> list[str]:
    rows = await db.fetch_all(
        """
        SELECT address
        FROM addresses
        WHERE customer_id = ?
        ORDER BY id
        """,
        customer_id,
    )
    return [row["address"] for row in rows]


async def list_for_customer(customer_id: int) -> list[str] | None:
    """
    Return the customer's address strings, or None when the customer is unknown.
    """
    if not await customer_exists(customer_id):
        return None
    return await list_addresses(customer_id)


async def add_address(customer_id: int, address: str) -> bool:
    """
    Insert one address for an existing customer.

    Returns False (and writes nothing) when the customer does not exist.
    """
    async with db.transaction() as conn:
        async with conn.execute("SELECT 1 FROM customers WHERE id = ? LIMIT 1", (customer_id,)) as cursor:
            if await cursor.fetchone() is None:
                return False
        await conn.execute(
            "INSERT INTO addresses (customer_id, address) VALUES (?, ?)",
            (customer_id, address),
        )
    return True


async def insert_addresses(conn: aiosqlite.Connection, customer_id: int, addresses: list[str]) -> None:
    if not addresses:
        return
    await conn.executemany(
        "INSERT INTO addresses (customer_id, address) VALUES (?, ?)",
        [(customer_id, address) for address in addresses],
    )


async def delete_addresses(conn: aiosqlite.Connection, customer_id: int) -> None:
    await conn.execute("DELETE FROM addresses WHERE customer_id = ?", (customer_id,))
