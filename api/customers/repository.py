"""
Customer persistence (raw SQL).

Multi-statement writes run in one scoped transaction: the customer row and its
address rows commit or roll back together.
"""

from __future__ import annotations

from typing import Any

from addresses import repository as address_repository
from core import db

from .query import COUNT_ALL_SQL, CustomerSearch, build_search_query, total_pages


async def create_customer(
    *,
    first_name: str,
    last_name: str,
    phone: str,
    email: str,
    addresses: list[str],
) -> int:
    """
    Insert a customer + its addresses in a single transaction.

    Returns the new customer id.
    """
    async with db.transaction() as conn:
        cursor = await conn.execute(
            """
            INSERT INTO customers (first_name, last_name, phone, email)
            VALUES (?, ?, ?, ?)
            """,
            (first_name, last_name, phone, email),
        )
        customer_id = cursor.lastrowid
        if customer_id is None:
            raise RuntimeError("Failed to insert customer.")

        await address_repository.insert_addresses(conn, customer_id, addresses)
    return int(customer_id)


async def list_customers(params: CustomerSearch) -> tuple[list[dict[str, Any]], int]:
    """
    Return (customers, total_pages) for one page of search results.

    Each customer carries its full address list, whatever the address filter.
    """
    sql, args = build_search_query(params)
    customers = await db.fetch_all(sql, *args)

    count_row = await db.fetch_one(COUNT_ALL_SQL)
    total_count = int((count_row or {}).get("count", 0))

    for customer in customers:
        customer["addresses"] = await address_repository.list_addresses(int(customer["id"]))

    return customers, total_pages(total_count, params.page_size)


async def get_customer(customer_id: int) -> dict[str, Any] | None:
    customer = await db.fetch_one(
        """
        SELECT id, first_name, last_name, phone, email
        FROM customers
        WHERE id = ?
        """,
        customer_id,
    )
    if customer is None:
        return None

    customer["addresses"] = await address_repository.list_addresses(customer_id)
    return customer


async def update_customer(
    customer_id: int,
    *,
    first_name: str,
    last_name: str,
    phone: str,
    email: str,
    addresses: list[str],
) -> None:
    """
    Overwrite the customer row and replace its whole address set.

    No existence check: an unknown id updates zero rows and still succeeds.
    """
    async with db.transaction() as conn:
        await conn.execute(
            """
            UPDATE customers
            SET first_name = ?, last_name = ?, phone = ?, email = ?
            WHERE id = ?
            """,
            (first_name, last_name, phone, email, customer_id),
        )
        await address_repository.delete_addresses(conn, customer_id)
        await address_repository.insert_addresses(conn, customer_id, addresses)


async def delete_customer(customer_id: int) -> None:
    # Addresses first; there is no ON DELETE CASCADE.
    async with db.transaction() as conn:
        await address_repository.delete_addresses(conn, customer_id)
        await conn.execute("DELETE FROM customers WHERE id = ?", (customer_id,))
