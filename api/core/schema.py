"""
Schema bootstrap.

There are no migrations: both tables are created on startup when absent.
Foreign keys are declared but sqlite does not enforce them unless
`PRAGMA foreign_keys` is switched on, which this service leaves off.
"""

from __future__ import annotations

import logging

from core import db

logger = logging.getLogger(__name__)

CUSTOMERS_DDL = """
CREATE TABLE IF NOT EXISTS customers (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    first_name TEXT,
    last_name TEXT,
    phone TEXT,
    email TEXT
)
"""

ADDRESSES_DDL = """
CREATE TABLE IF NOT EXISTS addresses (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    customer_id INTEGER,
    address TEXT,
    FOREIGN KEY (customer_id) REFERENCES customers (id)
)
"""


async def init_schema() -> None:
    await db.execute(CUSTOMERS_DDL)
    await db.execute(ADDRESSES_DDL)
    logger.info("schema_ready tables=customers,addresses")
