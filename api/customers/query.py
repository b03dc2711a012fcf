"""
Search + pagination query construction for the customer list.

The page is selected by a name search and, optionally, an address filter.
The total page count is derived from the count of *all* customers, not the
filtered set.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from core import settings


@dataclass(frozen=True)
class CustomerSearch:
    search: str = ""
    address: str = ""
    page: int = settings.DEFAULT_PAGE
    page_size: int = settings.DEFAULT_PAGE_SIZE

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size


def _contains(term: str) -> str:
    return f"%{term}%"


def build_search_query(params: CustomerSearch) -> tuple[str, list[Any]]:
    """
    Return (sql, args) selecting one page of customers.
    """
    sql = """
        SELECT id, first_name, last_name, phone, email
        FROM customers
        WHERE (first_name LIKE ? OR last_name LIKE ?)
    """
    args: list[Any] = [_contains(params.search), _contains(params.search)]

    if params.address:
        sql += """
          AND EXISTS (
            SELECT 1
            FROM addresses
            WHERE addresses.customer_id = customers.id
              AND addresses.address LIKE ?
          )
        """
        args.append(_contains(params.address))

    sql += """
        ORDER BY id
        LIMIT ?
        OFFSET ?
    """
    args.extend([params.page_size, params.offset])
    return sql, args


COUNT_ALL_SQL = "SELECT COUNT(*) AS count FROM customers"


def total_pages(total_count: int, page_size: int) -> int:
    return math.ceil(total_count / page_size)
