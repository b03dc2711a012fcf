from __future__ import annotations

from customers.query import CustomerSearch, build_search_query, total_pages


def test_offset_is_one_indexed():
    assert CustomerSearch(page=1, page_size=10).offset == 0
    assert CustomerSearch(page=3, page_size=7).offset == 14


def test_query_without_address_filter():
    sql, args = build_search_query(CustomerSearch(search="ann", page=2, page_size=5))

    assert "EXISTS" not in sql
    assert args == ["%ann%", "%ann%", 5, 5]


def test_query_with_address_filter():
    sql, args = build_search_query(CustomerSearch(search="", address="Oak", page=1, page_size=10))

    assert "EXISTS" in sql
    assert "(first_name LIKE ? OR last_name LIKE ?)" in sql
    assert args == ["%%", "%%", "%Oak%", 10, 0]


def test_total_pages_rounds_up():
    assert total_pages(0, 10) == 0
    assert total_pages(10, 10) == 1
    assert total_pages(25, 10) == 3
