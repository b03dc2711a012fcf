from __future__ import annotations

import sqlite3
from contextlib import closing

import pytest
from fastapi.testclient import TestClient

from main import create_app


@pytest.fixture()
def database_path(tmp_path):
    return tmp_path / "customers.db"


@pytest.fixture()
def client(database_path):
    # Entering the client runs the lifespan: connect + create tables.
    with TestClient(create_app(database_path=database_path)) as test_client:
        yield test_client


@pytest.fixture()
def customer_payload():
    def _payload(**overrides) -> dict:
        payload = {
            "firstName": "Ada",
            "lastName": "Lovelace",
            "phone": "555-0100",
            "email": "ada@example.com",
            "addresses": ["1 Main St", "9 Oak Ave"],
        }
        payload.update(overrides)
        return payload

    return _payload


@pytest.fixture()
def create_customer(client, customer_payload):
    def _create(**overrides) -> int:
        resp = client.post("/api/customers", json=customer_payload(**overrides))
        assert resp.status_code == 200, resp.text
        return resp.json()["id"]

    return _create


@pytest.fixture()
def count_rows(database_path):
    """Count rows straight from the database file, bypassing the API."""

    def _count(table: str, **where) -> int:
        sql = f"SELECT COUNT(*) FROM {table}"
        if where:
            sql += " WHERE " + " AND ".join(f"{column} = ?" for column in where)
        with closing(sqlite3.connect(database_path)) as conn:
            return conn.execute(sql, tuple(where.values())).fetchone()[0]

    return _count
