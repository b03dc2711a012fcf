from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from main import create_app


def test_startup_creates_tables(client, count_rows):
    assert count_rows("customers") == 0
    assert count_rows("addresses") == 0


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_unknown_route_renders_error_body(client):
    resp = client.get("/api/nope")

    assert resp.status_code == 404
    assert "error" in resp.json()


def test_startup_fails_when_store_cannot_be_opened(tmp_path):
    app = create_app(database_path=tmp_path / "missing-dir" / "customers.db")

    with pytest.raises(Exception):
        with TestClient(app):
            pass


def test_restart_keeps_existing_rows(database_path, customer_payload):
    with TestClient(create_app(database_path=database_path)) as first:
        customer_id = first.post("/api/customers", json=customer_payload()).json()["id"]

    # Second start re-runs CREATE TABLE IF NOT EXISTS against the same file.
    with TestClient(create_app(database_path=database_path)) as second:
        resp = second.get(f"/api/customers/{customer_id}")

    assert resp.status_code == 200
    assert resp.json()["first_name"] == "Ada"
