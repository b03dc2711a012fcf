from __future__ import annotations

import asyncio

import httpx
import pytest

from main import create_app


@pytest.fixture()
def anyio_backend():
    return "asyncio"


@pytest.mark.anyio
async def test_concurrent_writes_do_not_interleave(database_path, customer_payload, count_rows):
    app = create_app(database_path=database_path)

    async with app.router.lifespan_context(app):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
            resp = await client.post("/api/customers", json=customer_payload(addresses=["0 Start St"]))
            target_id = resp.json()["id"]

            creates = [
                client.post(
                    "/api/customers",
                    json=customer_payload(firstName=f"Bulk{i}", addresses=[f"{i} A St", f"{i} B St", f"{i} C St"]),
                )
                for i in range(20)
            ]
            updates = [
                client.put(
                    f"/api/customers/{target_id}",
                    json=customer_payload(addresses=[f"{i} New St", f"{i} Other St"]),
                )
                for i in range(10)
            ]
            lists = [client.get("/api/customers", params={"pageSize": 50}) for _ in range(10)]

            responses = await asyncio.gather(*creates, *updates, *lists)
            target = (await client.get(f"/api/customers/{target_id}")).json()

    assert [r.status_code for r in responses] == [200] * len(responses)
    assert count_rows("customers") == 21
    # Each update replaced the whole set, so exactly one update's two rows survive.
    assert len(target["addresses"]) == 2
    assert count_rows("addresses") == 20 * 3 + 2
    for resp in responses[30:]:
        for customer in resp.json()["customers"]:
            assert len(customer["addresses"]) in (1, 2, 3)
