"""
Address API endpoints (nested under a customer).
"""

from __future__ import annotations

from fastapi import APIRouter, Path

from core.errors import SQLITE_MAX_INTEGER

from . import schemas, service

router = APIRouter(prefix="/api/customers")


@router.post("/{customer_id}/addresses")
async def add_address(
    request: schemas.AddAddressRequest,
    customer_id: int = Path(..., le=SQLITE_MAX_INTEGER),
) -> dict:
    await service.add_address(customer_id, request.address)
    return {"message": schemas.ADDRESS_ADDED}


@router.get("/{customer_id}/addresses")
async def list_addresses(customer_id: int = Path(..., le=SQLITE_MAX_INTEGER)) -> list[str]:
    return await service.list_addresses(customer_id)
