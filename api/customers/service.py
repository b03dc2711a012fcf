"""
Customer business logic.

Thin on purpose: the repository owns the transactions; this layer maps rows to
response schemas and "no row" to 404.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from . import repository, schemas
from .query import CustomerSearch

logger = logging.getLogger(__name__)


def _to_customer_response(row: dict) -> schemas.CustomerResponse:
    return schemas.CustomerResponse(
        id=int(row["id"]),
        first_name=row["first_name"],
        last_name=row["last_name"],
        phone=row["phone"],
        email=row["email"],
        addresses=list(row.get("addresses") or []),
    )


async def create_customer(payload: schemas.CustomerWriteRequest) -> int:
    customer_id = await repository.create_customer(
        first_name=payload.first_name,
        last_name=payload.last_name,
        phone=payload.phone,
        email=payload.email,
        addresses=payload.addresses,
    )
    logger.info("customer_created id=%s addresses=%s", customer_id, len(payload.addresses))
    return customer_id


async def list_customers(params: CustomerSearch) -> schemas.CustomerPageResponse:
    rows, total_pages = await repository.list_customers(params)
    return schemas.CustomerPageResponse(
        customers=[_to_customer_response(row) for row in rows],
        totalPages=total_pages,
    )


async def get_customer(customer_id: int) -> schemas.CustomerResponse:
    row = await repository.get_customer(customer_id)
    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=schemas.CUSTOMER_NOT_FOUND)
    return _to_customer_response(row)


async def update_customer(customer_id: int, payload: schemas.CustomerWriteRequest) -> None:
    await repository.update_customer(
        customer_id,
        first_name=payload.first_name,
        last_name=payload.last_name,
        phone=payload.phone,
        email=payload.email,
        addresses=payload.addresses,
    )
    logger.info("customer_updated id=%s addresses=%s", customer_id, len(payload.addresses))


async def delete_customer(customer_id: int) -> None:
    await repository.delete_customer(customer_id)
    logger.info("customer_deleted id=%s", customer_id)
