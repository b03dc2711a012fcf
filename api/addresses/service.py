"""
Address business logic: existence checks mapped to HTTP outcomes.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from customers.schemas import CUSTOMER_NOT_FOUND

from . import repository

logger = logging.getLogger(__name__)


async def add_address(customer_id: int, address: str) -> None:
    added = await repository.add_address(customer_id, address)
    if not added:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=CUSTOMER_NOT_FOUND)
    logger.info("address_added customer_id=%s", customer_id)


async def list_addresses(customer_id: int) -> list[str]:
    addresses = await repository.list_for_customer(customer_id)
    if addresses is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=CUSTOMER_NOT_FOUND)
    return addresses
