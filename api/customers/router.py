"""
Customer API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Path, Query

from core import settings
from core.errors import SQLITE_MAX_INTEGER

from . import schemas, service
from .query import CustomerSearch

router = APIRouter(prefix="/api/customers")


@router.post("")
async def create_customer(request: schemas.CustomerWriteRequest) -> dict:
    customer_id = await service.create_customer(request)
    return {"message": schemas.CUSTOMER_CREATED, "id": customer_id}


@router.get("")
async def list_customers(
    page: int = Query(settings.DEFAULT_PAGE, ge=1, le=SQLITE_MAX_INTEGER),
    page_size: int = Query(settings.DEFAULT_PAGE_SIZE, alias="pageSize", ge=1, le=SQLITE_MAX_INTEGER),
    search: str = Query(default=""),
    address: str = Query(default=""),
) -> schemas.CustomerPageResponse:
    """
    Search customers by first/last name, optionally only those with a matching address.

    `totalPages` counts every customer, whatever the filters.
    """
    params = CustomerSearch(search=search, address=address, page=page, page_size=page_size)
    return await service.list_customers(params)


@router.get("/{customer_id}")
async def get_customer(customer_id: int = Path(..., le=SQLITE_MAX_INTEGER)) -> schemas.CustomerResponse:
    return await service.get_customer(customer_id)


@router.put("/{customer_id}")
async def update_customer(
    request: schemas.CustomerWriteRequest,
    customer_id: int = Path(..., le=SQLITE_MAX_INTEGER),
) -> dict:
    await service.update_customer(customer_id, request)
    return {"message": schemas.CUSTOMER_UPDATED}


@router.delete("/{customer_id}")
async def delete_customer(customer_id: int = Path(..., le=SQLITE_MAX_INTEGER)) -> dict:
    await service.delete_customer(customer_id)
    return {"message": schemas.CUSTOMER_DELETED}
