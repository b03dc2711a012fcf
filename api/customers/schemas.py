"""
Pydantic schemas for customer endpoints.

Request bodies use camelCase keys (`firstName`); rows returned to clients keep
the column names (`first_name`).
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, Field

from core.errors import RequestBody

CUSTOMER_CREATED = "Customer and addresses added successfully"
CUSTOMER_UPDATED = "Customer and addresses updated successfully"
CUSTOMER_DELETED = "Customer and associated addresses deleted successfully"
CUSTOMER_NOT_FOUND = "Customer not found"


class CustomerWriteRequest(RequestBody):
    """
    Body for both create and update. `addresses` may be empty but must be a list.
    """

    error_message: ClassVar[str] = "All fields are required and addresses must be an array"

    first_name: str = Field(..., min_length=1, alias="firstName")
    last_name: str = Field(..., min_length=1, alias="lastName")
    phone: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    addresses: list[str]


class CustomerResponse(BaseModel):
    id: int
    first_name: str | None
    last_name: str | None
    phone: str | None
    email: str | None
    addresses: list[str]


class CustomerPageResponse(BaseModel):
    customers: list[CustomerResponse]
    totalPages: int
