"""
Pydantic schemas for address endpoints.
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field

from core.errors import RequestBody

ADDRESS_ADDED = "Address added successfully"


class AddAddressRequest(RequestBody):
    error_message: ClassVar[str] = "Address is required"

    address: str = Field(..., min_length=1)
