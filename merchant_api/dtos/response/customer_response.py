"""
Customer Response DTO
"""

from typing import Optional

from pydantic import Field

from merchant_api.dtos.base import ResponseModel
from .address_response import AddressResponse


class CustomerResponse(ResponseModel):
    """Response DTO for a persisted customer."""

    id: int = Field(description="Customer ID")
    name: str
    tax_id: Optional[str] = None
    email: str
    address: AddressResponse
