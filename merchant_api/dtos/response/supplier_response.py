"""
Supplier Response DTO
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from merchant_api.domain.value_objects import SupplierType
from merchant_api.dtos.base import ResponseModel
from .address_response import AddressResponse


class SupplierResponse(ResponseModel):
    """Response DTO for a persisted supplier."""

    id: int = Field(description="Supplier ID")
    name: str
    tax_id: str
    supplier_type: SupplierType = Field(alias="type")
    address: AddressResponse
    created_at: datetime = Field(description="Creation timestamp (never modified)")
    updated_at: Optional[datetime] = Field(None, description="Last modification timestamp")
