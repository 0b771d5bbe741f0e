"""
Product Response DTO
"""

from decimal import Decimal
from typing import Annotated, Optional

from pydantic import Field, PlainSerializer

from merchant_api.dtos.base import ResponseModel

# JSON clients get a number (9.99), not pydantic's default string form
Price = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used='json')]


class ProductResponse(ResponseModel):
    """Response DTO for a persisted product."""

    id: int = Field(description="Product ID")
    name: str
    price: Price
    description: Optional[str] = None
    stock_quantity: int
    supplier_id: int = Field(description="Referenced supplier ID (may no longer resolve)")
