"""
Product Request DTO
"""

from decimal import Decimal

from pydantic import Field

from merchant_api.constants import FieldLimits
from merchant_api.dtos.base import RequestModel
from merchant_api.validation import required_str, optional_str


class ProductRequest(RequestModel):
    """
    Request DTO for creating or updating a product.

    supplier_id only names the supplier; the service resolves it.
    """

    name: required_str(FieldLimits.PRODUCT_NAME)
    price: Decimal = Field(
        gt=0,
        max_digits=FieldLimits.PRICE_MAX_DIGITS,
        decimal_places=FieldLimits.PRICE_DECIMAL_PLACES,
    )
    description: optional_str(FieldLimits.PRODUCT_DESCRIPTION) = None
    stock_quantity: int = Field(ge=0)
    supplier_id: int = Field(gt=0, le=FieldLimits.MAX_ID)
