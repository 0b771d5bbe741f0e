"""
Address Response DTO
"""

from typing import Optional

from merchant_api.dtos.base import ResponseModel


class AddressResponse(ResponseModel):
    """Address as exposed inside its owner's representation (no own id)."""

    street_line: str
    number: str
    complement: Optional[str] = None
    neighborhood: str
    city: str
    state: str
    country: str
    postal_code: str
