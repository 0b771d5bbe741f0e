"""
Address Request DTO
"""

from merchant_api.constants import FieldLimits
from merchant_api.dtos.base import RequestModel
from merchant_api.validation import required_str, optional_str


class AddressRequest(RequestModel):
    """
    Postal address submitted inside a supplier or customer request.

    All fields are required except complement.
    """

    street_line: required_str(FieldLimits.STREET_LINE)
    number: required_str(FieldLimits.NUMBER)
    complement: optional_str(FieldLimits.COMPLEMENT) = None
    neighborhood: required_str(FieldLimits.NEIGHBORHOOD)
    city: required_str(FieldLimits.CITY)
    state: required_str(FieldLimits.STATE)
    country: required_str(FieldLimits.COUNTRY)
    postal_code: required_str(FieldLimits.POSTAL_CODE)
