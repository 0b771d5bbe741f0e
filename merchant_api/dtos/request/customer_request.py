"""
Customer Request DTO
"""

from typing import Optional

from merchant_api.constants import FieldLimits
from merchant_api.dtos.base import RequestModel
from merchant_api.validation import Cpf, email_str, required_str
from .address_request import AddressRequest


class CustomerRequest(RequestModel):
    """
    Request DTO for creating or updating a customer.

    The individual tax ID is checked for shape and check digits but is not
    required to be unique.
    """

    name: required_str(FieldLimits.CUSTOMER_NAME)
    tax_id: Optional[Cpf] = None
    email: email_str(FieldLimits.EMAIL)
    address: AddressRequest
