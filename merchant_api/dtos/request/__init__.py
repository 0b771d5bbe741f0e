"""
Request DTOs

DTOs for incoming representations. Every field carries its constraints
declaratively; see validation.validate_request for how violations are reported.
Server-assigned fields (id, createdAt, updatedAt) are never accepted.
"""

from .address_request import AddressRequest
from .supplier_request import SupplierRequest, SupplierUpdateRequest
from .product_request import ProductRequest
from .customer_request import CustomerRequest
from .user_request import RegisterUserRequest

__all__ = [
    "AddressRequest",
    "SupplierRequest",
    "SupplierUpdateRequest",
    "ProductRequest",
    "CustomerRequest",
    "RegisterUserRequest",
]
