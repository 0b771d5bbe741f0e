"""
Response DTOs

DTOs for outgoing representations. These expose server-assigned fields
(id, createdAt, updatedAt) that requests never accept.
"""

from .address_response import AddressResponse
from .supplier_response import SupplierResponse
from .product_response import ProductResponse
from .customer_response import CustomerResponse
from .statistics_response import StatisticsResponse
from .user_response import UserResponse

__all__ = [
    "AddressResponse",
    "SupplierResponse",
    "ProductResponse",
    "CustomerResponse",
    "StatisticsResponse",
    "UserResponse",
]
