"""
Repository layer for data access abstraction.

This package contains repository classes that encapsulate database queries
and provide a clean interface for data access operations.
"""

from .base_repository import BaseRepository
from .address_repository import AddressRepository
from .supplier_repository import SupplierRepository
from .product_repository import ProductRepository
from .customer_repository import CustomerRepository
from .user_repository import UserRepository

__all__ = [
    "BaseRepository",
    "AddressRepository",
    "SupplierRepository",
    "ProductRepository",
    "CustomerRepository",
    "UserRepository",
]
