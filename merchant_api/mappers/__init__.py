"""
Mapping functions between DTOs and ORM entities.

Mappers are pure: they never query or write the database. Cross-entity
references (Product -> Supplier) are mapped by identifier only; resolving
the referenced entity is the service's job.
"""

from .address_mapper import AddressMapper
from .supplier_mapper import SupplierMapper
from .product_mapper import ProductMapper
from .customer_mapper import CustomerMapper
from .user_mapper import UserMapper

__all__ = ["AddressMapper", "SupplierMapper", "ProductMapper", "CustomerMapper", "UserMapper"]
