"""
Service layer: per-entity CRUD orchestration, statistics and users.

Services receive their repositories and mappers through the constructor and
own the transaction boundary of every write.
"""

from .interfaces import ICrudService, IStatisticsService
from .supplier_service import SupplierService
from .product_service import ProductService
from .customer_service import CustomerService
from .statistics_service import StatisticsService
from .user_service import UserService
from .password_hasher import PasswordHasher

__all__ = [
    "ICrudService",
    "IStatisticsService",
    "SupplierService",
    "ProductService",
    "CustomerService",
    "StatisticsService",
    "UserService",
    "PasswordHasher",
]
