"""
Domain Value Objects

Value objects are immutable types that represent descriptive aspects of the domain.
They have no conceptual identity and are compared by their values, not by ID.

- SupplierType: Supplier classification
- Role: System user role
- TaxId helpers: Check-digit validation for organization (CNPJ) and individual (CPF) IDs
"""

from .supplier_type import SupplierType
from .role import Role
from .tax_id import is_valid_cnpj, is_valid_cpf

__all__ = ["SupplierType", "Role", "is_valid_cnpj", "is_valid_cpf"]
