"""
Product repository for product-specific data access operations.
"""

from sqlalchemy.orm import Session

from merchant_api.models import Product
from .base_repository import BaseRepository


class ProductRepository(BaseRepository[Product]):
    """Repository for Product model operations."""

    def __init__(self, db: Session):
        super().__init__(db, Product)

    def count_by_supplier(self, supplier_id: int) -> int:
        """
        Count products that reference a supplier.

        Args:
            supplier_id: Supplier primary key

        Returns:
            Number of referencing products
        """
        return self.db.query(self.model).filter(self.model.supplier_id == supplier_id).count()
