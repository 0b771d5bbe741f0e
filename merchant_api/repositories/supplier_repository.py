"""
Supplier repository for supplier-specific data access operations.
"""

from typing import List
from sqlalchemy.orm import Session, joinedload

from merchant_api.models import Supplier
from .base_repository import BaseRepository


class SupplierRepository(BaseRepository[Supplier]):
    """Repository for Supplier model operations."""

    def __init__(self, db: Session):
        super().__init__(db, Supplier)

    def get_all(self) -> List[Supplier]:
        """
        Get all suppliers with their addresses eagerly loaded, ordered by ID.
        """
        return self.db.query(self.model).options(
            joinedload(self.model.address)
        ).order_by(self.model.id).all()

    def exists_by_tax_id(self, tax_id: str) -> bool:
        """Check whether any supplier already holds this tax ID."""
        return self.db.query(self.model.id).filter(self.model.tax_id == tax_id).first() is not None
