"""
Customer repository.
"""

from typing import List
from sqlalchemy.orm import Session, joinedload

from merchant_api.models import Customer
from .base_repository import BaseRepository


class CustomerRepository(BaseRepository[Customer]):
    """Repository for Customer model operations."""

    def __init__(self, db: Session):
        super().__init__(db, Customer)

    def get_all(self) -> List[Customer]:
        """
        Get all customers with their addresses eagerly loaded, ordered by ID.
        """
        return self.db.query(self.model).options(
            joinedload(self.model.address)
        ).order_by(self.model.id).all()
