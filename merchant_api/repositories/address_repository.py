"""
Address repository. Addresses are only ever reached through their owner.
"""

from sqlalchemy.orm import Session

from merchant_api.models import Address
from .base_repository import BaseRepository


class AddressRepository(BaseRepository[Address]):
    """Repository for Address model operations."""

    def __init__(self, db: Session):
        super().__init__(db, Address)
