"""
User repository for authentication lookups.
"""

from typing import Optional
from sqlalchemy.orm import Session

from merchant_api.models import User
from .base_repository import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for User model operations."""

    def __init__(self, db: Session):
        super().__init__(db, User)

    def get_by_username(self, username: str) -> Optional[User]:
        """
        Find a user by username.

        Args:
            username: Unique username

        Returns:
            User instance or None if not found
        """
        return self.db.query(self.model).filter(self.model.username == username).first()
