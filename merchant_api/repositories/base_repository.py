"""
Base repository providing common keyed-record operations.
"""

from typing import Generic, TypeVar, List, Optional, Type
from sqlalchemy.orm import Session

from merchant_api.constants import FieldLimits

T = TypeVar('T')


def is_storable_id(id: int) -> bool:
    """Identifiers are positive and fit a signed 64-bit INTEGER column."""
    return 0 < id <= FieldLimits.MAX_ID


class BaseRepository(Generic[T]):
    """
    Generic base repository providing the keyed record store contract:
    save, get_by_id, get_all, exists, delete_by_id and count.

    Repositories flush but never commit. Commit and rollback belong to the
    service that owns the unit of work (see database.transaction).
    """

    def __init__(self, db: Session, model: Type[T]):
        """
        Initialize the repository.

        Args:
            db: SQLAlchemy database session
            model: SQLAlchemy model class
        """
        self.db = db
        self.model = model

    def save(self, obj: T) -> T:
        """
        Insert a new record or flush pending changes to an existing one.

        The server-assigned id is populated on return.

        Args:
            obj: Model instance to persist

        Returns:
            Persisted model instance
        """
        self.db.add(obj)
        self.db.flush()
        return obj

    def get_by_id(self, id: int) -> Optional[T]:
        """
        Retrieve a record by its ID.

        Args:
            id: Primary key value

        Returns:
            Model instance, or None if not found or id cannot be a stored key
        """
        if not is_storable_id(id):
            return None
        return self.db.get(self.model, id)

    def get_all(self) -> List[T]:
        """
        Retrieve every record, ordered by ID.

        Returns:
            Materialized list of model instances
        """
        return self.db.query(self.model).order_by(self.model.id).all()

    def exists(self, id: int) -> bool:
        """True if a record with this ID is stored (no row is loaded)."""
        if not is_storable_id(id):
            return False
        query = self.db.query(self.model.id).filter(self.model.id == id)
        return self.db.query(query.exists()).scalar()

    def delete(self, obj: T) -> None:
        """Delete a loaded record and flush."""
        self.db.delete(obj)
        self.db.flush()

    def delete_by_id(self, id: int) -> bool:
        """
        Delete the record with this ID.

        Returns:
            False when nothing was stored under id
        """
        obj = self.get_by_id(id)
        if obj is None:
            return False
        self.delete(obj)
        return True

    def count(self) -> int:
        return self.db.query(self.model).count()
