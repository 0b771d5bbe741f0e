"""
Service Interfaces

Abstract base classes for service layer following Dependency Inversion Principle.
This allows for dependency injection and easier testing/mocking.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, List, TypeVar

from merchant_api.dtos.response import StatisticsResponse

ResponseT = TypeVar('ResponseT')


class ICrudService(ABC, Generic[ResponseT]):
    """
    Interface for per-entity CRUD orchestration.

    Every call is synchronous and leaves the entity either fully committed or
    fully absent. Writes run inside a single transaction.
    """

    @abstractmethod
    def create(self, request: Any) -> ResponseT:
        """
        Validate a request and persist a new entity.

        Raises:
            ValidationError: If the request breaks any field constraint
        """
        pass

    @abstractmethod
    def list_all(self) -> List[ResponseT]:
        """Return every persisted entity in storage order (materialized list)."""
        pass

    @abstractmethod
    def get_by_id(self, entity_id: int) -> ResponseT:
        """
        Raises:
            NotFoundError: If no entity has this identifier
        """
        pass

    @abstractmethod
    def update(self, entity_id: int, request: Any) -> ResponseT:
        """
        Overwrite all mutable fields atomically.

        Raises:
            ValidationError: If the request breaks any field constraint
            NotFoundError: If no entity has this identifier
        """
        pass

    @abstractmethod
    def delete(self, entity_id: int) -> None:
        """
        Remove the entity and anything it exclusively owns, atomically.

        Raises:
            NotFoundError: If no entity has this identifier
        """
        pass


class IStatisticsService(ABC):
    """Interface for aggregate counts."""

    @abstractmethod
    def get_statistics(self) -> StatisticsResponse:
        """Return independent counts of suppliers, products and customers."""
        pass
