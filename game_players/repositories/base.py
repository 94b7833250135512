"""Base repository interface.

The service layer depends only on this contract, so any backend offering the
four CRUD operations can stand behind it.
"""

from abc import ABC, abstractmethod
from typing import TypeVar, Generic, List, Optional

# Generic type for domain entities
EntityType = TypeVar('EntityType')


class BaseRepository(Generic[EntityType], ABC):
    """CRUD contract for a store of domain entities."""

    @abstractmethod
    def find_all(self) -> List[EntityType]:
        """Return every stored entity."""

    @abstractmethod
    def find_by_id(self, id: int) -> Optional[EntityType]:
        """Return the entity with ``id`` or None if absent."""

    @abstractmethod
    def save(self, entity: EntityType) -> EntityType:
        """Insert or update ``entity`` and return the stored copy.

        New entities (``id`` is None) get a store-assigned id.
        """

    @abstractmethod
    def delete(self, entity: EntityType) -> None:
        """Remove ``entity`` from the store. Absent entities are ignored."""
