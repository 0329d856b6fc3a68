"""
Abstract Storage Interface

DESIGN DECISION: We define an abstract interface for storage operations.
This allows us to:
1. Keep commands decoupled from how the lists are held
2. Use the same commands against a fake or instrumented list in tests

The interface is intentionally simple - an insertion-ordered sequence
addressed by position. Positions here are 0-based; converting from the
1-based numbers the user sees happens in validation.
"""

from abc import ABC, abstractmethod
from typing import Generic, Iterator, Optional, TypeVar

from univsaver.errors import UNivUSaverError
from univsaver.models.audit import AuditEvent, AuditEventType

T = TypeVar("T")


class ListStorageInterface(ABC, Generic[T]):
    """
    Abstract interface for an insertion-ordered collection.

    Any storage implementation must implement these methods.
    """

    @abstractmethod
    def add(self, item: T) -> int:
        """
        Append an item.

        Returns:
            The 0-based position the item was stored at
        """
        pass

    @abstractmethod
    def remove(self, index: int) -> T:
        """
        Remove the item at a position.

        Args:
            index: 0-based position

        Returns:
            The removed item

        Raises:
            IndexOutOfRangeError: If index is outside the current bounds.
                                  The collection is left unchanged.
        """
        pass

    @abstractmethod
    def get(self, index: int) -> T:
        """
        Get the item at a position.

        Raises:
            IndexOutOfRangeError: If index is outside the current bounds
        """
        pass

    @abstractmethod
    def all(self) -> list[T]:
        """Return a copy of every item, in insertion order."""
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass

    def __iter__(self) -> Iterator[T]:
        return iter(self.all())

    def is_empty(self) -> bool:
        return len(self) == 0


class AuditStorageInterface(ABC):
    """
    Abstract interface for audit log storage.

    Audit logs are append-only - we never delete or modify them.
    """

    @abstractmethod
    def append_event(self, event: AuditEvent) -> bool:
        """
        Append an audit event to the log.

        Returns:
            True if logged successfully
        """
        pass

    @abstractmethod
    def get_recent_events(self, limit: int = 100) -> list[AuditEvent]:
        """
        Get the most recent audit events.

        Returns:
            List of recent events (newest first)
        """
        pass

    @abstractmethod
    def get_events_by_type(
        self,
        event_type: AuditEventType,
        limit: Optional[int] = None,
    ) -> list[AuditEvent]:
        """
        Get events of one type in chronological order.
        """
        pass


class StorageError(UNivUSaverError):
    """Base exception for storage operations."""
    pass


class IndexOutOfRangeError(StorageError, IndexError):
    """Position outside the current bounds of a collection."""

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"Index {index} is out of range for {size} item(s)")
