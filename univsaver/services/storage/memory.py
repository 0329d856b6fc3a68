"""
In-Memory Storage

The tracker keeps nothing on disk: every list lives for one session.
"""

from typing import Optional

import structlog

from univsaver.models.audit import AuditEvent, AuditEventType
from univsaver.models.transaction import Category, Transaction
from univsaver.services.storage.interface import (
    AuditStorageInterface,
    IndexOutOfRangeError,
    ListStorageInterface,
    T,
)

logger = structlog.get_logger(__name__)


class InMemoryList(ListStorageInterface[T]):
    """List-backed implementation of ListStorageInterface."""

    def __init__(self, items: Optional[list[T]] = None):
        self._items: list[T] = list(items or [])

    def _check_index(self, index: int) -> None:
        # Negative positions are rejected rather than counted from the end
        if index < 0 or index >= len(self._items):
            raise IndexOutOfRangeError(index, len(self._items))

    def add(self, item: T) -> int:
        self._items.append(item)
        return len(self._items) - 1

    def remove(self, index: int) -> T:
        self._check_index(index)
        return self._items.pop(index)

    def get(self, index: int) -> T:
        self._check_index(index)
        return self._items[index]

    def all(self) -> list[T]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)


class TransactionList(InMemoryList[Transaction]):
    """All transactions recorded in this session."""

    def add(self, item: Transaction) -> int:
        position = super().add(item)
        logger.debug(
            "transaction_stored",
            position=position,
            type=item.type.value,
            size=len(self),
        )
        return position

    def remove(self, index: int) -> Transaction:
        removed = super().remove(index)
        logger.debug("transaction_removed", position=index, size=len(self))
        return removed


class CategoryList(InMemoryList[Category]):
    """All categories defined in this session."""

    def find_by_name(self, name: str) -> Optional[Category]:
        """First category whose name matches, ignoring case."""
        wanted = name.strip().lower()
        for category in self._items:
            if category.name.lower() == wanted:
                return category
        return None


class InMemoryAuditStorage(AuditStorageInterface):
    """Audit trail kept for the lifetime of the session."""

    def __init__(self):
        self._events: list[AuditEvent] = []

    def append_event(self, event: AuditEvent) -> bool:
        self._events.append(event)
        return True

    def get_recent_events(self, limit: int = 100) -> list[AuditEvent]:
        return list(reversed(self._events))[:limit]

    def get_events_by_type(
        self,
        event_type: AuditEventType,
        limit: Optional[int] = None,
    ) -> list[AuditEvent]:
        events = [e for e in self._events if e.event_type == event_type]
        if limit is not None:
            events = events[:limit]
        return events

    def __len__(self) -> int:
        return len(self._events)
