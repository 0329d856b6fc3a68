"""
Storage Services Package

Provides abstract interfaces and the in-memory implementations the
tracker runs on.
"""

from univsaver.services.storage.interface import (
    AuditStorageInterface,
    IndexOutOfRangeError,
    ListStorageInterface,
    StorageError,
)
from univsaver.services.storage.memory import (
    CategoryList,
    InMemoryAuditStorage,
    InMemoryList,
    TransactionList,
)

__all__ = [
    # Interfaces
    "AuditStorageInterface",
    "ListStorageInterface",
    # Exceptions
    "IndexOutOfRangeError",
    "StorageError",
    # In-memory implementation
    "CategoryList",
    "InMemoryAuditStorage",
    "InMemoryList",
    "TransactionList",
]
