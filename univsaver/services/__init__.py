"""Services package."""

from univsaver.services.storage import (
    AuditStorageInterface,
    CategoryList,
    InMemoryAuditStorage,
    InMemoryList,
    IndexOutOfRangeError,
    ListStorageInterface,
    StorageError,
    TransactionList,
)

__all__ = [
    "AuditStorageInterface",
    "CategoryList",
    "InMemoryAuditStorage",
    "InMemoryList",
    "IndexOutOfRangeError",
    "ListStorageInterface",
    "StorageError",
    "TransactionList",
]
