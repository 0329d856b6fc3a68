"""
Data Models Package

This package contains all Pydantic models used in uNivUSaver.
"""

from univsaver.models.transaction import (
    CENTS,
    MAX_AMOUNT,
    Category,
    Transaction,
    TransactionType,
    format_amount,
)
from univsaver.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)

__all__ = [
    # Tracker models
    "CENTS",
    "MAX_AMOUNT",
    "Category",
    "Transaction",
    "TransactionType",
    "format_amount",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]
