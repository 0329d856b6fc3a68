"""
Audit Models for uNivUSaver

Every change to the tracker's lists, and every failure, is recorded as
an audit event. This provides:
1. A trace of what the user did during the session
2. Debugging information when things go wrong

DESIGN DECISION: Audit events are append-only. We never delete or modify them.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field

from univsaver.models.transaction import Category, Transaction


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AuditEventType(str, Enum):
    """Types of events we audit."""
    # Session
    SESSION_STARTED = "session_started"
    SESSION_ENDED = "session_ended"

    # Transactions
    TRANSACTION_ADDED = "transaction_added"
    TRANSACTION_DELETED = "transaction_deleted"

    # Categories
    CATEGORY_ADDED = "category_added"
    CATEGORY_DELETED = "category_deleted"

    # Queries
    QUERY_EXECUTED = "query_executed"

    # Failures
    COMMAND_REJECTED = "command_rejected"
    SYSTEM_ERROR = "system_error"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class AuditEvent(BaseModel):
    """
    A single audit event.

    This is the core unit of our audit trail.
    """

    # Identity
    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=_utcnow,
        description="When the event occurred (UTC)"
    )

    # Event classification
    event_type: AuditEventType = Field(
        ...,
        description="Type of event"
    )
    severity: AuditSeverity = Field(
        default=AuditSeverity.INFO,
        description="Event severity"
    )

    # Context
    entity_type: Optional[str] = Field(
        default=None,
        description="Type of entity (e.g., 'transaction', 'category', 'query')"
    )

    description: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of what happened"
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )

    # Error information (if applicable)
    error_message: Optional[str] = None

    is_user_action: bool = Field(
        default=False,
        description="Was this triggered by a user command?"
    )

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "entity_type": self.entity_type,
            "description": self.description,
            "details": self.details,
            "error_message": self.error_message,
            "is_user_action": self.is_user_action,
        }


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.transaction_added(transaction, position)
        event = AuditEventBuilder.command_rejected("delete-transaction", reason)
    """

    @staticmethod
    def session_started(app_name: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SESSION_STARTED,
            description=f"{app_name} session started",
        )

    @staticmethod
    def session_ended(transaction_count: int, category_count: int) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SESSION_ENDED,
            description="Session ended",
            details={
                "transaction_count": transaction_count,
                "category_count": category_count,
            },
            is_user_action=True,
        )

    @staticmethod
    def transaction_added(transaction: Transaction, position: int) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.TRANSACTION_ADDED,
            entity_type="transaction",
            description=f"{transaction.type.label} added: {transaction.description}",
            details={
                "position": position,
                "type": transaction.type.value,
                "amount": str(transaction.amount),
                "category": transaction.category,
            },
            is_user_action=True,
        )

    @staticmethod
    def transaction_deleted(transaction: Transaction, position: int) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.TRANSACTION_DELETED,
            entity_type="transaction",
            description=f"{transaction.type.label} deleted: {transaction.description}",
            details={
                "position": position,
                "type": transaction.type.value,
                "amount": str(transaction.amount),
            },
            is_user_action=True,
        )

    @staticmethod
    def category_added(category: Category, position: int) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.CATEGORY_ADDED,
            entity_type="category",
            description=f"Category added: {category.name}",
            details={"position": position},
            is_user_action=True,
        )

    @staticmethod
    def category_deleted(category: Category, position: int) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.CATEGORY_DELETED,
            entity_type="category",
            description=f"Category deleted: {category.name}",
            details={"position": position},
            is_user_action=True,
        )

    @staticmethod
    def query_executed(command_word: str, result_count: int) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.QUERY_EXECUTED,
            severity=AuditSeverity.DEBUG,
            entity_type="query",
            description=f"Query executed: {command_word} returned {result_count} results",
            details={
                "command": command_word,
                "result_count": result_count,
            },
            is_user_action=True,
        )

    @staticmethod
    def command_rejected(command_word: str, reason: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.COMMAND_REJECTED,
            severity=AuditSeverity.WARNING,
            description=f"Command rejected: {command_word}",
            error_message=reason,
            details={"command": command_word},
            is_user_action=True,
        )

    @staticmethod
    def system_error(
        error_type: str,
        error_message: str,
        details: Optional[dict] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SYSTEM_ERROR,
            severity=AuditSeverity.ERROR,
            description=f"System error: {error_type}",
            error_message=error_message,
            details=details or {},
        )
