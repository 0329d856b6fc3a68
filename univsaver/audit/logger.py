"""
Audit Logger

DESIGN DECISION: Every change to the lists, and every failure, is logged.
This provides:
1. Traceability of a session
2. Debugging capability

The audit logger:
- Writes structured logs to stderr, never to the REPL output
- Gracefully handles failures (doesn't crash the app if logging fails)
"""

import logging
import sys
from typing import Optional

import structlog

from univsaver.config import AppSettings, get_settings
from univsaver.models.audit import AuditEvent, AuditSeverity
from univsaver.services.storage import AuditStorageInterface


def configure_logging(settings: Optional[AppSettings] = None) -> None:
    """
    Configure stdlib logging and structlog for the whole process.

    Safe to call more than once; the last call wins.
    """
    settings = settings or get_settings()

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=settings.effective_log_level,
        force=True,
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if settings.log_json
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


class AuditLogger:
    """
    Central audit logging service.

    Logs events both to:
    1. Structured local log (for debugging)
    2. An audit storage, if one is attached
    """

    def __init__(
        self,
        storage: Optional[AuditStorageInterface] = None,
    ):
        """
        Initialize audit logger.

        Args:
            storage: Storage backend for the audit trail.
                    If None, only logs locally.
        """
        self._storage = storage
        self._logger = structlog.get_logger("univsaver.audit")

    @property
    def storage(self) -> Optional[AuditStorageInterface]:
        return self._storage

    def log(self, event: AuditEvent) -> bool:
        """
        Log an audit event.

        Always logs locally. Persists to storage if available.

        Returns True if storage write succeeded (or no storage configured).
        """
        log_dict = event.to_log_dict()

        if event.severity == AuditSeverity.ERROR:
            self._logger.error("audit_event", **log_dict)
        elif event.severity == AuditSeverity.WARNING:
            self._logger.warning("audit_event", **log_dict)
        elif event.severity == AuditSeverity.DEBUG:
            self._logger.debug("audit_event", **log_dict)
        else:
            self._logger.info("audit_event", **log_dict)

        if self._storage is not None:
            try:
                return self._storage.append_event(event)
            except Exception as e:
                # Log failure but don't raise
                self._logger.error(
                    "audit_storage_failed",
                    error=str(e),
                    event_id=str(event.event_id),
                )
                return False

        return True
