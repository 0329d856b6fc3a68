"""Audit logging package."""

from univsaver.audit.logger import AuditLogger, configure_logging

__all__ = ["AuditLogger", "configure_logging"]
