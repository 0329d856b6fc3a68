"""
Command Interface

Every user-invokable action is a Command object registered under one
keyword. The REPL never knows what a command does; it only passes in
the arguments and prints the lines that come back.

DESIGN DECISION: Arguments are passed to execute() on every call and
never stored on the command object, so one invocation cannot leak its
arguments into the next.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Optional

import structlog

from univsaver.audit import AuditLogger
from univsaver.errors import UNivUSaverError
from univsaver.models.audit import AuditEvent, AuditEventBuilder
from univsaver.models.transaction import Transaction, format_amount
from univsaver.validation import ArgumentValidator, MissingArgumentError

# Key under which the parser stores the text before the first key
MAIN_ARGUMENT = ""

logger = structlog.get_logger(__name__)


class Command(ABC):
    """
    Base class for all commands.

    Subclasses declare their keyword, usage and argument keys as class
    attributes and implement run().
    """

    COMMAND_WORD: str = ""
    COMMAND_GUIDE: str = ""
    COMMAND_DESCRIPTION: str = ""

    # Name used for the main argument in error messages, e.g. "DESCRIPTION"
    MAIN_ARGUMENT_NAME: str = "ARGUMENT"
    MANDATORY_KEYS: tuple[str, ...] = ()
    EXTRA_KEYS: tuple[str, ...] = ()

    # The REPL stops after running a command with is_exit set
    is_exit: bool = False

    def __init__(
        self,
        validator: Optional[ArgumentValidator] = None,
        audit_logger: Optional[AuditLogger] = None,
    ):
        self._validator = validator or ArgumentValidator()
        self._audit_logger = audit_logger
        self._settings = self._validator.settings

    def argument_keys(self) -> list[str]:
        """Prefixed keys (like "a/") this command understands."""
        keys = [*self.MANDATORY_KEYS, *self.EXTRA_KEYS]
        return [key for key in keys if key != MAIN_ARGUMENT]

    def execute(self, arguments: Optional[dict[str, str]] = None) -> list[str]:
        """
        Run the command and return feedback lines.

        Any UNivUSaverError becomes a single feedback line. Other
        exceptions propagate to the REPL.
        """
        arguments = arguments or {}
        try:
            self._check_mandatory(arguments)
            return self.run(arguments)
        except UNivUSaverError as e:
            return self.reject(str(e))

    @abstractmethod
    def run(self, arguments: dict[str, str]) -> list[str]:
        pass

    def reject(self, message: str) -> list[str]:
        """Report a refused command as one feedback line."""
        logger.info("command_rejected", command=self.COMMAND_WORD, reason=message)
        self._audit(AuditEventBuilder.command_rejected(self.COMMAND_WORD, message))
        return [message]

    def _check_mandatory(self, arguments: dict[str, str]) -> None:
        missing = [
            self.MAIN_ARGUMENT_NAME if key == MAIN_ARGUMENT else key
            for key in self.MANDATORY_KEYS
            if not arguments.get(key, "").strip()
        ]
        if missing:
            raise MissingArgumentError(missing)

    def _format_transaction(self, transaction: Transaction) -> str:
        return transaction.display(
            currency_symbol=self._settings.currency_symbol,
            datetime_format=self._settings.datetime_format,
        )

    def _format_amount(self, amount: Decimal) -> str:
        return format_amount(amount, self._settings.currency_symbol)

    def _audit(self, event: AuditEvent) -> None:
        if self._audit_logger is not None:
            self._audit_logger.log(event)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} '{self.COMMAND_WORD}'>"
