"""
Main Orchestrator for uNivUSaver

This module ties together all the components and runs the REPL:
read a line → pick the command → run it → print the feedback.

DESIGN DECISION: The orchestrator owns the only shared state (the two
lists). Commands are built once at start-up around those lists and are
reused for every line.

Nothing that goes wrong inside a command stops the loop. Bad input is
answered by the command itself; anything unexpected is logged here and
the loop carries on with the data intact.
"""

import sys
from typing import Optional, TextIO

import structlog

from univsaver.audit import AuditLogger, configure_logging
from univsaver.commands import (
    AddCategoryCommand,
    AddExpenseCommand,
    AddIncomeCommand,
    ByeCommand,
    DeleteCategoryCommand,
    DeleteTransactionCommand,
    HelpCommand,
    HistoryCommand,
    KeywordsSearchCommand,
    ListCommand,
    ViewCategoryCommand,
    ViewExpenseCommand,
    ViewIncomeCommand,
    ViewTotalCommand,
)
from univsaver.config import AppSettings, get_settings
from univsaver.models.audit import AuditEventBuilder
from univsaver.parser import Parser
from univsaver.queries import QueryExecutor
from univsaver.services.storage import (
    CategoryList,
    InMemoryAuditStorage,
    TransactionList,
)
from univsaver.validation import ArgumentValidator

HI_MESSAGE = "Hello, {name} is willing to help!"
INVALID_COMMAND_ERROR_MESSAGE = "Invalid command."
UNEXPECTED_ERROR_MESSAGE = "Something went wrong. Please try again."

logger = structlog.get_logger(__name__)


class UNivUSaver:
    """
    The REPL application.

    Streams are injectable so the whole loop can be driven from tests.
    """

    def __init__(
        self,
        input_stream: Optional[TextIO] = None,
        output_stream: Optional[TextIO] = None,
        settings: Optional[AppSettings] = None,
        audit_logger: Optional[AuditLogger] = None,
    ):
        self._input = input_stream or sys.stdin
        self._output = output_stream or sys.stdout
        self._settings = settings or get_settings()
        self._audit_logger = audit_logger or AuditLogger(InMemoryAuditStorage())
        self._validator = ArgumentValidator(self._settings)

        self.parser = Parser()
        self.transactions = TransactionList()
        self.categories = CategoryList()
        self.is_running = False

    @property
    def audit_logger(self) -> AuditLogger:
        return self._audit_logger

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def start(self) -> None:
        """Register the commands and greet the user."""
        logger.info("starting", app=self._settings.app_name)

        self.setup_commands()
        self.is_running = True
        self._audit_logger.log(AuditEventBuilder.session_started(self._settings.app_name))

        self.print_message(HI_MESSAGE.format(name=self._settings.app_name))

    def stop(self) -> None:
        self.is_running = False

    def setup_commands(self) -> None:
        """Build every command around the shared lists and register it."""
        shared = {"validator": self._validator, "audit_logger": self._audit_logger}
        executor = QueryExecutor(self.transactions)

        help_command = HelpCommand()
        self.parser.register_commands(
            help_command,
            AddCategoryCommand(self.categories, **shared),
            AddIncomeCommand(self.transactions, **shared),
            AddExpenseCommand(self.transactions, **shared),
            DeleteCategoryCommand(self.categories, **shared),
            DeleteTransactionCommand(self.transactions, **shared),
            ListCommand(executor, **shared),
            ViewCategoryCommand(self.categories, **shared),
            ViewExpenseCommand(executor, self.categories, **shared),
            ViewIncomeCommand(executor, **shared),
            ViewTotalCommand(executor, **shared),
            HistoryCommand(executor, **shared),
            KeywordsSearchCommand(executor, **shared),
            ByeCommand(),
        )

        logger.debug("setting_help_commands")
        help_command.set_commands(list(self.parser.get_commands().values()))

    def run(self) -> None:
        """Start, then keep processing lines until a command asks to exit."""
        self.start()
        while self.is_running:
            try:
                self.run_command_loop()
            except Exception as e:
                logger.exception("command_loop_failed", error=str(e))
                self._audit_logger.log(AuditEventBuilder.system_error(
                    error_type=type(e).__name__,
                    error_message=str(e),
                ))
                self.show_command_result([UNEXPECTED_ERROR_MESSAGE])

        self._audit_logger.log(AuditEventBuilder.session_ended(
            transaction_count=len(self.transactions),
            category_count=len(self.categories),
        ))

    def run_command_loop(self) -> None:
        while self.is_running:
            line = self.get_user_input()
            if line is None:
                # End of input behaves like bye
                logger.info("end_of_input")
                line = ByeCommand.COMMAND_WORD
            self.show_command_result(self.process_line(line))

    # -------------------------------------------------------------------------
    # One line
    # -------------------------------------------------------------------------

    def process_line(self, line: str) -> list[str]:
        """Dispatch one line of input and return the feedback lines."""
        command_parts = line.strip().split(maxsplit=1)
        if not command_parts:
            return [INVALID_COMMAND_ERROR_MESSAGE]

        command = self.parser.parse_command(command_parts[0])
        if command is None:
            logger.info("invalid_command", command=command_parts[0])
            return [INVALID_COMMAND_ERROR_MESSAGE]

        arguments = {}
        if len(command_parts) == 2:
            arguments = self.parser.extract_arguments(command, command_parts[1])

        logger.debug("executing", command=command.COMMAND_WORD, arguments=arguments)
        messages = command.execute(arguments)

        if command.is_exit:
            self.stop()
        return messages

    # -------------------------------------------------------------------------
    # Console I/O
    # -------------------------------------------------------------------------

    def get_user_input(self) -> Optional[str]:
        """
        Next non-blank line of input, without its line ending.

        Returns None at end of input.
        """
        while True:
            line = self._input.readline()
            if not line:
                return None
            if line.strip():
                return line.rstrip("\r\n")

    def print_message(self, message: str) -> None:
        self._output.write(f"{self._settings.output_prefix}{message}\n")

    def print_messages(self, messages: list[str]) -> None:
        for message in messages:
            self.print_message(message)

    def show_command_result(self, results: Optional[list[str]]) -> None:
        """Print feedback lines between two separator lines."""
        if results is None:
            return
        self.print_message(self._settings.separator)
        self.print_messages(results)
        self.print_message(self._settings.separator)
        self._output.flush()


def main() -> int:
    """Console entry point."""
    configure_logging()
    try:
        UNivUSaver().run()
    except KeyboardInterrupt:
        logger.info("interrupted")
    return 0


if __name__ == "__main__":
    sys.exit(main())
