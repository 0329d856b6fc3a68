"""Commands that remove an entry by its position."""

from typing import Optional

from univsaver.audit import AuditLogger
from univsaver.commands.base import Command
from univsaver.models.audit import AuditEventBuilder
from univsaver.services.storage import (
    CategoryList,
    IndexOutOfRangeError,
    TransactionList,
)
from univsaver.validation import ArgumentValidator

INVALID_TRANSACTION_INDEX_MESSAGE = "Invalid transaction index!"
INVALID_CATEGORY_INDEX_MESSAGE = "Invalid category index!"


class DeleteTransactionCommand(Command):
    COMMAND_WORD = "delete-transaction"
    COMMAND_GUIDE = "delete-transaction i/INDEX"
    COMMAND_DESCRIPTION = "Deletes the transaction at INDEX (as shown by list)"
    MANDATORY_KEYS = ("i/",)

    def __init__(
        self,
        transactions: TransactionList,
        validator: Optional[ArgumentValidator] = None,
        audit_logger: Optional[AuditLogger] = None,
    ):
        super().__init__(validator, audit_logger)
        self._transactions = transactions

    def run(self, arguments: dict[str, str]) -> list[str]:
        index = self._validator.parse_index(arguments["i/"])
        try:
            removed = self._transactions.remove(index)
        except IndexOutOfRangeError:
            return self.reject(INVALID_TRANSACTION_INDEX_MESSAGE)

        self._audit(AuditEventBuilder.transaction_deleted(removed, index + 1))
        return [f"Transaction removed: {self._format_transaction(removed)}"]


class DeleteCategoryCommand(Command):
    COMMAND_WORD = "delete-category"
    COMMAND_GUIDE = "delete-category i/INDEX"
    COMMAND_DESCRIPTION = "Deletes the category at INDEX (as shown by view-category)"
    MANDATORY_KEYS = ("i/",)

    def __init__(
        self,
        categories: CategoryList,
        validator: Optional[ArgumentValidator] = None,
        audit_logger: Optional[AuditLogger] = None,
    ):
        super().__init__(validator, audit_logger)
        self._categories = categories

    def run(self, arguments: dict[str, str]) -> list[str]:
        index = self._validator.parse_index(arguments["i/"])
        try:
            removed = self._categories.remove(index)
        except IndexOutOfRangeError:
            return self.reject(INVALID_CATEGORY_INDEX_MESSAGE)

        self._audit(AuditEventBuilder.category_deleted(removed, index + 1))
        return [f"Category removed: {removed}"]
