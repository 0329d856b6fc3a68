"""Commands that append to the transaction or category list."""

from typing import Optional

from univsaver.audit import AuditLogger
from univsaver.commands.base import MAIN_ARGUMENT, Command
from univsaver.models.audit import AuditEventBuilder
from univsaver.models.transaction import TransactionType
from univsaver.services.storage import CategoryList, TransactionList
from univsaver.validation import ArgumentValidator


class AddCategoryCommand(Command):
    COMMAND_WORD = "add-category"
    COMMAND_GUIDE = "add-category NAME [desc/DESCRIPTION]"
    COMMAND_DESCRIPTION = "Adds a new category"
    MAIN_ARGUMENT_NAME = "NAME"
    MANDATORY_KEYS = (MAIN_ARGUMENT,)
    EXTRA_KEYS = ("desc/",)

    def __init__(
        self,
        categories: CategoryList,
        validator: Optional[ArgumentValidator] = None,
        audit_logger: Optional[AuditLogger] = None,
    ):
        super().__init__(validator, audit_logger)
        self._categories = categories

    def run(self, arguments: dict[str, str]) -> list[str]:
        category = self._validator.build_category(
            name=arguments[MAIN_ARGUMENT],
            description=arguments.get("desc/"),
        )
        position = self._categories.add(category)
        self._audit(AuditEventBuilder.category_added(category, position + 1))
        return [f"Category added: {category}"]


class AddTransactionCommand(Command):
    """
    Shared behavior of add-income and add-expense.

    Subclasses only pick the transaction type and which keys they accept.
    """

    TRANSACTION_TYPE: TransactionType
    MAIN_ARGUMENT_NAME = "DESCRIPTION"
    MANDATORY_KEYS = (MAIN_ARGUMENT, "a/")

    def __init__(
        self,
        transactions: TransactionList,
        validator: Optional[ArgumentValidator] = None,
        audit_logger: Optional[AuditLogger] = None,
    ):
        super().__init__(validator, audit_logger)
        self._transactions = transactions

    def run(self, arguments: dict[str, str]) -> list[str]:
        transaction = self._validator.build_transaction(
            transaction_type=self.TRANSACTION_TYPE,
            description=arguments[MAIN_ARGUMENT],
            amount_text=arguments["a/"],
            date_text=arguments.get("d/"),
            category=arguments.get("c/"),
        )
        position = self._transactions.add(transaction)
        self._audit(AuditEventBuilder.transaction_added(transaction, position + 1))
        return [f"Transaction added: {self._format_transaction(transaction)}"]


class AddIncomeCommand(AddTransactionCommand):
    COMMAND_WORD = "add-income"
    COMMAND_GUIDE = "add-income DESCRIPTION a/AMOUNT [d/DATE]"
    COMMAND_DESCRIPTION = "Records an income"
    TRANSACTION_TYPE = TransactionType.INCOME
    EXTRA_KEYS = ("d/",)


class AddExpenseCommand(AddTransactionCommand):
    COMMAND_WORD = "add-expense"
    COMMAND_GUIDE = "add-expense DESCRIPTION a/AMOUNT [d/DATE] [c/CATEGORY]"
    COMMAND_DESCRIPTION = "Records an expense, optionally under a category"
    TRANSACTION_TYPE = TransactionType.EXPENSE
    EXTRA_KEYS = ("d/", "c/")
