"""
Read-only commands

These never change the lists. Each one builds a TransactionQuery,
runs it through the QueryExecutor and words the result.

Numbers shown next to transactions are their positions in the full
list, so they can be passed straight to delete-transaction.
"""

from datetime import date
from typing import Optional

from univsaver.audit import AuditLogger
from univsaver.commands.base import Command
from univsaver.models.audit import AuditEventBuilder
from univsaver.models.transaction import TransactionType
from univsaver.queries import QueryExecutor, QueryResult
from univsaver.services.storage import CategoryList
from univsaver.validation import ArgumentValidator

NO_TRANSACTIONS_MESSAGE = "No transactions found."


class QueryCommand(Command):
    """A command answered by running one or more transaction queries."""

    def __init__(
        self,
        executor: QueryExecutor,
        validator: Optional[ArgumentValidator] = None,
        audit_logger: Optional[AuditLogger] = None,
    ):
        super().__init__(validator, audit_logger)
        self._executor = executor

    def _run_query(self, **filters) -> QueryResult:
        query = self._executor.build_query(**filters)
        result = self._executor.execute(query)
        self._audit(AuditEventBuilder.query_executed(self.COMMAND_WORD, result.result_count))
        return result

    def _date_range(self, arguments: dict[str, str]):
        return self._validator.parse_date_range(arguments.get("f/"), arguments.get("t/"))

    def _format_matches(self, result: QueryResult) -> list[str]:
        return [
            f"{match.index}. {self._format_transaction(match.transaction)}"
            for match in result.matches
        ]

    def _describe_filters(
        self,
        category: Optional[str] = None,
        date_from: Optional[date] = None,
        date_to: Optional[date] = None,
    ) -> str:
        """Short suffix like " (category: food, from 2024-01-01)"."""
        date_format = self._settings.date_format
        parts = []
        if category:
            parts.append(f"category: {category}")
        if date_from:
            parts.append(f"from {date_from.strftime(date_format)}")
        if date_to:
            parts.append(f"to {date_to.strftime(date_format)}")
        return f" ({', '.join(parts)})" if parts else ""


class ListCommand(QueryCommand):
    COMMAND_WORD = "list"
    COMMAND_GUIDE = "list"
    COMMAND_DESCRIPTION = "Lists every transaction in the order it was added"

    def run(self, arguments: dict[str, str]) -> list[str]:
        result = self._run_query()
        if not result.data_found:
            return [NO_TRANSACTIONS_MESSAGE]
        return ["All transactions:", *self._format_matches(result)]


class ViewTypeCommand(QueryCommand):
    """Shared behavior of view-expense and view-income."""

    TRANSACTION_TYPE: TransactionType
    PLURAL: str = ""

    def _category_filter(self, arguments: dict[str, str]) -> Optional[str]:
        return None

    def run(self, arguments: dict[str, str]) -> list[str]:
        category = self._category_filter(arguments)
        date_from, date_to = self._date_range(arguments)
        result = self._run_query(
            transaction_type=self.TRANSACTION_TYPE,
            category=category,
            date_from=date_from,
            date_to=date_to,
        )

        filters = self._describe_filters(category, date_from, date_to)
        if not result.data_found:
            return [f"No {self.PLURAL.lower()} found{filters}."]
        return [
            f"{self.PLURAL}{filters}:",
            *self._format_matches(result),
            f"Total {self.TRANSACTION_TYPE.value}: {self._format_amount(result.total)}",
        ]


class ViewExpenseCommand(ViewTypeCommand):
    """
    Lists expenses.

    When the c/ filter names a defined category, the header shows that
    category's own spelling; matching ignores case either way.
    """

    COMMAND_WORD = "view-expense"
    COMMAND_GUIDE = "view-expense [c/CATEGORY] [f/FROM] [t/TO]"
    COMMAND_DESCRIPTION = "Lists expenses, optionally by category and date range"
    EXTRA_KEYS = ("c/", "f/", "t/")
    TRANSACTION_TYPE = TransactionType.EXPENSE
    PLURAL = "Expenses"

    def __init__(
        self,
        executor: QueryExecutor,
        categories: Optional[CategoryList] = None,
        validator: Optional[ArgumentValidator] = None,
        audit_logger: Optional[AuditLogger] = None,
    ):
        super().__init__(executor, validator, audit_logger)
        self._categories = categories

    def _category_filter(self, arguments: dict[str, str]) -> Optional[str]:
        name = arguments.get("c/", "").strip()
        if not name:
            return None
        if self._categories is not None:
            category = self._categories.find_by_name(name)
            if category is not None:
                return category.name
        return name


class ViewIncomeCommand(ViewTypeCommand):
    COMMAND_WORD = "view-income"
    COMMAND_GUIDE = "view-income [f/FROM] [t/TO]"
    COMMAND_DESCRIPTION = "Lists incomes, optionally within a date range"
    EXTRA_KEYS = ("f/", "t/")
    TRANSACTION_TYPE = TransactionType.INCOME
    PLURAL = "Incomes"


class ViewTotalCommand(QueryCommand):
    COMMAND_WORD = "view-total"
    COMMAND_GUIDE = "view-total [f/FROM] [t/TO]"
    COMMAND_DESCRIPTION = "Shows total income, total expense and the balance"
    EXTRA_KEYS = ("f/", "t/")

    def run(self, arguments: dict[str, str]) -> list[str]:
        date_from, date_to = self._date_range(arguments)
        summary = self._executor.totals(date_from, date_to)
        self._audit(AuditEventBuilder.query_executed(
            self.COMMAND_WORD,
            summary.income_count + summary.expense_count,
        ))
        return [
            f"Totals{self._describe_filters(None, date_from, date_to)}:",
            f"Total income: {self._format_amount(summary.income)} ({summary.income_count} transaction(s))",
            f"Total expense: {self._format_amount(summary.expense)} ({summary.expense_count} transaction(s))",
            f"Balance: {self._format_amount(summary.balance)}",
        ]


class HistoryCommand(QueryCommand):
    COMMAND_WORD = "history"
    COMMAND_GUIDE = "history [f/FROM] [t/TO]"
    COMMAND_DESCRIPTION = "Lists all transactions in date order, optionally within a range"
    EXTRA_KEYS = ("f/", "t/")

    def run(self, arguments: dict[str, str]) -> list[str]:
        date_from, date_to = self._date_range(arguments)
        result = self._run_query(
            date_from=date_from,
            date_to=date_to,
            chronological=True,
        )
        filters = self._describe_filters(None, date_from, date_to)
        if not result.data_found:
            return [f"No transactions found{filters}."]
        return [f"Transaction history{filters}:", *self._format_matches(result)]


class KeywordsSearchCommand(QueryCommand):
    COMMAND_WORD = "search"
    COMMAND_GUIDE = "search k/KEYWORDS"
    COMMAND_DESCRIPTION = "Finds transactions whose description or category contains every keyword"
    MANDATORY_KEYS = ("k/",)

    def run(self, arguments: dict[str, str]) -> list[str]:
        keywords = self._validator.parse_keywords(arguments["k/"])
        result = self._run_query(keywords=keywords)
        shown = ", ".join(keywords)
        if not result.data_found:
            return [f"No transactions match: {shown}"]
        return [f"Transactions matching: {shown}", *self._format_matches(result)]


class ViewCategoryCommand(Command):
    COMMAND_WORD = "view-category"
    COMMAND_GUIDE = "view-category"
    COMMAND_DESCRIPTION = "Lists every category"

    def __init__(
        self,
        categories: CategoryList,
        validator: Optional[ArgumentValidator] = None,
        audit_logger: Optional[AuditLogger] = None,
    ):
        super().__init__(validator, audit_logger)
        self._categories = categories

    def run(self, arguments: dict[str, str]) -> list[str]:
        if self._categories.is_empty():
            return ["No categories found."]
        return [
            "All categories:",
            *(f"{i}. {category}" for i, category in enumerate(self._categories, start=1)),
        ]
