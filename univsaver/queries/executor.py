"""
Query Execution Engine

DESIGN DECISION: Every read-only view (list, view-expense, view-income,
history, search, view-total) goes through this engine. The commands only
decide WHICH filters to set and how to word the answer.

All filters are linear scans over the transaction list; the list is
small and lives in memory.
"""

from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, ValidationError, model_validator

from univsaver.errors import UNivUSaverError
from univsaver.models.transaction import Transaction, TransactionType
from univsaver.services.storage import ListStorageInterface
from univsaver.validation import describe_validation_error


class QueryExecutionError(UNivUSaverError):
    """Error during query execution."""
    pass


# =============================================================================
# QUERY MODELS
# =============================================================================

class TransactionQuery(BaseModel):
    """
    Filters to apply to the transaction list.

    Every filter left as None (or empty) matches everything.
    """

    transaction_type: Optional[TransactionType] = None
    category: Optional[str] = Field(
        default=None,
        description="Category label, compared ignoring case"
    )
    date_from: Optional[date] = Field(
        default=None,
        description="Inclusive lower bound on the transaction date"
    )
    date_to: Optional[date] = Field(
        default=None,
        description="Inclusive upper bound on the transaction date"
    )
    keywords: list[str] = Field(
        default_factory=list,
        description="Every keyword must appear in description or category"
    )
    chronological: bool = Field(
        default=False,
        description="Sort by timestamp instead of insertion order"
    )

    @model_validator(mode='after')
    def validate_range(self) -> 'TransactionQuery':
        if self.date_from and self.date_to and self.date_from > self.date_to:
            raise ValueError("Start date cannot be after end date")
        return self

    def matches(self, transaction: Transaction) -> bool:
        if self.transaction_type and transaction.type != self.transaction_type:
            return False
        if self.category is not None:
            if (transaction.category or "").lower() != self.category.strip().lower():
                return False
        day = transaction.timestamp.date()
        if self.date_from and day < self.date_from:
            return False
        if self.date_to and day > self.date_to:
            return False
        if self.keywords and not transaction.matches_keywords(self.keywords):
            return False
        return True


class IndexedTransaction(BaseModel):
    """A matched transaction together with its 1-based list position."""

    index: int = Field(ge=1)
    transaction: Transaction


class QueryResult(BaseModel):
    """Result of executing a TransactionQuery."""

    matches: list[IndexedTransaction] = Field(default_factory=list)
    result_count: int = Field(ge=0)
    total: Decimal = Field(
        default=Decimal("0"),
        description="Sum of the matched amounts"
    )

    @property
    def data_found(self) -> bool:
        return self.result_count > 0


class TotalsSummary(BaseModel):
    """Income, expense and what is left over."""

    income: Decimal
    expense: Decimal
    income_count: int = Field(ge=0)
    expense_count: int = Field(ge=0)

    @property
    def balance(self) -> Decimal:
        return self.income - self.expense


# =============================================================================
# EXECUTOR
# =============================================================================

class QueryExecutor:
    """
    Executes transaction queries against the transaction list.

    GUARANTEES:
    - Only returns transactions that are in the list right now
    - Reported positions are valid input for delete-transaction
    """

    def __init__(self, transactions: ListStorageInterface[Transaction]):
        self._transactions = transactions

    @staticmethod
    def build_query(**filters) -> TransactionQuery:
        """Build a query, reporting bad filters as QueryExecutionError."""
        try:
            return TransactionQuery(**filters)
        except ValidationError as e:
            raise QueryExecutionError(describe_validation_error(e))

    def execute(self, query: TransactionQuery) -> QueryResult:
        matches = [
            IndexedTransaction(index=position + 1, transaction=transaction)
            for position, transaction in enumerate(self._transactions.all())
            if query.matches(transaction)
        ]

        if query.chronological:
            # sorted() is stable: equal timestamps keep insertion order
            matches = sorted(matches, key=lambda m: m.transaction.timestamp)

        return QueryResult(
            matches=matches,
            result_count=len(matches),
            total=sum((m.transaction.amount for m in matches), Decimal("0")),
        )

    def totals(
        self,
        date_from: Optional[date] = None,
        date_to: Optional[date] = None,
    ) -> TotalsSummary:
        """Sum incomes and expenses, optionally within a date range."""
        income = self.execute(TransactionQuery(
            transaction_type=TransactionType.INCOME,
            date_from=date_from,
            date_to=date_to,
        ))
        expense = self.execute(TransactionQuery(
            transaction_type=TransactionType.EXPENSE,
            date_from=date_from,
            date_to=date_to,
        ))
        return TotalsSummary(
            income=income.total,
            expense=expense.total,
            income_count=income.result_count,
            expense_count=expense.result_count,
        )
