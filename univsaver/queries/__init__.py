"""Query execution package."""

from univsaver.queries.executor import (
    IndexedTransaction,
    QueryExecutionError,
    QueryExecutor,
    QueryResult,
    TotalsSummary,
    TransactionQuery,
)

__all__ = [
    "IndexedTransaction",
    "QueryExecutionError",
    "QueryExecutor",
    "QueryResult",
    "TotalsSummary",
    "TransactionQuery",
]
