"""Shared fixtures for the uNivUSaver test suite."""

import io
from datetime import datetime
from decimal import Decimal

import pytest

from univsaver.audit import AuditLogger, configure_logging
from univsaver.config import AppSettings
from univsaver.models.transaction import Category, Transaction, TransactionType
from univsaver.orchestrator import UNivUSaver
from univsaver.queries import QueryExecutor
from univsaver.services.storage import (
    CategoryList,
    InMemoryAuditStorage,
    TransactionList,
)
from univsaver.validation import ArgumentValidator


@pytest.fixture(scope="session", autouse=True)
def quiet_logging():
    """Keep library logs at WARNING so test output stays readable."""
    configure_logging(AppSettings(log_level="WARNING"))


@pytest.fixture
def validator():
    return ArgumentValidator()


@pytest.fixture
def audit_storage():
    return InMemoryAuditStorage()


@pytest.fixture
def audit_logger(audit_storage):
    """An audit logger writing into the audit_storage fixture."""
    return AuditLogger(storage=audit_storage)


@pytest.fixture
def transactions():
    return TransactionList()


@pytest.fixture
def categories():
    return CategoryList()


def _make_transaction(
    description: str,
    amount: str,
    transaction_type: TransactionType = TransactionType.EXPENSE,
    when: datetime = datetime(2024, 10, 1, 12, 0),
    category=None,
) -> Transaction:
    return Transaction(
        description=description,
        amount=Decimal(amount),
        type=transaction_type,
        timestamp=when,
        category=category,
    )


@pytest.fixture
def make_transaction():
    """Factory for transactions with test-friendly defaults."""
    return _make_transaction


@pytest.fixture
def sample_transactions(transactions):
    """A small month of activity, added out of date order on purpose."""
    transactions.add(_make_transaction(
        "Monthly salary", "3000", TransactionType.INCOME, datetime(2024, 10, 1, 9, 0),
    ))
    transactions.add(_make_transaction(
        "Lunch at cafe", "12.50", when=datetime(2024, 10, 3, 12, 30), category="food",
    ))
    transactions.add(_make_transaction(
        "Bus pass", "45", when=datetime(2024, 10, 2, 8, 0), category="transport",
    ))
    transactions.add(_make_transaction(
        "Tutoring", "200", TransactionType.INCOME, datetime(2024, 10, 15, 18, 0),
    ))
    transactions.add(_make_transaction(
        "Dinner with friends", "30.25", when=datetime(2024, 10, 20, 19, 0), category="Food",
    ))
    return transactions


@pytest.fixture
def sample_categories(categories):
    """Three categories, two of them with descriptions."""
    categories.add(Category(name="food", description="Meals and snacks"))
    categories.add(Category(name="transport"))
    categories.add(Category(name="books", description="Course materials"))
    return categories


@pytest.fixture
def executor(sample_transactions):
    """A query executor over the sample transactions."""
    return QueryExecutor(sample_transactions)


@pytest.fixture
def run_app():
    """Drive the whole REPL with the given input lines; returns (app, output)."""

    def _run(*lines: str):
        stdin = io.StringIO("".join(f"{line}\n" for line in lines))
        stdout = io.StringIO()
        app = UNivUSaver(input_stream=stdin, output_stream=stdout)
        app.run()
        return app, stdout.getvalue()

    return _run
