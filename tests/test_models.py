"""
Tests for uNivUSaver

Test strategy:
1. Unit tests for individual components (models, validation, storage, queries)
2. Command tests against real in-memory lists
3. End-to-end REPL tests driven through in-memory streams
"""

import pytest
from datetime import datetime
from decimal import Decimal

from univsaver.models.transaction import (
    MAX_AMOUNT,
    Category,
    Transaction,
    TransactionType,
    format_amount,
)
from univsaver.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)


class TestTransactionModel:
    """Tests for the Transaction model."""

    def test_transaction_creation(self):
        """Test Transaction model creation."""
        transaction = Transaction(
            description="Lunch",
            amount=Decimal("12.50"),
            type=TransactionType.EXPENSE,
            category="food",
        )
        assert transaction.description == "Lunch"
        assert transaction.amount == Decimal("12.50")
        assert transaction.is_expense is True
        assert transaction.is_income is False

    def test_timestamp_defaults_to_now(self):
        """Test that the timestamp defaults to the current time."""
        before = datetime.now()
        transaction = Transaction(description="x", amount=Decimal("1"), type=TransactionType.INCOME)
        assert before <= transaction.timestamp <= datetime.now()

    def test_description_strips_whitespace(self):
        """Test that whitespace is stripped from the description."""
        transaction = Transaction(
            description="  Lunch  ",
            amount=Decimal("1"),
            type=TransactionType.EXPENSE,
        )
        assert transaction.description == "Lunch"

    def test_rejects_blank_description(self):
        """Test that a description of only spaces is rejected."""
        with pytest.raises(ValueError):
            Transaction(description="   ", amount=Decimal("1"), type=TransactionType.EXPENSE)

    def test_rejects_zero_and_negative_amounts(self):
        """Test that non-positive amounts are rejected."""
        for amount in ("0", "-5"):
            with pytest.raises(ValueError):
                Transaction(description="x", amount=Decimal(amount), type=TransactionType.EXPENSE)

    def test_rejects_more_than_two_decimal_places(self):
        """Test that sub-cent amounts are rejected."""
        with pytest.raises(ValueError):
            Transaction(description="x", amount=Decimal("1.005"), type=TransactionType.EXPENSE)

    def test_accepts_max_amount(self):
        """Test that the largest allowed amount is accepted."""
        transaction = Transaction(description="x", amount=MAX_AMOUNT, type=TransactionType.INCOME)
        assert transaction.amount == Decimal("9999999999999.99")

    def test_rejects_amount_above_max(self):
        """Test that amounts above the cap are rejected."""
        with pytest.raises(ValueError):
            Transaction(
                description="x",
                amount=MAX_AMOUNT + Decimal("0.01"),
                type=TransactionType.INCOME,
            )

    def test_income_cannot_have_category(self):
        """Test that only expenses carry a category."""
        with pytest.raises(ValueError, match="An income cannot have a category"):
            Transaction(
                description="Salary",
                amount=Decimal("100"),
                type=TransactionType.INCOME,
                category="work",
            )

    def test_str_expense_with_category(self):
        """Test the default rendering of an expense."""
        transaction = Transaction(
            description="Lunch",
            amount=Decimal("12.5"),
            type=TransactionType.EXPENSE,
            category="food",
            timestamp=datetime(2024, 10, 1, 12, 0),
        )
        assert str(transaction) == "[Expense] Lunch | $12.50 | 2024-10-01 12:00 | food"

    def test_str_income(self):
        """Test the default rendering of an income."""
        transaction = Transaction(
            description="Salary",
            amount=Decimal("3000"),
            type=TransactionType.INCOME,
            timestamp=datetime(2024, 10, 1, 9, 5),
        )
        assert str(transaction) == "[Income] Salary | $3000.00 | 2024-10-01 09:05"

    def test_display_with_custom_formats(self):
        """Test rendering with a different currency and date format."""
        transaction = Transaction(
            description="Tea",
            amount=Decimal("2"),
            type=TransactionType.EXPENSE,
            timestamp=datetime(2024, 10, 1, 8, 30),
        )
        assert transaction.display("EUR ", "%d.%m.%Y %H:%M") == "[Expense] Tea | EUR 2.00 | 01.10.2024 08:30"

    def test_matches_keywords_needs_every_keyword(self):
        """Test that keyword matching requires all keywords, ignoring case."""
        transaction = Transaction(
            description="Lunch at the cafe",
            amount=Decimal("1"),
            type=TransactionType.EXPENSE,
            category="Food",
        )
        assert transaction.matches_keywords(["lunch", "CAFE"])
        assert transaction.matches_keywords(["food"])
        assert not transaction.matches_keywords(["lunch", "dinner"])


class TestCategoryModel:
    """Tests for the Category model."""

    def test_category_creation(self):
        """Test Category model creation and rendering."""
        category = Category(name=" food ", description="Meals")
        assert category.name == "food"
        assert str(category) == "food: Meals"

    def test_category_without_description(self):
        """Test rendering of a category with no description."""
        assert str(Category(name="transport")) == "transport"

    def test_category_name_required(self):
        """Test that an empty name is rejected."""
        with pytest.raises(ValueError):
            Category(name="")


class TestFormatAmount:
    """Tests for amount rendering."""

    def test_positive(self):
        """Test a positive amount with the default symbol."""
        assert format_amount(Decimal("7")) == "$7.00"

    def test_negative_puts_sign_before_symbol(self):
        """Test that the minus sign comes before the currency symbol."""
        assert format_amount(Decimal("-40.5")) == "-$40.50"

    def test_custom_symbol(self):
        """Test a non-default currency symbol."""
        assert format_amount(Decimal("3.1"), "EUR ") == "EUR 3.10"


class TestAuditModels:
    """Tests for audit-related models."""

    def test_audit_event_creation(self):
        """Test AuditEvent model creation."""
        event = AuditEvent(
            event_type=AuditEventType.SESSION_STARTED,
            description="Session started",
        )
        assert event.event_type == AuditEventType.SESSION_STARTED
        assert event.severity == AuditSeverity.INFO
        assert event.timestamp.tzinfo is not None

    def test_audit_event_to_log_dict(self):
        """Test conversion to log dictionary."""
        event = AuditEvent(
            event_type=AuditEventType.CATEGORY_ADDED,
            description="Category added",
            details={"position": 1},
        )
        log_dict = event.to_log_dict()
        assert "event_id" in log_dict
        assert log_dict["event_type"] == "category_added"
        assert log_dict["details"]["position"] == 1

    def test_audit_event_builder_transaction_added(self):
        """Test AuditEventBuilder.transaction_added."""
        transaction = Transaction(
            description="Lunch",
            amount=Decimal("12.50"),
            type=TransactionType.EXPENSE,
            category="food",
        )
        event = AuditEventBuilder.transaction_added(transaction, 3)

        assert event.event_type == AuditEventType.TRANSACTION_ADDED
        assert event.entity_type == "transaction"
        assert event.details["position"] == 3
        assert event.details["amount"] == "12.50"
        assert event.is_user_action is True

    def test_audit_event_builder_command_rejected(self):
        """Test AuditEventBuilder.command_rejected."""
        event = AuditEventBuilder.command_rejected("delete-transaction", "Invalid transaction index!")

        assert event.event_type == AuditEventType.COMMAND_REJECTED
        assert event.severity == AuditSeverity.WARNING
        assert event.error_message == "Invalid transaction index!"

    def test_audit_event_builder_system_error(self):
        """Test AuditEventBuilder.system_error."""
        event = AuditEventBuilder.system_error("RuntimeError", "boom")

        assert event.severity == AuditSeverity.ERROR
        assert event.details == {}


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
