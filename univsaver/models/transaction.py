"""
Core Data Models for uNivUSaver

These models define the schemas for everything the tracker stores.
They are designed to:
1. Enforce type safety at runtime
2. Provide clear validation error messages for the console
3. Render themselves as one readable feedback line

DESIGN DECISION: Transactions and categories carry no identifier.
They are addressed only by their position in the list that holds them.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    model_validator,
)

# Defaults for rendering; AppSettings starts from the same values
DEFAULT_CURRENCY_SYMBOL = "$"
DEFAULT_DATETIME_FORMAT = "%Y-%m-%d %H:%M"

# 15 significant digits keep every sum exact in the default decimal context
MAX_AMOUNT = Decimal("9999999999999.99")
CENTS = Decimal("0.01")


# =============================================================================
# ENUMS
# =============================================================================

class TransactionType(str, Enum):
    """Direction of a transaction."""
    INCOME = "income"
    EXPENSE = "expense"

    @property
    def label(self) -> str:
        return self.value.capitalize()


# =============================================================================
# TRANSACTION MODEL
# =============================================================================

def format_amount(amount: Decimal, currency_symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    """Render an amount with a currency symbol, sign first."""
    sign = "-" if amount < 0 else ""
    return f"{sign}{currency_symbol}{abs(amount):.2f}"


class Transaction(BaseModel):
    """
    A single recorded income or expense entry.

    The category is only a stored label. Nothing checks that a category
    with that name exists, and deleting a category leaves it in place.
    """
    model_config = ConfigDict(str_strip_whitespace=True)

    description: str = Field(
        ...,
        min_length=1,
        max_length=200,
        description="What the money was for"
    )
    amount: Decimal = Field(
        ...,
        gt=0,
        le=MAX_AMOUNT,
        max_digits=15,
        decimal_places=2,
        description="Amount, always positive; the type gives the direction"
    )
    type: TransactionType = Field(
        ...,
        description="Income or expense"
    )
    category: Optional[str] = Field(
        default=None,
        min_length=1,
        max_length=50,
        description="Category label (expenses only)"
    )
    timestamp: datetime = Field(
        default_factory=datetime.now,
        description="When the transaction happened"
    )

    @model_validator(mode='after')
    def validate_category(self) -> 'Transaction':
        """Only expenses are grouped into categories."""
        if self.category is not None and self.type == TransactionType.INCOME:
            raise ValueError("An income cannot have a category")
        return self

    @property
    def is_income(self) -> bool:
        return self.type == TransactionType.INCOME

    @property
    def is_expense(self) -> bool:
        return self.type == TransactionType.EXPENSE

    def matches_keywords(self, keywords: list[str]) -> bool:
        """True if every keyword occurs in the description or category."""
        haystack = self.description.lower()
        if self.category:
            haystack = f"{haystack} {self.category.lower()}"
        return all(keyword.lower() in haystack for keyword in keywords)

    def display(
        self,
        currency_symbol: str = DEFAULT_CURRENCY_SYMBOL,
        datetime_format: str = DEFAULT_DATETIME_FORMAT,
    ) -> str:
        """One feedback line, e.g. `[Expense] lunch | $12.50 | 2024-10-01 12:00 | food`."""
        parts = [
            f"[{self.type.label}] {self.description}",
            format_amount(self.amount, currency_symbol),
            self.timestamp.strftime(datetime_format),
        ]
        if self.category:
            parts.append(self.category)
        return " | ".join(parts)

    def __str__(self) -> str:
        return self.display()


# =============================================================================
# CATEGORY MODEL
# =============================================================================

class Category(BaseModel):
    """A user-defined label grouping expenses."""
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(
        ...,
        min_length=1,
        max_length=50,
        description="Category name"
    )
    description: Optional[str] = Field(
        default=None,
        max_length=200,
        description="Optional note about what belongs here"
    )

    def __str__(self) -> str:
        if self.description:
            return f"{self.name}: {self.description}"
        return self.name
