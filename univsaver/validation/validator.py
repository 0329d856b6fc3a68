"""
Argument Validation

Every argument arrives as a raw string pulled out of the command line.
This module turns those strings into typed values, and raw field sets
into models.

DESIGN DECISION: Validation NEVER silently fixes input.
A bad amount is rejected, it is not rounded; a bad date is rejected,
it is not replaced with today.

Each failure raises InvalidArgumentError carrying exactly one message,
which the command shows to the user as its feedback line.
"""

from datetime import date, datetime, time
from decimal import Decimal, InvalidOperation
from typing import Optional

from pydantic import ValidationError

from univsaver.config import AppSettings, get_settings
from univsaver.errors import UNivUSaverError
from univsaver.models.transaction import (
    CENTS,
    MAX_AMOUNT,
    Category,
    Transaction,
    TransactionType,
)


class InvalidArgumentError(UNivUSaverError):
    """An argument value could not be accepted."""
    pass


class MissingArgumentError(InvalidArgumentError):
    """One or more mandatory arguments were not given."""

    def __init__(self, names: list[str]):
        self.names = names
        super().__init__(f"Missing argument(s): {', '.join(names)}")


def describe_validation_error(error: ValidationError) -> str:
    """Collapse a pydantic error into one readable line."""
    first = error.errors()[0]
    field = ".".join(str(part) for part in first.get("loc", ()) if part != "__root__")
    message = first.get("msg", "invalid value")
    # Model-level validators report "Value error, <message>"
    message = message.removeprefix("Value error, ")
    if field:
        return f"Invalid {field}: {message}"
    return message


class ArgumentValidator:
    """
    Converts raw argument strings into typed values.

    All formats come from settings, so a user can switch to e.g.
    day-first dates without touching the commands.
    """

    def __init__(self, settings: Optional[AppSettings] = None):
        self._settings = settings or get_settings()

    @property
    def settings(self) -> AppSettings:
        return self._settings

    # -------------------------------------------------------------------------
    # Scalars
    # -------------------------------------------------------------------------

    def parse_amount(self, text: str) -> Decimal:
        """Positive, finite amount up to MAX_AMOUNT with at most two decimal places."""
        raw = (text or "").strip()
        try:
            amount = Decimal(raw)
        except InvalidOperation:
            raise InvalidArgumentError(f"Invalid amount: {raw or '(empty)'}")

        if not amount.is_finite():
            raise InvalidArgumentError(f"Invalid amount: {raw}")
        if amount <= 0:
            raise InvalidArgumentError("Amount must be greater than 0")
        if amount > MAX_AMOUNT:
            raise InvalidArgumentError(f"Amount cannot exceed {MAX_AMOUNT}")
        # Trailing zeros do not count: 2.500 is accepted as 2.50
        if amount.normalize().as_tuple().exponent < -2:
            raise InvalidArgumentError("Amount can have at most 2 decimal places")
        return amount.quantize(CENTS)

    def parse_date(self, text: str) -> date:
        raw = (text or "").strip()
        try:
            return datetime.strptime(raw, self._settings.date_format).date()
        except ValueError:
            raise InvalidArgumentError(
                f"Invalid date: {raw or '(empty)'} "
                f"(expected {self._describe_format(self._settings.date_format)})"
            )

    def parse_datetime(self, text: str) -> datetime:
        """
        Accept either a full date-time or a bare date.

        A bare date is taken as midnight of that day.
        """
        raw = (text or "").strip()
        try:
            return datetime.strptime(raw, self._settings.datetime_format)
        except ValueError:
            pass
        try:
            parsed = datetime.strptime(raw, self._settings.date_format).date()
        except ValueError:
            raise InvalidArgumentError(
                f"Invalid date: {raw or '(empty)'} "
                f"(expected {self._describe_format(self._settings.datetime_format)} "
                f"or {self._describe_format(self._settings.date_format)})"
            )
        return datetime.combine(parsed, time.min)

    def parse_index(self, text: str) -> int:
        """
        Turn the 1-based number the user sees into a 0-based position.

        Bounds are not checked here; the list knows its own size.
        """
        raw = (text or "").strip()
        try:
            number = int(raw)
        except ValueError:
            raise InvalidArgumentError(f"Invalid index: {raw or '(empty)'}")
        return number - 1

    def parse_keywords(self, text: str) -> list[str]:
        keywords = [word.lower() for word in (text or "").split()]
        if not keywords:
            raise InvalidArgumentError("Please provide at least one keyword")
        return keywords

    def parse_date_range(
        self,
        from_text: Optional[str],
        to_text: Optional[str],
    ) -> tuple[Optional[date], Optional[date]]:
        """Optional inclusive bounds; when both are given, from <= to."""
        date_from = self.parse_date(from_text) if from_text else None
        date_to = self.parse_date(to_text) if to_text else None
        if date_from and date_to and date_from > date_to:
            raise InvalidArgumentError("Start date cannot be after end date")
        return date_from, date_to

    # -------------------------------------------------------------------------
    # Models
    # -------------------------------------------------------------------------

    def build_transaction(
        self,
        transaction_type: TransactionType,
        description: str,
        amount_text: str,
        date_text: Optional[str] = None,
        category: Optional[str] = None,
    ) -> Transaction:
        fields = {
            "type": transaction_type,
            "description": description,
            "amount": self.parse_amount(amount_text),
            "category": category or None,
        }
        if date_text:
            fields["timestamp"] = self.parse_datetime(date_text)

        try:
            return Transaction(**fields)
        except ValidationError as e:
            raise InvalidArgumentError(describe_validation_error(e))

    def build_category(
        self,
        name: str,
        description: Optional[str] = None,
    ) -> Category:
        try:
            return Category(name=name, description=description or None)
        except ValidationError as e:
            raise InvalidArgumentError(describe_validation_error(e))

    @staticmethod
    def _describe_format(fmt: str) -> str:
        return (
            fmt.replace("%Y", "YYYY")
            .replace("%m", "MM")
            .replace("%d", "DD")
            .replace("%H", "HH")
            .replace("%M", "MM")
        )
