"""Commands package."""

from univsaver.commands.base import MAIN_ARGUMENT, Command
from univsaver.commands.add import (
    AddCategoryCommand,
    AddExpenseCommand,
    AddIncomeCommand,
)
from univsaver.commands.delete import (
    DeleteCategoryCommand,
    DeleteTransactionCommand,
)
from univsaver.commands.general import ByeCommand, HelpCommand
from univsaver.commands.view import (
    HistoryCommand,
    KeywordsSearchCommand,
    ListCommand,
    ViewCategoryCommand,
    ViewExpenseCommand,
    ViewIncomeCommand,
    ViewTotalCommand,
)

__all__ = [
    "MAIN_ARGUMENT",
    "Command",
    # Adding
    "AddCategoryCommand",
    "AddExpenseCommand",
    "AddIncomeCommand",
    # Deleting
    "DeleteCategoryCommand",
    "DeleteTransactionCommand",
    # Viewing
    "HistoryCommand",
    "KeywordsSearchCommand",
    "ListCommand",
    "ViewCategoryCommand",
    "ViewExpenseCommand",
    "ViewIncomeCommand",
    "ViewTotalCommand",
    # General
    "ByeCommand",
    "HelpCommand",
]
