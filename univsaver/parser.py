"""
Command Parser

Keeps the registry of commands and splits the argument text of a line
into key/value pairs for the command that was selected.

Argument format:
    add-expense lunch at cafe a/12.50 d/2024-10-01 c/food

    ""   -> "lunch at cafe"   (main argument: text before the first key)
    "a/" -> "12.50"
    "d/" -> "2024-10-01"
    "c/" -> "food"
"""

from typing import Optional

import structlog

from univsaver.commands import MAIN_ARGUMENT, Command

logger = structlog.get_logger(__name__)


class Parser:
    """Maps keywords to command objects and extracts their arguments."""

    def __init__(self):
        self._commands: dict[str, Command] = {}

    def register_commands(self, *commands: Command) -> None:
        """Register commands under their keyword; a later one replaces an earlier one."""
        for command in commands:
            word = command.COMMAND_WORD.lower()
            if word in self._commands:
                logger.warning("command_replaced", command=word)
            self._commands[word] = command

    def get_commands(self) -> dict[str, Command]:
        """Registered commands keyed by keyword, in registration order."""
        return dict(self._commands)

    def parse_command(self, command_word: str) -> Optional[Command]:
        """The command registered for a keyword, or None if there is none."""
        return self._commands.get(command_word.strip().lower())

    @staticmethod
    def extract_arguments(command: Command, argument_text: str) -> dict[str, str]:
        """
        Split argument text into values keyed by the command's argument keys.

        Only keys the command declares are recognised; anything else that
        looks like a key is kept as plain text. When a key is repeated the
        last value wins. Runs of whitespace collapse to a single space.
        """
        # Longest first, so a key is never shadowed by its own prefix
        keys = sorted(command.argument_keys(), key=len, reverse=True)

        current = MAIN_ARGUMENT
        parts: dict[str, list[str]] = {MAIN_ARGUMENT: []}
        for token in argument_text.split():
            key = next((k for k in keys if token.startswith(k)), None)
            if key is None:
                parts[current].append(token)
                continue
            current = key
            parts[current] = [token[len(key):]]

        arguments = {
            key: " ".join(word for word in words if word)
            for key, words in parts.items()
        }
        if not arguments[MAIN_ARGUMENT]:
            del arguments[MAIN_ARGUMENT]
        return arguments
