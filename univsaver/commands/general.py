"""Commands that do not touch any list."""

from typing import Optional

from univsaver.commands.base import MAIN_ARGUMENT, Command

BYE_MESSAGE = "Bye. Hope to see you again soon!"


class HelpCommand(Command):
    """
    Shows the usage of every registered command.

    The command list is only known once everything is registered, so
    it is handed over afterwards with set_commands().
    """

    COMMAND_WORD = "help"
    COMMAND_GUIDE = "help [COMMAND]"
    COMMAND_DESCRIPTION = "Shows how to use all commands, or just one"

    def __init__(self, commands: Optional[list[Command]] = None):
        super().__init__()
        self._commands: list[Command] = list(commands or [])

    def set_commands(self, commands: list[Command]) -> None:
        self._commands = list(commands)

    def run(self, arguments: dict[str, str]) -> list[str]:
        wanted = arguments.get(MAIN_ARGUMENT, "").strip().lower()
        if wanted:
            for command in self._commands:
                if command.COMMAND_WORD == wanted:
                    return self._describe(command)
            return [f"Unknown command: {wanted}"]

        messages = ["Available commands:"]
        for command in self._commands:
            messages.extend(self._describe(command))
        return messages

    @staticmethod
    def _describe(command: Command) -> list[str]:
        return [
            f"{command.COMMAND_WORD}: {command.COMMAND_DESCRIPTION}",
            f"    Usage: {command.COMMAND_GUIDE}",
        ]


class ByeCommand(Command):
    COMMAND_WORD = "bye"
    COMMAND_GUIDE = "bye"
    COMMAND_DESCRIPTION = "Exits the program"
    is_exit = True

    def run(self, arguments: dict[str, str]) -> list[str]:
        return [BYE_MESSAGE]
