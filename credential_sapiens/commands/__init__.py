"""Helper commands and verb dispatch.

Example:
    >>> commands = create_commands(registry)
    >>> command = select_command(commands, ["erase"])
    >>> await command.execute(context, ["erase"])
"""

from collections.abc import Sequence

from credential_sapiens.commands.base import HelperCommand
from credential_sapiens.commands.context import CommandContext
from credential_sapiens.commands.erase import EraseCommand
from credential_sapiens.commands.get import GetCommand
from credential_sapiens.commands.store import StoreCommand
from credential_sapiens.exceptions import UnknownCommandError
from credential_sapiens.hosts.registry import HostProviderRegistry


def create_commands(registry: HostProviderRegistry) -> list[HelperCommand]:
    """Create one instance of every helper command."""
    return [GetCommand(registry), StoreCommand(registry), EraseCommand(registry)]


def select_command(commands: Sequence[HelperCommand], args: Sequence[str] | None) -> HelperCommand:
    """Return the first command that accepts the tokens.

    Raises:
        UnknownCommandError: If no command accepts them
    """
    for command in commands:
        if command.can_execute(args):
            return command
    raise UnknownCommandError(args[0] if args else None)


__all__ = [
    "CommandContext",
    "HelperCommand",
    "GetCommand",
    "StoreCommand",
    "EraseCommand",
    "create_commands",
    "select_command",
]
