"""
Abstract base class for helper commands.

Git runs the helper with one action verb (``get``, ``store``, ``erase``).
Each command owns one verb and reports through ``can_execute`` whether a
token sequence is addressed to it.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from credential_sapiens.commands.context import CommandContext
from credential_sapiens.enums import CommandVerb
from credential_sapiens.hosts.base import HostProvider
from credential_sapiens.hosts.registry import HostProviderRegistry
from credential_sapiens.input import InputArguments, read_input


class HelperCommand(ABC):
    """Base class for credential helper commands.

    Subclasses set ``verb`` and implement ``execute``.

    Attributes:
        verb: Action verb this command answers to
        registry: Host provider registry used to resolve storage keys
    """

    verb: CommandVerb

    def __init__(self, registry: HostProviderRegistry) -> None:
        self.registry = registry

    def can_execute(self, args: Sequence[str] | None) -> bool:
        """Check whether the command-line tokens select this command.

        Args:
            args: Command-line tokens after the program name

        Returns:
            True iff the first token equals the verb, ignoring case
        """
        if not args:
            return False
        return self.verb.matches(args[0])

    @abstractmethod
    async def execute(self, context: CommandContext, args: Sequence[str]) -> None:
        """Run the command.

        The verb is not re-validated; callers check ``can_execute`` first.

        Args:
            context: Execution context for this invocation
            args: Command-line tokens
        """
        pass

    def read_input(self, context: CommandContext) -> InputArguments:
        """Parse git's input from the context's stdin."""
        return read_input(context.stdin)

    def get_credential_key(
        self,
        context: CommandContext,
        provider: HostProvider,
        input_args: InputArguments,
    ) -> str:
        """Build the full storage key: ``<namespace>:<provider key>``."""
        return f"{context.settings.namespace}:{provider.get_credential_key(input_args)}"
