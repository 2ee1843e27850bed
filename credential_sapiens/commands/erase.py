"""The ``erase`` command: remove a saved credential.

Git calls ``erase`` when a credential was rejected by the remote. Erasing
is safe to call speculatively: an absent credential, or one saved for a
different identity than the one git supplied, is left alone without
raising. Only a missing host provider fails the invocation.

The lookup and the removal are two separate store operations. Another
helper process storing a new credential between them can have that new
credential removed; stores that need stronger guarantees must lock
themselves.
"""

from collections.abc import Sequence

import structlog

from credential_sapiens.commands.base import HelperCommand
from credential_sapiens.commands.context import CommandContext
from credential_sapiens.credentials.models import GitCredential
from credential_sapiens.enums import CommandVerb
from credential_sapiens.input import InputArguments

log = structlog.get_logger(__name__)


class EraseCommand(HelperCommand):
    """Erase the credential for the host described by git's input.

    When git supplies a username and/or password, each supplied field must
    equal the stored one exactly (case-sensitive) or nothing is erased.

    Example:
        >>> command = EraseCommand(registry)
        >>> command.can_execute(["ERASE"])
        True
        >>> await command.execute(context, ["erase"])
    """

    verb = CommandVerb.ERASE

    async def execute(self, context: CommandContext, args: Sequence[str]) -> None:
        input_args = self.read_input(context)

        provider = self.registry.get_provider(input_args)
        key = self.get_credential_key(context, provider, input_args)

        stored = context.credential_store.get(key)
        if stored is None:
            log.info("credential_not_found", key=key)
            return

        if input_args.has_identity and not _matches(input_args, stored):
            log.info("credential_identity_mismatch", key=key)
            return

        context.credential_store.remove(key)
        log.info("credential_erased", key=key, provider=provider.id.value)


def _matches(input_args: InputArguments, stored: GitCredential) -> bool:
    """Compare the supplied identity fields with a stored credential."""
    if input_args.username is not None and input_args.username != stored.username:
        return False
    if input_args.password is not None and input_args.password != stored.password:
        return False
    return True
