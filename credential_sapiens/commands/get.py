"""The ``get`` command: return a saved credential to git."""

from collections.abc import Sequence

import structlog

from credential_sapiens.commands.base import HelperCommand
from credential_sapiens.commands.context import CommandContext
from credential_sapiens.enums import CommandVerb
from credential_sapiens.input import write_output

log = structlog.get_logger(__name__)


class GetCommand(HelperCommand):
    """Write the saved credential for the requested host to stdout.

    Nothing is written when no credential is saved, or when git asked for
    a specific username that differs from the saved one. Git then falls
    back to the next helper or prompts the user.
    """

    verb = CommandVerb.GET

    async def execute(self, context: CommandContext, args: Sequence[str]) -> None:
        input_args = self.read_input(context)

        provider = self.registry.get_provider(input_args)
        key = self.get_credential_key(context, provider, input_args)

        stored = context.credential_store.get(key)
        if stored is None:
            log.info("credential_not_found", key=key)
            return

        if input_args.username is not None and input_args.username != stored.username:
            log.info("credential_identity_mismatch", key=key)
            return

        write_output(
            context.stdout,
            {
                "protocol": input_args.protocol,
                "host": input_args.host,
                "path": input_args.path,
                "username": stored.username,
                "password": stored.password,
            },
        )
        log.info("credential_returned", key=key, provider=provider.id.value)
