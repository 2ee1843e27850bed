"""The ``store`` command: save a credential git has used successfully."""

from collections.abc import Sequence

import structlog

from credential_sapiens.commands.base import HelperCommand
from credential_sapiens.commands.context import CommandContext
from credential_sapiens.credentials.models import GitCredential
from credential_sapiens.enums import CommandVerb

log = structlog.get_logger(__name__)


class StoreCommand(HelperCommand):
    """Save the username and password from git's input.

    Input without both a username and a password is ignored, since git may
    call ``store`` with incomplete data after other helpers answered.
    """

    verb = CommandVerb.STORE

    async def execute(self, context: CommandContext, args: Sequence[str]) -> None:
        input_args = self.read_input(context)

        if input_args.username is None or input_args.password is None:
            log.info("credential_incomplete", has_username=input_args.username is not None)
            return

        provider = self.registry.get_provider(input_args)
        key = self.get_credential_key(context, provider, input_args)

        context.credential_store.add_or_update(
            key, GitCredential(username=input_args.username, password=input_args.password)
        )
        log.info("credential_saved", key=key, provider=provider.id.value)
