"""Execution context shared by helper commands."""

import sys
from dataclasses import dataclass, field
from typing import IO

from credential_sapiens.config.settings import HelperSettings
from credential_sapiens.credentials.store import CredentialStore


@dataclass
class CommandContext:
    """Everything a command needs from the outside world for one invocation.

    Attributes:
        credential_store: Store to read, write and remove credentials
        stdin: Stream carrying git's ``key=value`` input
        stdout: Stream for the ``get`` response to git
        settings: Helper settings
    """

    credential_store: CredentialStore
    stdin: IO[str] | None = field(default_factory=lambda: sys.stdin)
    stdout: IO[str] = field(default_factory=lambda: sys.stdout)
    settings: HelperSettings = field(default_factory=HelperSettings)
