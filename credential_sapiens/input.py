"""Reader and writer for the git credential helper stdin/stdout protocol.

Git talks to a helper with ``key=value`` lines terminated by a blank line::

    protocol=https
    host=github.com
    username=octocat

Reading stops at the first blank line or at end of stream, so nothing after
the terminator is consumed. Lines without ``=`` are skipped and unknown keys
are kept aside without affecting the result.

Example:
    >>> import io
    >>> args = read_input(io.StringIO("protocol=https\\nhost=github.com\\n\\n"))
    >>> args.host
    'github.com'
    >>> args.username is None
    True
"""

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import IO
from urllib.parse import unquote, urlsplit

import structlog

log = structlog.get_logger(__name__)

KNOWN_KEYS = ("protocol", "host", "path", "username", "password")


@dataclass(frozen=True)
class InputArguments:
    """Partial description of the target credential supplied by git.

    Every field is optional. None means git did not send the key; an empty
    string means git sent the key with an empty value.

    Attributes:
        protocol: Transport protocol (e.g., 'https')
        host: Remote host, including a port if one was used
        path: Repository path, sent when credential.useHttpPath is set
        username: Identity to match or store
        password: Secret to match or store
        extra: Every other key received, last value wins
    """

    protocol: str | None = None
    host: str | None = None
    path: str | None = None
    username: str | None = None
    password: str | None = None
    extra: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def has_identity(self) -> bool:
        """Check whether a username or password was supplied."""
        return self.username is not None or self.password is not None

    @classmethod
    def from_dict(cls, values: Mapping[str, str]) -> "InputArguments":
        """Build input arguments from parsed key/value pairs.

        A ``url`` value fills protocol, host, path and username when those
        keys were not given explicitly.
        """
        known = {key: values[key] for key in KNOWN_KEYS if key in values}
        extra = {key: value for key, value in values.items() if key not in KNOWN_KEYS}
        args = cls(**known, extra=MappingProxyType(extra))

        if "url" in extra:
            args = args._merge_url(extra["url"])

        return args

    def _merge_url(self, url: str) -> "InputArguments":
        try:
            parts = urlsplit(url)
            hostname = parts.hostname or ""
            port = parts.port
        except ValueError as e:
            log.debug("input_url_ignored", reason=str(e))
            return self

        if not parts.scheme:
            log.debug("input_url_ignored", reason="no scheme")
            return self

        host = f"{hostname}:{port}" if port else hostname

        return replace(
            self,
            protocol=self.protocol if self.protocol is not None else parts.scheme,
            host=self.host if self.host is not None else (host or None),
            path=self.path if self.path is not None else (parts.path.lstrip("/") or None),
            username=(
                self.username
                if self.username is not None or parts.username is None
                else unquote(parts.username)
            ),
        )


def read_pairs(stream: IO[str]) -> dict[str, str]:
    """Read ``key=value`` lines up to the first blank line.

    Args:
        stream: Text stream positioned at the start of the payload

    Returns:
        Mapping of keys to values; later duplicates replace earlier ones
    """
    pairs: dict[str, str] = {}

    while True:
        line = stream.readline()
        if not line:
            break

        line = line.rstrip("\n").rstrip("\r")
        if not line:
            break

        key, sep, value = line.partition("=")
        if not sep:
            log.debug("input_line_skipped", reason="missing '='")
            continue

        pairs[key] = value

    return pairs


def read_input(stream: IO[str] | None) -> InputArguments:
    """Parse the helper stdin payload into input arguments.

    Args:
        stream: Text stream, or None when no input is available

    Returns:
        Parsed input arguments (all fields None for an empty stream)
    """
    if stream is None:
        return InputArguments()

    return InputArguments.from_dict(read_pairs(stream))


def write_output(stream: IO[str], values: Mapping[str, str | None]) -> None:
    """Write ``key=value`` lines for git, skipping None values.

    Args:
        stream: Text stream to write to
        values: Keys and values in output order
    """
    for key, value in values.items():
        if value is None:
            continue
        if "\n" in value or "\n" in key:
            raise ValueError(f"Credential attribute {key!r} must not contain a newline")
        stream.write(f"{key}={value}\n")
    stream.flush()
