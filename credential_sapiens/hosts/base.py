"""
Abstract base class for host providers.

A host provider knows one class of remote host (GitHub, GitLab, Gitea, or
any host at all) and turns git's input into the storage key under which
the credential for that host is saved.
"""

from abc import ABC, abstractmethod

from credential_sapiens.enums import HostProviderType
from credential_sapiens.input import InputArguments


class HostProvider(ABC):
    """Abstract base class for host provider implementations.

    Implementations must return the same key for the same logical target on
    every invocation, since the key is the only link between a stored
    credential and later ``get`` and ``erase`` calls.
    """

    @property
    @abstractmethod
    def id(self) -> HostProviderType:
        """Stable identifier used to force this provider from configuration."""
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable provider name."""
        pass

    @abstractmethod
    def is_supported(self, input_args: InputArguments) -> bool:
        """Check whether this provider handles the given input.

        Args:
            input_args: Input received from git

        Returns:
            True if the provider can produce a credential key for the input
        """
        pass

    @abstractmethod
    def get_credential_key(self, input_args: InputArguments) -> str:
        """Return the provider-specific part of the storage key.

        The caller adds the store namespace prefix (``git:``).

        Args:
            input_args: Input this provider reported as supported

        Returns:
            Discriminator identifying host and account scope
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id.value!r})"


class HostnameProvider(HostProvider):
    """Base for providers that recognize a fixed set of hostnames.

    Credentials are scoped to the whole host, so the key is
    ``https://<host>`` regardless of the repository path.
    """

    SUPPORTED_PROTOCOLS = ("http", "https")
    DEFAULT_HOSTS: tuple[str, ...] = ()

    def __init__(self, extra_hosts: list[str] | None = None) -> None:
        """Initialize provider.

        Args:
            extra_hosts: Additional self-hosted hostnames to recognize
        """
        self.hosts = frozenset(
            host.lower() for host in (*self.DEFAULT_HOSTS, *(extra_hosts or [])) if host
        )

    def is_supported(self, input_args: InputArguments) -> bool:
        if not input_args.protocol or not input_args.host:
            return False

        if input_args.protocol.lower() not in self.SUPPORTED_PROTOCOLS:
            return False

        return self._matches_host(input_args.host.lower())

    def _matches_host(self, host: str) -> bool:
        return host in self.hosts or _strip_port(host) in self.hosts

    def get_credential_key(self, input_args: InputArguments) -> str:
        host = (input_args.host or "").lower()
        return f"https://{host}"


def _strip_port(host: str) -> str:
    name, _, port = host.rpartition(":")
    if name and port.isdigit():
        return name
    return host
