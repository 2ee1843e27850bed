"""Fallback host provider for any remote."""

from credential_sapiens.enums import HostProviderType
from credential_sapiens.hosts.base import HostProvider
from credential_sapiens.input import InputArguments


class GenericHostProvider(HostProvider):
    """Host provider that accepts any input with a protocol and a host.

    The key is ``<protocol>://<host>`` with ``/<path>`` appended when git
    sent a path (``credential.useHttpPath``), so per-repository credentials
    on the same host stay separate.

    Example:
        >>> provider = GenericHostProvider()
        >>> provider.get_credential_key(InputArguments(protocol="https", host="example.com", path="org/repo.git"))
        'https://example.com/org/repo.git'
    """

    @property
    def id(self) -> HostProviderType:
        return HostProviderType.GENERIC

    @property
    def name(self) -> str:
        return "Generic"

    def is_supported(self, input_args: InputArguments) -> bool:
        return bool(input_args.protocol) and bool(input_args.host)

    def get_credential_key(self, input_args: InputArguments) -> str:
        protocol = (input_args.protocol or "").lower()
        host = (input_args.host or "").lower()
        key = f"{protocol}://{host}"

        if input_args.path:
            key = f"{key}/{input_args.path.lstrip('/')}"

        return key
