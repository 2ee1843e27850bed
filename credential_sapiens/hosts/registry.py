"""Host provider registry and selection policy."""

from collections.abc import Iterable

import structlog

from credential_sapiens.enums import HostProviderType
from credential_sapiens.exceptions import ProviderNotFoundError
from credential_sapiens.hosts.base import HostProvider
from credential_sapiens.input import InputArguments

log = structlog.get_logger(__name__)


class HostProviderRegistry:
    """Ordered collection of host providers with a single resolution function.

    Selection policy: providers are tried in registration order and the
    first one that supports the input wins. Register specific providers
    before catch-all ones such as the generic provider.

    Example:
        >>> registry = HostProviderRegistry([GitHubHostProvider(), GenericHostProvider()])
        >>> registry.get_provider(InputArguments(protocol="https", host="github.com")).name
        'GitHub'
    """

    def __init__(
        self,
        providers: Iterable[HostProvider] = (),
        override: HostProviderType | str | None = None,
    ) -> None:
        """Initialize registry.

        Args:
            providers: Providers in resolution order
            override: Provider id that is always selected when set
        """
        self._providers: list[HostProvider] = list(providers)
        self.override = HostProviderType(override) if override else None

    @property
    def providers(self) -> tuple[HostProvider, ...]:
        """Registered providers in resolution order."""
        return tuple(self._providers)

    def register(self, *providers: HostProvider) -> None:
        """Append providers to the end of the resolution order."""
        self._providers.extend(providers)

    def get_provider(self, input_args: InputArguments) -> HostProvider:
        """Select the host provider for the given input.

        Args:
            input_args: Input received from git

        Returns:
            The forced provider if an override is set, otherwise the first
            registered provider that supports the input

        Raises:
            ProviderNotFoundError: If no provider applies. A forced provider
                still requires a protocol and a host.
        """
        if self.override is not None:
            if not input_args.protocol or not input_args.host:
                raise self._not_found(input_args)
            return self._get_override()

        for provider in self._providers:
            if provider.is_supported(input_args):
                log.debug(
                    "host_provider_selected",
                    provider=provider.id.value,
                    protocol=input_args.protocol,
                    host=input_args.host,
                )
                return provider

        raise self._not_found(input_args)

    @staticmethod
    def _not_found(input_args: InputArguments) -> ProviderNotFoundError:
        return ProviderNotFoundError(
            f"No host provider available for "
            f"'{input_args.protocol or '<no protocol>'}://{input_args.host or '<no host>'}'",
            protocol=input_args.protocol,
            host=input_args.host,
        )

    def _get_override(self) -> HostProvider:
        for provider in self._providers:
            if provider.id == self.override:
                log.debug("host_provider_forced", provider=provider.id.value)
                return provider

        raise ProviderNotFoundError(f"Configured host provider '{self.override.value}' is not registered")
