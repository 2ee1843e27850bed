"""Tests for host provider registry and factory."""

import pytest

from credential_sapiens.config.settings import HelperSettings
from credential_sapiens.enums import HostProviderType
from credential_sapiens.exceptions import ProviderNotFoundError
from credential_sapiens.hosts import (
    GenericHostProvider,
    GitHubHostProvider,
    GitLabHostProvider,
    HostProviderRegistry,
    create_registry,
)
from credential_sapiens.input import InputArguments


class TestHostProviderRegistry:
    """Test provider resolution policy."""

    def test_first_supporting_provider_wins(self):
        """Registration order decides between overlapping providers."""
        github = GitHubHostProvider()
        generic = GenericHostProvider()
        registry = HostProviderRegistry([github, generic])

        provider = registry.get_provider(InputArguments(protocol="https", host="github.com"))

        assert provider is github

    def test_falls_through_to_later_provider(self):
        generic = GenericHostProvider()
        registry = HostProviderRegistry([GitHubHostProvider(), generic])

        assert registry.get_provider(InputArguments(protocol="https", host="example.com")) is generic

    def test_order_reversed_changes_winner(self):
        generic = GenericHostProvider()
        registry = HostProviderRegistry([generic, GitHubHostProvider()])

        assert registry.get_provider(InputArguments(protocol="https", host="github.com")) is generic

    def test_no_provider_raises(self):
        registry = HostProviderRegistry([GitHubHostProvider()])

        with pytest.raises(ProviderNotFoundError) as exc_info:
            registry.get_provider(InputArguments(protocol="https", host="example.com"))

        assert exc_info.value.host == "example.com"
        assert exc_info.value.protocol == "https"
        assert "https://example.com" in exc_info.value.message

    def test_empty_input_raises(self):
        with pytest.raises(ProviderNotFoundError, match="<no protocol>://<no host>"):
            HostProviderRegistry([GenericHostProvider()]).get_provider(InputArguments())

    def test_override_forces_provider(self):
        gitlab = GitLabHostProvider()
        registry = HostProviderRegistry([GitHubHostProvider(), gitlab], override="gitlab")

        assert registry.get_provider(InputArguments(protocol="https", host="github.com")) is gitlab

    @pytest.mark.parametrize(
        "input_args",
        [InputArguments(), InputArguments(protocol="https"), InputArguments(host="github.com")],
    )
    def test_override_requires_protocol_and_host(self, input_args):
        registry = HostProviderRegistry([GitHubHostProvider()], override="github")

        with pytest.raises(ProviderNotFoundError, match="No host provider available"):
            registry.get_provider(input_args)

    def test_override_not_registered_raises(self):
        registry = HostProviderRegistry([GitHubHostProvider()], override=HostProviderType.GITEA)

        with pytest.raises(ProviderNotFoundError, match="'gitea' is not registered"):
            registry.get_provider(InputArguments(protocol="https", host="github.com"))

    def test_register_appends(self):
        registry = HostProviderRegistry()
        github = GitHubHostProvider()

        registry.register(github)

        assert registry.providers == (github,)


class TestCreateRegistry:
    """Test registry construction from settings."""

    def test_default_order(self):
        registry = create_registry(HelperSettings())

        assert [p.id for p in registry.providers] == [
            HostProviderType.GITHUB,
            HostProviderType.GITLAB,
            HostProviderType.GITEA,
            HostProviderType.GENERIC,
        ]

    def test_generic_can_be_disabled(self):
        registry = create_registry(HelperSettings(allow_generic=False))

        with pytest.raises(ProviderNotFoundError):
            registry.get_provider(InputArguments(protocol="https", host="example.com"))

    def test_configured_hosts(self):
        registry = create_registry(HelperSettings(gitlab_hosts=["git.example.com"]))

        provider = registry.get_provider(InputArguments(protocol="https", host="git.example.com"))

        assert provider.id == HostProviderType.GITLAB

    def test_provider_override(self):
        registry = create_registry(HelperSettings(provider="generic"))

        provider = registry.get_provider(InputArguments(protocol="https", host="github.com"))

        assert provider.id == HostProviderType.GENERIC
