"""Pytest configuration and shared fixtures."""

import io

import pytest

from credential_sapiens.commands.context import CommandContext
from credential_sapiens.config.settings import HelperSettings
from credential_sapiens.credentials import InMemoryCredentialStore
from credential_sapiens.enums import HostProviderType, StoreType
from credential_sapiens.hosts.base import HostProvider
from credential_sapiens.hosts.registry import HostProviderRegistry
from credential_sapiens.input import InputArguments


class StubHostProvider(HostProvider):
    """Host provider returning a fixed key, for command tests."""

    def __init__(self, credential_key: str = "test-cred-key", supported: bool = True) -> None:
        self.credential_key = credential_key
        self.supported = supported
        self.seen_inputs: list[InputArguments] = []

    @property
    def id(self) -> HostProviderType:
        return HostProviderType.GENERIC

    @property
    def name(self) -> str:
        return "Stub"

    def is_supported(self, input_args: InputArguments) -> bool:
        self.seen_inputs.append(input_args)
        return self.supported

    def get_credential_key(self, input_args: InputArguments) -> str:
        return self.credential_key


@pytest.fixture
def settings() -> HelperSettings:
    """Settings using the in-memory store and the default namespace."""
    return HelperSettings(store=StoreType.MEMORY, namespace="git")


@pytest.fixture
def stub_provider() -> StubHostProvider:
    """Provider that always applies and returns 'test-cred-key'."""
    return StubHostProvider()


@pytest.fixture
def registry(stub_provider: StubHostProvider) -> HostProviderRegistry:
    """Registry holding only the stub provider."""
    return HostProviderRegistry([stub_provider])


@pytest.fixture
def credential_store() -> InMemoryCredentialStore:
    """Empty in-memory credential store."""
    return InMemoryCredentialStore()


@pytest.fixture
def make_context(credential_store: InMemoryCredentialStore, settings: HelperSettings):
    """Factory fixture building a command context around the shared store."""

    def _make(stdin: str = "") -> CommandContext:
        return CommandContext(
            credential_store=credential_store,
            stdin=io.StringIO(stdin),
            stdout=io.StringIO(),
            settings=settings,
        )

    return _make
