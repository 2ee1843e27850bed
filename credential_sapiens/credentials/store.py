"""Credential store protocol and the in-memory store."""

from collections.abc import Iterator
from typing import Protocol

import structlog

from .models import GitCredential

log = structlog.get_logger(__name__)


class CredentialStore(Protocol):
    """Interface of a persistent mapping from storage key to credential.

    Keys are issued by host providers (``"git:https://github.com"``). A
    missing key means no credential is saved for that target, which is
    different from a saved credential with an empty username.

    Stores are shared between concurrent git processes. Implementations
    that need mutual exclusion must provide it themselves; callers perform
    get-then-remove sequences that are not atomic.
    """

    @property
    def name(self) -> str:
        """Store identifier (e.g., 'keyring', 'memory')."""
        ...

    def get(self, key: str) -> GitCredential | None:
        """Retrieve the credential saved under a key.

        Args:
            key: Storage key

        Returns:
            The credential, or None if nothing is saved under the key

        Raises:
            BackendNotAvailableError: If the store is not available
        """
        ...

    def add_or_update(self, key: str, credential: GitCredential) -> None:
        """Save a credential, replacing any existing one under the key.

        Raises:
            BackendNotAvailableError: If the store is not available
        """
        ...

    def remove(self, key: str) -> bool:
        """Remove the credential saved under a key.

        Returns:
            True if a credential was removed, False if none was saved

        Raises:
            BackendNotAvailableError: If the store is not available
        """
        ...


class InMemoryCredentialStore:
    """Dict-backed store that lives for the duration of the process.

    Useful for tests and for running the helper without persistence.
    Supports ``len()``, ``in`` and item access for inspection.

    Example:
        >>> store = InMemoryCredentialStore()
        >>> store["git:https://github.com"] = GitCredential("octocat", "ghp_x")
        >>> store.remove("git:https://github.com")
        True
        >>> len(store)
        0
    """

    def __init__(self, credentials: dict[str, GitCredential] | None = None) -> None:
        self._credentials: dict[str, GitCredential] = dict(credentials or {})

    @property
    def name(self) -> str:
        return "memory"

    def get(self, key: str) -> GitCredential | None:
        return self._credentials.get(key)

    def add_or_update(self, key: str, credential: GitCredential) -> None:
        self._credentials[key] = credential
        log.debug("credential_stored", store=self.name, key=key)

    def remove(self, key: str) -> bool:
        if key not in self._credentials:
            return False
        del self._credentials[key]
        log.debug("credential_removed", store=self.name, key=key)
        return True

    def __len__(self) -> int:
        return len(self._credentials)

    def __contains__(self, key: object) -> bool:
        return key in self._credentials

    def __getitem__(self, key: str) -> GitCredential:
        return self._credentials[key]

    def __setitem__(self, key: str, credential: GitCredential) -> None:
        self.add_or_update(key, credential)

    def __iter__(self) -> Iterator[str]:
        return iter(self._credentials)
