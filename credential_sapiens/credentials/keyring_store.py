"""OS-level keyring store using system credential stores.

Platform Support:
- Linux: Secret Service API (GNOME Keyring, KWallet)
- macOS: Keychain
- Windows: Windows Credential Locker

The storage key becomes the keyring service name and the credential
username becomes the keyring account, so entries show up in the OS
credential manager as ``git:https://github.com`` / ``octocat``.
"""

import keyring
import structlog
from keyring.backends.fail import Keyring as FailKeyring
from keyring.errors import KeyringError, PasswordDeleteError

from ..exceptions import BackendNotAvailableError, CredentialError
from .models import GitCredential

log = structlog.get_logger(__name__)


class KeyringCredentialStore:
    """Credential store backed by the system keyring.

    This is the default store for developer machines as it:
    - Integrates with OS security features
    - Supports biometric unlock (Touch ID, Windows Hello)
    - Provides automatic encryption

    Example:
        >>> store = KeyringCredentialStore()
        >>> store.add_or_update("git:https://github.com", GitCredential("octocat", "ghp_abc123"))
        >>> store.get("git:https://github.com")
        GitCredential(username='octocat', password='***')
        >>> store.remove("git:https://github.com")
        True
    """

    @property
    def name(self) -> str:
        """Get store identifier.

        Returns:
            Store name constant "keyring"
        """
        return "keyring"

    @property
    def available(self) -> bool:
        """Check if a usable keyring backend is configured.

        Returns False on headless systems where keyring falls back to its
        failing backend, or when the backend fails to initialize.
        """
        try:
            backend = keyring.get_keyring()
        except Exception as e:
            log.debug("keyring_unavailable", error=str(e))
            return False
        return not isinstance(backend, FailKeyring)

    def _ensure_available(self) -> None:
        if not self.available:
            raise BackendNotAvailableError(
                "Keyring backend is not available",
                suggestion="Install a keyring backend or set SAPIENS_CREDENTIAL_STORE=encrypted",
            )

    def get(self, key: str) -> GitCredential | None:
        """Retrieve credential from OS keyring.

        Args:
            key: Storage key, used as the keyring service name

        Returns:
            Credential or None if not found

        Raises:
            BackendNotAvailableError: If keyring is not available
            CredentialError: If keyring operation fails
        """
        self._ensure_available()

        try:
            entry = keyring.get_credential(key, None)
        except KeyringError as e:
            raise CredentialError(f"Keyring operation failed: {e}", reference=key) from e

        if entry is None:
            return None

        log.debug("credential_read", store=self.name, key=key)
        return GitCredential(username=entry.username or "", password=entry.password)

    def add_or_update(self, key: str, credential: GitCredential) -> None:
        """Store credential in OS keyring.

        An existing entry for a different account under the same key is
        removed so that each key holds exactly one credential.

        Raises:
            BackendNotAvailableError: If keyring is not available
            CredentialError: If keyring operation fails
        """
        self._ensure_available()

        try:
            existing = keyring.get_credential(key, None)
            if existing is not None and (existing.username or "") != credential.username:
                keyring.delete_password(key, existing.username)
            keyring.set_password(key, credential.username, credential.password)
        except KeyringError as e:
            raise CredentialError(f"Failed to store credential: {e}", reference=key) from e

        log.info("credential_stored", store=self.name, key=key)

    def remove(self, key: str) -> bool:
        """Delete credential from OS keyring.

        Returns:
            True if deleted, False if not found

        Raises:
            BackendNotAvailableError: If keyring is not available
            CredentialError: If keyring operation fails
        """
        self._ensure_available()

        try:
            existing = keyring.get_credential(key, None)
            if existing is None:
                return False
            keyring.delete_password(key, existing.username)

        except PasswordDeleteError:
            # Credential doesn't exist - not an error
            return False

        except KeyringError as e:
            raise CredentialError(f"Failed to delete credential: {e}", reference=key) from e

        log.info("credential_removed", store=self.name, key=key)
        return True
