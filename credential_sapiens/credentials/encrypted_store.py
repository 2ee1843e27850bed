"""Encrypted file store using Fernet symmetric encryption.

Security Model:
- Encryption key derived from a master password (PBKDF2-HMAC-SHA256)
- Credentials encrypted with Fernet (AES-128-CBC + HMAC)
- Salt stored next to the credentials file as ``credentials.salt``,
  written together with the first save
- Suitable for headless systems without keyring support
"""

import base64
import json
import secrets
from pathlib import Path
from typing import cast

import structlog
from cryptography.fernet import Fernet, InvalidToken
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from ..exceptions import EncryptionError
from .models import GitCredential

log = structlog.get_logger(__name__)

KDF_ITERATIONS = 480_000
SALT_FILENAME = "credentials.salt"


def derive_fernet(password: str, salt: bytes) -> Fernet:
    """Build a Fernet cipher keyed by PBKDF2-HMAC-SHA256 of the password."""
    kdf = PBKDF2HMAC(algorithm=hashes.SHA256(), length=32, salt=salt, iterations=KDF_ITERATIONS)
    return Fernet(base64.urlsafe_b64encode(kdf.derive(password.encode("utf-8"))))


class EncryptedFileCredentialStore:
    """Encrypted file-based credential store.

    The decrypted file content is a JSON object mapping storage keys to
    ``{"username": ..., "password": ...}``. Nothing is written to disk until
    a credential is saved, so lookups and erases of absent entries leave the
    config directory untouched.

    Security Considerations:
    - Master password must be protected
    - File permissions are restricted to 600 (user read/write only)
    - Vulnerable if master password is compromised

    Example:
        >>> store = EncryptedFileCredentialStore(
        ...     file_path=Path("~/.config/git-credential-sapiens/credentials.enc").expanduser(),
        ...     master_password="secure-password",
        ... )
        >>> store.add_or_update("git:https://github.com", GitCredential("octocat", "ghp_abc123"))
        >>> store.get("git:https://github.com").username
        'octocat'
    """

    def __init__(
        self,
        file_path: Path,
        master_password: str | None = None,
        salt: bytes | None = None,
    ) -> None:
        """Initialize encrypted file store.

        Args:
            file_path: Path to encrypted credentials file
            master_password: Password for encryption
            salt: Cryptographic salt (read from or written to
                ``credentials.salt`` on first use if not provided)
        """
        self.file_path = file_path
        self.salt_path = file_path.parent / SALT_FILENAME
        self._master_password = master_password
        self._salt = salt
        self._fernet: Fernet | None = None
        self._credentials_cache: dict[str, dict[str, str]] | None = None

    @property
    def name(self) -> str:
        """Get store identifier.

        Returns:
            Store name constant "encrypted"
        """
        return "encrypted"

    @property
    def salt(self) -> bytes | None:
        """Salt in use, or the persisted one; None until the first save."""
        if self._salt is None and self.salt_path.exists():
            self._salt = self.salt_path.read_bytes()
        return self._salt

    def _cipher(self, create_salt: bool = False) -> Fernet:
        if self._fernet is not None:
            return self._fernet

        if not self._master_password:
            raise EncryptionError(
                "Master password not provided",
                suggestion="Set SAPIENS_CREDENTIAL_MASTER_PASSWORD",
            )

        salt = self.salt
        if salt is None:
            if not create_salt:
                raise EncryptionError(
                    "Salt file is missing",
                    reference=str(self.salt_path),
                    suggestion="Restore credentials.salt from backup or delete and recreate the credentials file",
                )
            salt = self._write_salt()

        self._fernet = derive_fernet(self._master_password, salt)
        return self._fernet

    def _write_salt(self) -> bytes:
        salt = secrets.token_bytes(16)
        self.salt_path.parent.mkdir(parents=True, exist_ok=True)
        self.salt_path.write_bytes(salt)
        try:
            self.salt_path.chmod(0o600)
        except OSError as e:
            log.warning("salt_permissions_not_set", path=str(self.salt_path), error=str(e))

        self._salt = salt
        return salt

    def _load_credentials(self) -> dict[str, dict[str, str]]:
        """Load and decrypt credentials from file.

        Returns:
            Dictionary mapping storage key -> {"username", "password"}

        Raises:
            EncryptionError: If decryption fails
        """
        if self._credentials_cache is not None:
            return self._credentials_cache

        if not self.file_path.exists():
            self._credentials_cache = {}
            return self._credentials_cache

        cipher = self._cipher()
        try:
            credentials = cast(
                dict[str, dict[str, str]],
                json.loads(cipher.decrypt(self.file_path.read_bytes()).decode("utf-8")),
            )
        except InvalidToken as e:
            raise EncryptionError(
                "Invalid master password or corrupted credentials file",
                suggestion="Verify your master password",
            ) from e
        except json.JSONDecodeError as e:
            raise EncryptionError(
                "Credentials file is corrupted",
                suggestion="Restore from backup or delete and recreate",
            ) from e
        except OSError as e:
            raise EncryptionError(f"Failed to load credentials: {e}") from e

        self._credentials_cache = credentials
        return credentials

    def _save_credentials(self, credentials: dict[str, dict[str, str]]) -> None:
        """Encrypt and atomically replace the credentials file.

        Raises:
            EncryptionError: If encryption fails
        """
        temp_file = self.file_path.with_suffix(".tmp")

        try:
            cipher = self._cipher(create_salt=True)
            self.file_path.parent.mkdir(parents=True, exist_ok=True)
            temp_file.write_bytes(cipher.encrypt(json.dumps(credentials, indent=2).encode("utf-8")))
            try:
                temp_file.chmod(0o600)
            except OSError as e:
                log.warning("credentials_permissions_not_set", path=str(temp_file), error=str(e))
            temp_file.replace(self.file_path)
        except OSError as e:
            raise EncryptionError(f"Failed to save credentials: {e}") from e

        self._credentials_cache = credentials
        log.debug("credentials_saved", path=str(self.file_path))

    def get(self, key: str) -> GitCredential | None:
        """Retrieve credential from encrypted file.

        Raises:
            EncryptionError: If decryption fails
        """
        entry = self._load_credentials().get(key)
        if entry is None:
            return None

        log.debug("credential_read", store=self.name, key=key)
        return GitCredential(username=entry.get("username", ""), password=entry.get("password", ""))

    def add_or_update(self, key: str, credential: GitCredential) -> None:
        """Store credential in encrypted file.

        Raises:
            EncryptionError: If encryption fails
        """
        credentials = dict(self._load_credentials())
        credentials[key] = {"username": credential.username, "password": credential.password}

        self._save_credentials(credentials)
        log.info("credential_stored", store=self.name, key=key)

    def remove(self, key: str) -> bool:
        """Delete credential from encrypted file.

        Returns:
            True if deleted, False if not found

        Raises:
            EncryptionError: If file operations fail
        """
        credentials = self._load_credentials()

        if key not in credentials:
            return False

        remaining = {k: v for k, v in credentials.items() if k != key}
        self._save_credentials(remaining)
        log.info("credential_removed", store=self.name, key=key)
        return True
