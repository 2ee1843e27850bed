"""Credential storage for git-credential-sapiens.

Three store backends are provided:
    - keyring: OS-level secure credential storage (default)
    - encrypted: Fernet-encrypted file for headless systems
    - memory: process-local dict, used by tests
"""

from credential_sapiens.credentials.encrypted_store import EncryptedFileCredentialStore
from credential_sapiens.credentials.keyring_store import KeyringCredentialStore
from credential_sapiens.credentials.models import GitCredential
from credential_sapiens.credentials.store import CredentialStore, InMemoryCredentialStore
from credential_sapiens.exceptions import (
    BackendNotAvailableError,
    CredentialError,
    EncryptionError,
)

__all__ = [
    "GitCredential",
    "CredentialStore",
    "InMemoryCredentialStore",
    "KeyringCredentialStore",
    "EncryptedFileCredentialStore",
    "CredentialError",
    "BackendNotAvailableError",
    "EncryptionError",
]
