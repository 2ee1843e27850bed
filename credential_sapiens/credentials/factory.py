"""Create the configured credential store."""

from credential_sapiens.config.settings import HelperSettings
from credential_sapiens.credentials.encrypted_store import EncryptedFileCredentialStore
from credential_sapiens.credentials.keyring_store import KeyringCredentialStore
from credential_sapiens.credentials.store import CredentialStore, InMemoryCredentialStore
from credential_sapiens.enums import StoreType
from credential_sapiens.exceptions import ConfigurationError


def create_credential_store(settings: HelperSettings) -> CredentialStore:
    """Create the store selected by ``settings.store``.

    Args:
        settings: Helper settings

    Returns:
        Credential store instance

    Raises:
        ConfigurationError: If the encrypted store is selected without a
            master password
    """
    if settings.store == StoreType.KEYRING:
        return KeyringCredentialStore()

    if settings.store == StoreType.ENCRYPTED:
        if settings.master_password is None:
            raise ConfigurationError(
                "The encrypted store requires a master password "
                "(set SAPIENS_CREDENTIAL_MASTER_PASSWORD)"
            )
        return EncryptedFileCredentialStore(
            file_path=settings.encrypted_file_path,
            master_password=settings.master_password.get_secret_value(),
        )

    return InMemoryCredentialStore()
