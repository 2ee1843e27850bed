"""Custom exception hierarchy for the git-credential-sapiens helper.

Exception Hierarchy:
    CredentialHelperError (base)
    ├── ConfigurationError
    ├── CredentialError
    │   ├── BackendNotAvailableError
    │   └── EncryptionError
    ├── ProviderNotFoundError
    └── UnknownCommandError

Only errors that make an invocation impossible are raised. A credential that
is absent, or that belongs to a different identity, is not an error.

Example Usage:
    >>> from credential_sapiens.exceptions import ProviderNotFoundError
    >>> try:
    ...     provider = registry.get_provider(input_args)
    ... except ProviderNotFoundError as e:
    ...     click.echo(f"Error: {e.message}", err=True)
"""


class CredentialHelperError(Exception):
    """Base exception for all credential helper errors.

    Attributes:
        message: Human-readable error description
    """

    def __init__(self, message: str) -> None:
        """Initialize exception.

        Args:
            message: Error message
        """
        self.message = message
        super().__init__(message)


class ConfigurationError(CredentialHelperError):
    """Configuration-related errors.

    Examples:
        - Configuration file not found
        - Invalid YAML syntax
        - Unknown store backend
    """

    pass


class CredentialError(CredentialHelperError):
    """Credential store errors.

    Attributes:
        message: Human-readable error description
        reference: The storage key that failed (e.g., "git:https://github.com")
        suggestion: Optional suggestion for resolution
    """

    def __init__(
        self,
        message: str,
        reference: str | None = None,
        suggestion: str | None = None,
    ) -> None:
        """Initialize exception.

        Args:
            message: Error message
            reference: The storage key that failed
            suggestion: Optional suggestion for resolution
        """
        self.reference = reference
        self.suggestion = suggestion

        full_message = message
        if reference:
            full_message = f"{message} (reference: {reference})"
        if suggestion:
            full_message = f"{full_message}\nSuggestion: {suggestion}"

        super().__init__(full_message)
        # Preserve original message (super sets self.message to full_message)
        self.message = message


class BackendNotAvailableError(CredentialError):
    """Requested store backend is not available on this system."""

    pass


class EncryptionError(CredentialError):
    """Encryption or decryption operation failed."""

    pass


class ProviderNotFoundError(CredentialHelperError):
    """No host provider recognizes the input.

    Raised by the host provider registry. Fatal to the current invocation,
    since there is no storage key to act on.

    Attributes:
        message: Human-readable error description
        protocol: Protocol from the input, if any
        host: Host from the input, if any
    """

    def __init__(
        self,
        message: str,
        protocol: str | None = None,
        host: str | None = None,
    ) -> None:
        self.protocol = protocol
        self.host = host
        super().__init__(message)


class UnknownCommandError(CredentialHelperError):
    """No command accepts the given command-line tokens."""

    def __init__(self, verb: str | None) -> None:
        self.verb = verb
        if verb:
            message = f"Unknown command: {verb}"
        else:
            message = "No command given"
        super().__init__(message)
