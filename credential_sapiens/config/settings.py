"""
Configuration system using Pydantic for type-safe settings management.

Settings come from, in increasing priority: defaults, ``SAPIENS_CREDENTIAL_*``
environment variables, and an optional YAML file passed with ``--config``.
"""

from __future__ import annotations

import os
import re
from pathlib import Path

import yaml
from pydantic import Field, SecretStr, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from credential_sapiens.enums import HostProviderType, StoreType
from credential_sapiens.exceptions import ConfigurationError

DEFAULT_CONFIG_DIR = Path("~/.config/git-credential-sapiens")

_ENV_VAR_PATTERN = re.compile(r"\$\{([A-Z_][A-Z0-9_]*)(?::-([^}]*))?\}")


class HelperSettings(BaseSettings):
    """Credential helper settings.

    Example:
        >>> settings = HelperSettings(store="memory", gitlab_hosts=["git.example.com"])
        >>> settings.store
        <StoreType.MEMORY: 'memory'>
    """

    model_config = SettingsConfigDict(
        env_prefix="SAPIENS_CREDENTIAL_",
        case_sensitive=False,
    )

    store: StoreType = Field(default=StoreType.KEYRING, description="Credential store backend")
    namespace: str = Field(default="git", description="Prefix of every storage key")
    provider: HostProviderType | None = Field(
        default=None, description="Force a host provider instead of auto-detecting"
    )
    allow_generic: bool = Field(default=True, description="Fall back to the generic provider for unknown hosts")
    github_hosts: list[str] = Field(default_factory=list, description="GitHub Enterprise hostnames")
    gitlab_hosts: list[str] = Field(default_factory=list, description="Self-managed GitLab hostnames")
    gitea_hosts: list[str] = Field(default_factory=list, description="Self-hosted Gitea/Forgejo hostnames")
    encrypted_file: Path = Field(
        default=DEFAULT_CONFIG_DIR / "credentials.enc",
        description="Location of the encrypted credentials file",
    )
    master_password: SecretStr | None = Field(default=None, description="Master password for the encrypted store")
    log_level: str = Field(default="WARNING", description="Minimum log level")

    @field_validator("namespace")
    @classmethod
    def validate_namespace(cls, v: str) -> str:
        """Ensure the namespace is a non-empty token without a colon."""
        v = v.strip()
        if not v or ":" in v:
            raise ValueError("namespace must be non-empty and must not contain ':'")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def encrypted_file_path(self) -> Path:
        """Encrypted file location with ``~`` expanded."""
        return self.encrypted_file.expanduser()

    @classmethod
    def from_yaml(cls, config_path: str | Path) -> HelperSettings:
        """Load settings from a YAML file.

        ``${VAR}`` and ``${VAR:-default}`` placeholders are replaced with
        environment variables before parsing; comment lines are left alone.

        Raises:
            ConfigurationError: If the file is missing, unreadable, not a
                YAML mapping, or holds invalid values
        """
        config_file = Path(config_path).expanduser()
        try:
            text = config_file.read_text()
        except FileNotFoundError as e:
            raise ConfigurationError(f"Configuration file not found: {config_path}") from e
        except OSError as e:
            raise ConfigurationError(f"Cannot read configuration file: {config_path}") from e

        try:
            data = yaml.safe_load(_interpolate_env_vars(text)) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML syntax in {config_path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError("Configuration must be a YAML object, not a list or scalar")

        try:
            return cls(**data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration in {config_path}: {e}") from e


def _interpolate_env_vars(text: str) -> str:
    def substitute(match: re.Match[str]) -> str:
        name, default = match.groups()
        value = os.environ.get(name, default)
        if value is None:
            raise ConfigurationError(f"Environment variable {name} is not set")
        return value

    return "".join(
        line if line.lstrip().startswith("#") else _ENV_VAR_PATTERN.sub(substitute, line)
        for line in text.splitlines(keepends=True)
    )
