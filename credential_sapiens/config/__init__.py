"""Configuration system for git-credential-sapiens.

Example:
    >>> from credential_sapiens.config import HelperSettings
    >>> settings = HelperSettings.from_yaml("~/.config/git-credential-sapiens/config.yaml")
    >>> settings.namespace
    'git'
"""

from credential_sapiens.config.settings import HelperSettings

__all__ = ["HelperSettings"]
