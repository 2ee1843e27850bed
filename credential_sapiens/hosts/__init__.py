"""Host providers: map git's input to credential storage keys.

Example:
    >>> from credential_sapiens.hosts import create_registry
    >>> from credential_sapiens.input import InputArguments
    >>> registry = create_registry()
    >>> provider = registry.get_provider(InputArguments(protocol="https", host="gitlab.com"))
    >>> provider.get_credential_key(InputArguments(protocol="https", host="gitlab.com"))
    'https://gitlab.com'
"""

from credential_sapiens.hosts.base import HostnameProvider, HostProvider
from credential_sapiens.hosts.factory import create_registry
from credential_sapiens.hosts.generic import GenericHostProvider
from credential_sapiens.hosts.gitea import GiteaHostProvider
from credential_sapiens.hosts.github import GitHubHostProvider
from credential_sapiens.hosts.gitlab import GitLabHostProvider
from credential_sapiens.hosts.registry import HostProviderRegistry

__all__ = [
    "HostProvider",
    "HostnameProvider",
    "HostProviderRegistry",
    "GitHubHostProvider",
    "GitLabHostProvider",
    "GiteaHostProvider",
    "GenericHostProvider",
    "create_registry",
]
