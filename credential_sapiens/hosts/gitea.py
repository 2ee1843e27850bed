"""Gitea host provider."""

from credential_sapiens.enums import HostProviderType
from credential_sapiens.hosts.base import HostnameProvider


class GiteaHostProvider(HostnameProvider):
    """Host provider for Gitea and Forgejo instances.

    Self-hosted Gitea cannot be recognized from the hostname alone, so
    instances other than the public ones must be listed in ``gitea_hosts``.
    """

    DEFAULT_HOSTS = ("gitea.com", "codeberg.org")

    @property
    def id(self) -> HostProviderType:
        return HostProviderType.GITEA

    @property
    def name(self) -> str:
        return "Gitea"
