"""GitLab host provider."""

from credential_sapiens.enums import HostProviderType
from credential_sapiens.hosts.base import HostnameProvider


class GitLabHostProvider(HostnameProvider):
    """Host provider for gitlab.com and self-managed GitLab instances."""

    DEFAULT_HOSTS = ("gitlab.com",)

    @property
    def id(self) -> HostProviderType:
        return HostProviderType.GITLAB

    @property
    def name(self) -> str:
        return "GitLab"
