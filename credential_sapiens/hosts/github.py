"""GitHub host provider."""

from credential_sapiens.enums import HostProviderType
from credential_sapiens.hosts.base import HostnameProvider
from credential_sapiens.input import InputArguments


class GitHubHostProvider(HostnameProvider):
    """Host provider for github.com, gists and GitHub Enterprise Server.

    Subdomains of github.com (``gist.github.com``) share the github.com
    account, so they resolve to the same key.
    """

    DEFAULT_HOSTS = ("github.com",)

    @property
    def id(self) -> HostProviderType:
        return HostProviderType.GITHUB

    @property
    def name(self) -> str:
        return "GitHub"

    def _matches_host(self, host: str) -> bool:
        if host.endswith(".github.com"):
            return True
        return super()._matches_host(host)

    def get_credential_key(self, input_args: InputArguments) -> str:
        host = (input_args.host or "").lower()
        if host.endswith(".github.com"):
            host = "github.com"
        return f"https://{host}"
