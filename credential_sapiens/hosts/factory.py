"""Build the host provider registry from settings."""

from credential_sapiens.config.settings import HelperSettings
from credential_sapiens.hosts.generic import GenericHostProvider
from credential_sapiens.hosts.gitea import GiteaHostProvider
from credential_sapiens.hosts.github import GitHubHostProvider
from credential_sapiens.hosts.gitlab import GitLabHostProvider
from credential_sapiens.hosts.registry import HostProviderRegistry


def create_registry(settings: HelperSettings | None = None) -> HostProviderRegistry:
    """Create a registry with the built-in providers.

    Specific providers come first; the generic provider is registered last
    so that it only handles hosts nobody else claims.

    Args:
        settings: Helper settings (defaults used when None)

    Returns:
        Registry in resolution order
    """
    settings = settings or HelperSettings()

    registry = HostProviderRegistry(override=settings.provider)
    registry.register(
        GitHubHostProvider(settings.github_hosts),
        GitLabHostProvider(settings.gitlab_hosts),
        GiteaHostProvider(settings.gitea_hosts),
    )

    if settings.allow_generic:
        registry.register(GenericHostProvider())

    return registry
