"""Enumerations for git-credential-sapiens commands, providers and stores."""

from enum import Enum


class CommandVerb(str, Enum):
    """Actions git asks a credential helper to perform.

    The verb is the first command-line token and is matched
    case-insensitively.
    """

    GET = "get"
    STORE = "store"
    ERASE = "erase"

    def __str__(self) -> str:
        return self.value

    def matches(self, token: str | None) -> bool:
        """Check whether a command-line token selects this verb."""
        if not token:
            return False
        return token.lower() == self.value


class HostProviderType(str, Enum):
    """Identifiers of the built-in host providers.

    - github: github.com, gist.github.com and GitHub Enterprise hosts
    - gitlab: gitlab.com and self-managed GitLab hosts
    - gitea: gitea.com, codeberg.org and self-hosted Gitea/Forgejo
    - generic: any host, keyed by protocol, host and optional path
    """

    GITHUB = "github"
    GITLAB = "gitlab"
    GITEA = "gitea"
    GENERIC = "generic"

    def __str__(self) -> str:
        return self.value


class StoreType(str, Enum):
    """Credential store backends."""

    KEYRING = "keyring"
    ENCRYPTED = "encrypted"
    MEMORY = "memory"

    def __str__(self) -> str:
        return self.value
