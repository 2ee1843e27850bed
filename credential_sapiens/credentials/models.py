"""Credential data model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class GitCredential:
    """A saved identity and secret for one remote host.

    Instances are immutable. Updating a stored credential replaces the
    whole value.

    Attributes:
        username: Account identity (may be empty)
        password: Secret (password or token)
    """

    username: str
    password: str

    def __repr__(self) -> str:
        return f"GitCredential(username={self.username!r}, password='***')"
