"""Repository identity models"""
from enum import Enum
from dataclasses import dataclass


class ProviderKind(Enum):
    """Code hosting providers git-stacker knows how to talk to.

    The value is the prefix a remote host must start with to map to the provider.
    """
    GITHUB = "github"

    @property
    def display_name(self) -> str:
        return {ProviderKind.GITHUB: "GitHub"}[self]


@dataclass(frozen=True)
class RepositoryIdentity:
    """Owner and name of a repository on a code hosting provider."""
    provider: ProviderKind
    owner: str
    repo: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"

    def __str__(self) -> str:
        return f"{self.full_name} on {self.provider.display_name}"
