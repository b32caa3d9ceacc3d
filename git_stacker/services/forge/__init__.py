"""Code hosting providers."""

from git_stacker.models.repository import ProviderKind

from .base import ForgeProvider, PROVIDERS, provider_factory, register_provider
from .github import GitHubProvider

register_provider(ProviderKind.GITHUB, GitHubProvider)

__all__ = [
    "ForgeProvider",
    "GitHubProvider",
    "PROVIDERS",
    "provider_factory",
    "register_provider",
]
