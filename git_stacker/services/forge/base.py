"""Code hosting provider interface and registry."""

from abc import ABC, abstractmethod
from typing import Callable, Dict, TYPE_CHECKING

from git_stacker.exceptions import UnsupportedProviderError
from git_stacker.models.repository import ProviderKind

if TYPE_CHECKING:
    from git_stacker.config import Config
    from git_stacker.prompts import Prompter
    from git_stacker.services.credentials import CredentialStore


class ForgeProvider(ABC):
    """A hosting service that can open pull requests."""

    kind: ProviderKind

    @abstractmethod
    def resolve_credential(self) -> str:
        """Return an access token, asking for and storing one if needed.

        Raises:
            CredentialError: If no token can be obtained or stored securely
        """

    @abstractmethod
    def create_pull_request(
        self,
        owner: str,
        repo: str,
        title: str,
        head_branch: str,
        base_branch: str,
        body: str,
    ) -> str:
        """Open a pull request and return its URL.

        Raises:
            ForgeRequestFailedError: On any non-success response or timeout
        """


ProviderFactory = Callable[["Config", "Prompter", "CredentialStore"], ForgeProvider]

PROVIDERS: Dict[ProviderKind, ProviderFactory] = {}


def register_provider(kind: ProviderKind, factory: ProviderFactory) -> None:
    PROVIDERS[kind] = factory


def provider_factory(
    kind: ProviderKind,
    config: "Config",
    prompter: "Prompter",
    credentials: "CredentialStore",
) -> ForgeProvider:
    """Build the provider registered for ``kind``.

    Raises:
        UnsupportedProviderError: If nothing is registered for ``kind``
    """
    factory = PROVIDERS.get(kind)
    if factory is None:
        raise UnsupportedProviderError(
            kind.display_name, [registered.display_name for registered in PROVIDERS]
        )
    return factory(config, prompter, credentials)
