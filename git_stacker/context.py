"""Application context with dependency injection."""

from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Callable, Optional, Union

from rich.console import Console

from git_stacker.config import Config
from git_stacker.models.repository import ProviderKind
from git_stacker.prompts import Prompter, RichPrompter
from git_stacker.services.credentials import CredentialStore
from git_stacker.services.forge import ForgeProvider, provider_factory
from git_stacker.services.git import GitOperations, VersionControlClient
from git_stacker.services.metadata_store import BranchMetadataStore
from git_stacker.services.project_settings import ProjectSettingsStore


@dataclass(frozen=True)
class StackerContext:
    """Everything a workflow needs, created once at the CLI entry point.

    Frozen so that no workflow swaps collaborators at runtime; tests build one
    directly with fake collaborators.
    """

    config: Config
    git: VersionControlClient
    prompter: Prompter
    settings: ProjectSettingsStore
    credentials: CredentialStore
    forge_factory: Callable[[ProviderKind], ForgeProvider]
    console: Console = field(default_factory=Console)
    today: Callable[[], date] = date.today

    @property
    def metadata(self) -> BranchMetadataStore:
        return BranchMetadataStore(self.git)


def create_context(
    config: Config,
    repo_path: Optional[Union[str, Path]] = None,
    console: Optional[Console] = None,
) -> StackerContext:
    """Create production context with real implementations.

    Raises:
        GitNotInstalledError: If git is not available
        NotARepositoryError: If repo_path (default: cwd) is not inside a repository
    """
    console = console or Console()
    git_ops = GitOperations(repo_path or Path.cwd(), config)
    prompter = RichPrompter(console)
    credentials = CredentialStore(config.credentials_path)

    def forge_factory(kind: ProviderKind) -> ForgeProvider:
        return provider_factory(kind, config, prompter, credentials)

    return StackerContext(
        config=config,
        git=git_ops,
        prompter=prompter,
        settings=ProjectSettingsStore(git_ops.get_control_directory()),
        credentials=credentials,
        forge_factory=forge_factory,
        console=console,
    )
