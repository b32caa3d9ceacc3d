"""Data models for git-stacker."""

from .branch import BranchMetadata, CommitOutcome, WorkingAreaSnapshot
from .repository import ProviderKind, RepositoryIdentity

__all__ = [
    "BranchMetadata",
    "CommitOutcome",
    "WorkingAreaSnapshot",
    "ProviderKind",
    "RepositoryIdentity",
]
