"""Branch model and related enums"""
import json
from enum import Enum
from dataclasses import dataclass, field
from typing import Tuple


class CommitOutcome(Enum):
    """Result of the interactive commit step."""
    SUCCESS = "success"
    ABORTED = "aborted"


@dataclass(frozen=True)
class WorkingAreaSnapshot:
    """Staged and unstaged paths at the time of the query."""
    staged_files: Tuple[str, ...] = field(default_factory=tuple)
    unstaged_files: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def has_staged(self) -> bool:
        return bool(self.staged_files)

    @property
    def is_clean(self) -> bool:
        return not self.staged_files and not self.unstaged_files


@dataclass(frozen=True)
class BranchMetadata:
    """Lineage of a stacked branch: the branch and revision it was forked from."""
    parent_branch_name: str
    parent_branch_revision: str

    def to_json(self) -> str:
        """Serialize to the canonical form stored in the object database."""
        return json.dumps(
            {
                "parentBranchName": self.parent_branch_name,
                "parentBranchRevision": self.parent_branch_revision,
            },
            separators=(",", ":"),
        )

    @classmethod
    def from_json(cls, content: str) -> "BranchMetadata":
        """Parse the stored form.

        Raises:
            ValueError: If the content is not a JSON object with both string fields
        """
        data = json.loads(content)
        if not isinstance(data, dict):
            raise ValueError("metadata is not a JSON object")

        name = data.get("parentBranchName")
        revision = data.get("parentBranchRevision")
        if not isinstance(name, str) or not isinstance(revision, str):
            raise ValueError("parentBranchName and parentBranchRevision must be strings")

        return cls(parent_branch_name=name, parent_branch_revision=revision)
