"""Branch lineage persisted in the git object database.

Each stacked branch gets a blob holding its serialized BranchMetadata and a
reference ``refs/branch-metadata/<branch>`` pointing at it. The records are
write-once: nothing in git-stacker updates or removes them after creation.
"""

import json
from typing import Optional

from git_stacker.constants import METADATA_REF_PREFIX
from git_stacker.exceptions import CorruptMetadataError, GitOperationError
from git_stacker.logging_config import get_logger
from git_stacker.models.branch import BranchMetadata
from git_stacker.services.git.client import VersionControlClient

logger = get_logger(__name__)


def metadata_ref_name(branch_name: str) -> str:
    """Reference that holds the lineage record of ``branch_name``."""
    return f"{METADATA_REF_PREFIX}{branch_name}"


class BranchMetadataStore:
    """Records and looks up lineage using only blob and ref primitives."""

    def __init__(self, client: VersionControlClient):
        self.client = client

    def record(self, branch_name: str, metadata: BranchMetadata) -> None:
        """Store ``metadata`` for ``branch_name``.

        Raises:
            RefUpdateFailedError: If git rejects the reference update
        """
        object_id = self.client.create_blob(metadata.to_json())
        ref_name = metadata_ref_name(branch_name)
        self.client.update_ref(ref_name, object_id)
        logger.info(
            f"Recorded lineage of {branch_name}: "
            f"{metadata.parent_branch_name}@{metadata.parent_branch_revision[:8]}"
        )

    def lookup(self, branch_name: str) -> Optional[BranchMetadata]:
        """Return the lineage of ``branch_name``, None if none was recorded.

        Raises:
            CorruptMetadataError: If the reference exists but its content cannot be parsed
        """
        ref_name = metadata_ref_name(branch_name)
        object_id = self.client.resolve_ref(ref_name)
        if object_id is None:
            logger.debug(f"No lineage recorded for {branch_name}")
            return None

        try:
            content = self.client.read_object(object_id)
        except GitOperationError as e:
            # A ref to a tree or commit cannot be read as a blob
            raise CorruptMetadataError(branch_name, e.message)

        try:
            return BranchMetadata.from_json(content)
        except (json.JSONDecodeError, ValueError) as e:
            raise CorruptMetadataError(branch_name, str(e))
