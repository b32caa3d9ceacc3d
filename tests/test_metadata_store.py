"""Tests for BranchMetadataStore"""
import pytest

from git_stacker.exceptions import CorruptMetadataError
from git_stacker.models.branch import BranchMetadata
from git_stacker.services.git import GitOperations
from git_stacker.services.metadata_store import BranchMetadataStore, metadata_ref_name

from tests.fakes import FakeGitClient


class TestBranchMetadataSerialization:
    """Test the stored JSON form."""

    def test_to_json_uses_camel_case_keys(self):
        """Test the JSON keys."""
        metadata = BranchMetadata("main", "abc123")
        assert metadata.to_json() == '{"parentBranchName":"main","parentBranchRevision":"abc123"}'

    def test_from_json(self):
        """Test parsing metadata JSON."""
        metadata = BranchMetadata.from_json('{"parentBranchName": "main", "parentBranchRevision": "abc"}')
        assert metadata == BranchMetadata("main", "abc")

    @pytest.mark.parametrize("content", [
        "[]",
        '{"parentBranchName": "main"}',
        '{"parentBranchName": 1, "parentBranchRevision": "abc"}',
    ])
    def test_from_json_rejects_wrong_shape(self, content):
        """Test rejecting JSON of the wrong shape."""
        with pytest.raises(ValueError):
            BranchMetadata.from_json(content)


class TestBranchMetadataStoreFake:
    """Test record/lookup against the in-memory client."""

    def test_record_writes_blob_and_ref(self):
        """Test that recording writes a blob and a ref."""
        client = FakeGitClient()
        store = BranchMetadataStore(client)

        store.record("12-31-Feature", BranchMetadata("main", "base-sha"))

        object_id = client.refs["refs/branch-metadata/12-31-Feature"]
        assert client.objects[object_id] == (
            '{"parentBranchName":"main","parentBranchRevision":"base-sha"}'
        )

    def test_lookup_after_record(self):
        """Test looking up recorded metadata."""
        store = BranchMetadataStore(FakeGitClient())
        metadata = BranchMetadata("feature/base", "0123456789abcdef")

        store.record("child", metadata)

        assert store.lookup("child") == metadata

    def test_lookup_without_record_is_absent_every_time(self):
        """Test that a missing record is absent on every lookup."""
        store = BranchMetadataStore(FakeGitClient())
        assert store.lookup("unknown") is None
        assert store.lookup("unknown") is None

    def test_lookup_of_malformed_blob_is_corrupt(self):
        """Test that a malformed blob is corrupt."""
        client = FakeGitClient()
        object_id = client.create_blob("not json")
        client.update_ref(metadata_ref_name("broken"), object_id)

        with pytest.raises(CorruptMetadataError) as exc_info:
            BranchMetadataStore(client).lookup("broken")
        assert exc_info.value.branch == "broken"

    def test_lookup_of_dangling_ref_is_corrupt(self):
        """Test that a dangling ref is corrupt."""
        client = FakeGitClient()
        client.update_ref(metadata_ref_name("dangling"), "deadbeef")

        with pytest.raises(CorruptMetadataError):
            BranchMetadataStore(client).lookup("dangling")

    def test_records_are_per_branch(self):
        """Test that records are kept per branch."""
        store = BranchMetadataStore(FakeGitClient())
        store.record("a", BranchMetadata("main", "1"))
        store.record("b", BranchMetadata("a", "2"))

        assert store.lookup("a").parent_branch_name == "main"
        assert store.lookup("b").parent_branch_name == "a"


class TestBranchMetadataStoreGit:
    """Test record/lookup in a real repository."""

    def test_round_trip(self, git_repo, mock_config):
        """Test recording and looking up in a real repository."""
        client = GitOperations(git_repo.working_dir, mock_config)
        store = BranchMetadataStore(client)
        revision = git_repo.head.commit.hexsha
        metadata = BranchMetadata("main", revision)

        store.record("feature", metadata)

        assert store.lookup("feature") == metadata
        ref = git_repo.git.rev_parse("refs/branch-metadata/feature")
        assert git_repo.git.cat_file("-t", ref) == "blob"

    def test_absent_in_real_repo(self, git_repo, mock_config):
        """Test a missing record in a real repository."""
        store = BranchMetadataStore(GitOperations(git_repo.working_dir, mock_config))
        assert store.lookup("feature") is None
        assert store.lookup("feature") is None

    def test_ref_to_commit_is_corrupt(self, git_repo, mock_config):
        """Test a ref pointing at a commit."""
        git_repo.git.update_ref("refs/branch-metadata/odd", git_repo.head.commit.hexsha)
        store = BranchMetadataStore(GitOperations(git_repo.working_dir, mock_config))

        with pytest.raises(CorruptMetadataError):
            store.lookup("odd")
