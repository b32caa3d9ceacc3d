"""Tests for ProjectSettingsStore"""
import json
from unittest.mock import patch

import pytest

from git_stacker.exceptions import ProjectSettingsError
from git_stacker.services.project_settings import ProjectSettings, ProjectSettingsStore

from tests.fakes import FakePrompter


class TestProjectSettingsLoad:
    """Test loading settings from the control directory."""

    def test_missing_file_gives_defaults(self, temp_dir):
        """Test defaults without a settings file."""
        assert ProjectSettingsStore(temp_dir).load() == ProjectSettings(trunk=None)

    def test_reads_trunk(self, temp_dir):
        """Test reading the trunk."""
        (temp_dir / "stacker_project.json").write_text('{"trunk": "develop"}')
        assert ProjectSettingsStore(temp_dir).load().trunk == "develop"

    def test_null_trunk(self, temp_dir):
        """Test a null trunk."""
        (temp_dir / "stacker_project.json").write_text('{"trunk": null}')
        assert ProjectSettingsStore(temp_dir).load().trunk is None

    @pytest.mark.parametrize("content", ["{broken", "[1, 2]", '{"trunk": 3}'])
    def test_corrupt_file_gives_defaults(self, temp_dir, content):
        """Test defaults for a corrupt file."""
        (temp_dir / "stacker_project.json").write_text(content)
        assert ProjectSettingsStore(temp_dir).load().trunk is None

    def test_load_is_cached(self, temp_dir):
        """Test that settings are read once."""
        store = ProjectSettingsStore(temp_dir)
        first = store.load()
        (temp_dir / "stacker_project.json").write_text('{"trunk": "develop"}')
        assert store.load() is first


class TestProjectSettingsSave:
    """Test persisting settings."""

    def test_save_writes_json(self, temp_dir):
        """Test saving settings as JSON."""
        store = ProjectSettingsStore(temp_dir)
        store.save(ProjectSettings(trunk="main"))

        assert json.loads((temp_dir / "stacker_project.json").read_text()) == {"trunk": "main"}
        assert not (temp_dir / "stacker_project.tmp").exists()

    def test_save_failure(self, temp_dir):
        """Test a failed save."""
        store = ProjectSettingsStore(temp_dir / "missing-dir")
        with pytest.raises(ProjectSettingsError) as exc_info:
            store.save(ProjectSettings(trunk="main"))
        assert "write permissions" in exc_info.value.suggestion


class TestGetTrunk:
    """Test lazy trunk resolution."""

    def test_prompts_and_persists(self, temp_dir):
        """Test prompting for the trunk and saving it."""
        prompter = FakePrompter(texts=["develop"])
        store = ProjectSettingsStore(temp_dir)

        assert store.get_trunk(prompter) == "develop"
        assert ProjectSettingsStore(temp_dir).load().trunk == "develop"

    def test_prompt_default_is_main(self, temp_dir):
        """Test that the trunk prompt defaults to main."""
        assert ProjectSettingsStore(temp_dir).get_trunk(FakePrompter()) == "main"

    def test_blank_answer_uses_default(self, temp_dir):
        """Test a blank trunk answer."""
        prompter = FakePrompter(texts=["  "])
        assert ProjectSettingsStore(temp_dir).get_trunk(prompter, default="trunk") == "trunk"

    def test_configured_trunk_skips_prompt(self, temp_dir):
        """Test skipping the prompt when trunk is set."""
        (temp_dir / "stacker_project.json").write_text('{"trunk": "release"}')
        prompter = FakePrompter()

        assert ProjectSettingsStore(temp_dir).get_trunk(prompter) == "release"
        assert prompter.asked == []

    def test_save_failure_propagates(self, temp_dir):
        """Test that a failed save is an error."""
        store = ProjectSettingsStore(temp_dir)
        with patch.object(store, "save", side_effect=ProjectSettingsError("nope")):
            with pytest.raises(ProjectSettingsError):
                store.get_trunk(FakePrompter(texts=["main"]))
