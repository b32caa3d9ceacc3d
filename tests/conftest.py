"""Pytest fixtures for git-stacker tests"""
import tempfile
from datetime import date
from pathlib import Path

import pytest
import git
from rich.console import Console

from git_stacker.config import Config
from git_stacker.context import StackerContext
from git_stacker.services.credentials import CredentialStore
from git_stacker.services.project_settings import ProjectSettingsStore

from tests.fakes import FakeForgeProvider, FakeGitClient, FakePrompter


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_config(temp_dir):
    """Configuration that never touches the real home directory."""
    return Config(credentials_path=temp_dir / "config" / "credentials.json")


@pytest.fixture
def git_repo(temp_dir):
    """Create a real Git repository for testing."""
    repo_path = temp_dir / "test_repo"
    repo_path.mkdir()

    repo = git.Repo.init(repo_path)

    # Configure git user for commits
    repo.config_writer().set_value("user", "name", "Test User").release()
    repo.config_writer().set_value("user", "email", "test@example.com").release()
    repo.config_writer().set_value("commit", "gpgsign", "false").release()

    # Create initial commit on main branch
    test_file = repo_path / "README.md"
    test_file.write_text("# Test Repository\n")
    repo.index.add(["README.md"])
    repo.index.commit("Initial commit")

    repo.git.branch('-M', 'main')
    repo.create_remote('origin', 'git@github.com:test/test-repo.git')

    yield repo

    repo.close()


@pytest.fixture
def commit_editor(temp_dir, monkeypatch):
    """Point GIT_EDITOR at a script that writes a fixed commit message."""

    def install(message: str) -> None:
        message_file = temp_dir / "commit_message.txt"
        message_file.write_text(message)
        script = temp_dir / "fake_editor.sh"
        script.write_text(f'#!/bin/sh\ncat "{message_file}" > "$1"\n')
        script.chmod(0o755)
        monkeypatch.setenv("GIT_EDITOR", str(script))

    return install


@pytest.fixture
def fake_git(temp_dir):
    """In-memory git client on branch main with one unstaged file."""
    return FakeGitClient(control_dir=temp_dir, unstaged=("app.py",))


@pytest.fixture
def fake_prompter():
    return FakePrompter()


@pytest.fixture
def fake_forge():
    return FakeForgeProvider()


@pytest.fixture
def make_context(mock_config, fake_prompter, fake_forge):
    """Build a StackerContext around a given git client."""

    def build(client, today=date(2024, 12, 31), forge_factory=None):
        return StackerContext(
            config=mock_config,
            git=client,
            prompter=fake_prompter,
            settings=ProjectSettingsStore(client.get_control_directory()),
            credentials=CredentialStore(mock_config.credentials_path),
            forge_factory=forge_factory or (lambda kind: fake_forge),
            console=Console(force_terminal=False, width=120),
            today=lambda: today,
        )

    return build
