"""Shared constants for git-stacker."""

from pathlib import Path

# Branch used to hold the interactive commit until its final name is known
SCRATCH_BRANCH_NAME = "gi_temp_branch"

# Upper bound on name candidates tried by create_branch: name, name1, ... name15
MAX_BRANCH_NAME_ATTEMPTS = 16

# Lineage records live at refs/branch-metadata/<branch>
METADATA_REF_PREFIX = "refs/branch-metadata/"

# Stored inside the repository's .git directory
PROJECT_SETTINGS_FILENAME = "stacker_project.json"

DEFAULT_CREDENTIALS_PATH = Path.home() / ".config" / "git-stacker" / "credentials.json"

DEFAULT_REMOTE_NAME = "origin"
DEFAULT_TRUNK = "main"

# Seconds to wait for a provider API response
DEFAULT_REQUEST_TIMEOUT = 30

# Trailer git adds with `commit -s`
SIGN_OFF_PREFIX = "Signed-off-by:"

# Staging prompt options
STAGE_ALL_CHOICE = "stage"
ABORT_CHOICE = "abort"
