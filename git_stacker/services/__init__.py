"""Services used by the git-stacker workflows."""
