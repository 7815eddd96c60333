"""
Version control system (VCS) integrations.

This package contains the concrete client used to query a Git working
tree for the raw status, diff, log and historical file content.
"""

from .git_client import GitClient, GitError  # noqa: F401
