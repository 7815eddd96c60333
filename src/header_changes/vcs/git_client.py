"""
Git client implementation for header_changes.

This module runs the ``git`` binary to provide the raw status, diff, log
and show operations consumed by :mod:`header_changes.versioning`. It does
not interpret any output. All subprocess calls go through
:meth:`GitClient._run` so that unit tests can mock them easily.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import List, Optional


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


class GitError(Exception):
    """Raised when a Git command fails."""

    pass


class GitClient:
    """Client for reading a Git repository.

    Parameters
    ----------
    repo_root : Path
        Root directory of the working tree.
    timeout : float, optional
        Maximum number of seconds a single Git command may run.
    """

    def __init__(self, repo_root: Path, timeout: Optional[float] = None) -> None:
        self.repo_root = repo_root
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Static helpers
    # ------------------------------------------------------------------
    @staticmethod
    def find_repo_root(start: Path) -> Optional[Path]:
        """Find the root of the Git repository starting from ``start``.

        Walk upwards until a ``.git`` entry is found or the filesystem
        root is reached.
        """
        current = start.resolve()
        while True:
            if (current / ".git").exists():
                return current
            if current.parent == current:
                return None
            current = current.parent

    def _run(self, args: List[str]) -> str:
        """Run a Git command in the repository root and return its stdout.

        Raises
        ------
        GitError
            If the command cannot be started, times out or exits with a
            non-zero status.
        """
        full_cmd = ["git"] + args
        logger.debug("Executing Git command: %s", " ".join(full_cmd))
        try:
            result = subprocess.run(
                full_cmd,
                cwd=self.repo_root,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                errors="replace",
                timeout=self.timeout,
            )
        except FileNotFoundError as exc:
            raise GitError("Git executable not found") from exc
        except subprocess.TimeoutExpired as exc:
            raise GitError(f"Git command timed out after {exc.timeout}s: {' '.join(full_cmd)}") from exc

        if result.returncode != 0:
            logger.debug(
                "Git command failed: %s\nSTDOUT: %s\nSTDERR: %s",
                " ".join(full_cmd),
                result.stdout,
                result.stderr,
            )
            raise GitError(result.stderr.strip() or result.stdout.strip())
        return result.stdout

    # ------------------------------------------------------------------
    # Raw operations
    # ------------------------------------------------------------------
    def status(self, args: List[str]) -> str:
        return self._run(["status"] + args)

    def diff(self, args: List[str]) -> str:
        return self._run(["diff"] + args)

    def log(self, args: List[str]) -> str:
        return self._run(["log"] + args)

    def show_content_at_revision(self, path: str, revision: str) -> str:
        """Return the content of ``path`` as committed at ``revision``."""
        return self._run(["show", f"{revision}:{path}"])
