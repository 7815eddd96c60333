"""
Collection of changed files from the VCS.

Two independent sources are queried: the committed changes between a
remote branch and ``HEAD`` (``diff --name-status``) and the uncommitted
changes of the working tree (``status --porcelain``). Deleted files are
never returned since there is no header left to maintain.
"""

from __future__ import annotations

import logging
from typing import List

from header_changes.versioning.model import FileChange, Vcs, VersioningError


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


def collect_committed_changes(vcs: Vcs, remote: str, branch: str) -> List[FileChange]:
    """Return the files changed between ``<remote>/<branch>`` and ``HEAD``.

    Parameters
    ----------
    vcs : Vcs
        The VCS collaborator.
    remote : str
        Name of the remote, e.g. ``origin``.
    branch : str
        Name of the branch on that remote.

    Returns
    -------
    List[FileChange]
        Bare file changes in diff output order. The same path may appear
        more than once.

    Raises
    ------
    VersioningError
        If a diff line lacks the fields its status requires.
    """
    revisions = f"{remote}/{branch}..HEAD"
    output = vcs.diff(["--name-status", revisions])
    changes: List[FileChange] = []
    for line in output.split("\n"):
        if not line:
            continue
        status = line.split("\t", 1)[0].strip()
        if status == "D":
            continue
        # Renames list the old path before the new one
        field_count = 3 if status.startswith("R") else 2
        fields = line.split("\t", field_count - 1)
        if len(fields) < field_count:
            raise VersioningError(f"Malformed diff line: {line!r}")
        changes.append(FileChange(path=fields[-1].strip()))
    logger.debug("Collected %d committed change(s) against %s", len(changes), revisions)
    return changes


def collect_uncommitted_changes(vcs: Vcs) -> List[FileChange]:
    """Return the files changed in the working tree.

    Staged, unstaged and untracked files are included. Any entry whose
    status flags contain ``D`` is skipped. For renamed entries reported as
    ``old -> new`` the new path is kept.

    Raises
    ------
    VersioningError
        If a status line has no path.
    """
    output = vcs.status(["--porcelain"])
    changes: List[FileChange] = []
    if output == "":
        return changes
    for line in output.split("\n"):
        if not line:
            continue
        fields = line.strip().split(" ", 1)
        if len(fields) < 2:
            raise VersioningError(f"Malformed status line: {line!r}")
        flags, path = fields[0].strip(), fields[1].strip()
        if "D" in flags:
            continue
        if "R" in flags and " -> " in path:
            path = path.split(" -> ", 1)[1].strip()
        changes.append(FileChange(path=path))
    logger.debug("Collected %d uncommitted change(s)", len(changes))
    return changes
