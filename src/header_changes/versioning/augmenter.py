"""
Augmentation of file changes with header metadata.

This module ties the pipeline together: :func:`get_vcs_changes` collects
committed and uncommitted changes, merges them and fills every resulting
:class:`FileChange` with its creation and last edition years. When
requested, the content of each file at the reference branch is attached
too, so that callers can compare the existing header against it.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from header_changes.versioning.clock import Clock, SystemClock
from header_changes.versioning.collector import (
    collect_committed_changes,
    collect_uncommitted_changes,
)
from header_changes.versioning.history import resolve_history
from header_changes.versioning.merger import merge
from header_changes.versioning.model import FileChange, Vcs, make_branch_revision_symbol


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


def get_vcs_changes(
    vcs: Vcs,
    remote: str,
    branch: str,
    needs_reference_content: bool,
    clock: Optional[Clock] = None,
) -> List[FileChange]:
    """Return the augmented changes between the working tree and a remote branch.

    Parameters
    ----------
    vcs : Vcs
        The VCS collaborator.
    remote : str
        Name of the remote holding the reference branch.
    branch : str
        Name of the reference branch.
    needs_reference_content : bool
        If True, attach the content of each file at ``<remote>/<branch>``.
    clock : Clock, optional
        Clock used for files without history. Defaults to the system clock.

    Raises
    ------
    VersioningError
        If the VCS output cannot be interpreted.
    Exception
        Any failure of the collaborator's status, diff or log operations
        is propagated as raised.
    """
    committed = collect_committed_changes(vcs, remote, branch)
    uncommitted = collect_uncommitted_changes(vcs)
    changes = merge(committed, uncommitted)
    revision = ""
    if needs_reference_content:
        revision = make_branch_revision_symbol(remote, branch)
    return augment_with_metadata(vcs, changes, revision, clock)


def show_content_at_revision(vcs: Vcs, path: str, revision: str) -> str:
    """Return the content of ``path`` at ``revision``, or ``""`` if unavailable."""
    try:
        return vcs.show_content_at_revision(path, revision)
    except Exception as exc:
        # Missing reference content must not block header maintenance
        logger.debug("No content for %s at %s: %s", path, revision, exc)
        return ""


def augment_with_metadata(
    vcs: Vcs,
    changes: List[FileChange],
    revision: str,
    clock: Optional[Clock] = None,
) -> List[FileChange]:
    """Fill each change with its history years and optional reference content.

    The changes are updated in place and the same list is returned. A
    history resolution failure aborts the whole batch; a content fetch
    failure only leaves ``reference_content`` empty.
    """
    clock = clock or SystemClock()
    for change in changes:
        history = resolve_history(vcs, change.path, clock)
        if revision != "":
            change.reference_content = show_content_at_revision(vcs, change.path, revision)
        change.creation_year = history.creation_year
        change.last_edition_year = history.last_edition_year
    logger.debug("Augmented %d change(s) with metadata", len(changes))
    return changes
