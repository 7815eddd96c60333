"""
Data models for change detection.

The :class:`FileChange` represents one file whose license header may need
a review. It starts out bare (path only) when collected from the VCS and
is filled in with year metadata, and optionally reference content, during
augmentation. :class:`Vcs` describes the four raw operations the pipeline
needs from a version control collaborator.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Protocol


class VersioningError(Exception):
    """Raised when VCS output cannot be interpreted."""

    pass


class Vcs(Protocol):
    """Raw text operations of a version control collaborator.

    Every method returns the command output as text and raises on failure.
    """

    def status(self, args: List[str]) -> str:
        ...

    def diff(self, args: List[str]) -> str:
        ...

    def log(self, args: List[str]) -> str:
        ...

    def show_content_at_revision(self, path: str, revision: str) -> str:
        ...


@dataclass
class FileChange:
    """Representation of a single file of interest.

    Attributes
    ----------
    path : str
        Path relative to the repository root.
    creation_year : int
        Year of the earliest recorded change, or the current year when the
        file has no history. ``0`` until augmented.
    last_edition_year : int
        Year of the most recent recorded change, or the current year.
        ``0`` until augmented.
    reference_content : str
        Content of the file at the reference revision. Empty when not
        requested or unavailable.
    """

    path: str
    creation_year: int = 0
    last_edition_year: int = 0
    reference_content: str = ""


@dataclass(frozen=True)
class FileHistory:
    """Creation and last edition years of a single file."""

    creation_year: int
    last_edition_year: int


def make_branch_revision_symbol(remote: str, branch: str) -> str:
    """Return the revision symbol addressing ``branch`` on ``remote``."""
    return f"{remote}/{branch}"
