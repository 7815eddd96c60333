"""
Change detection for license header maintenance.

This package finds the files that differ between the working tree and a
remote branch and resolves the years their headers should mention. See
:mod:`header_changes.versioning.augmenter` for the entry point.
"""

from .augmenter import augment_with_metadata, get_vcs_changes  # noqa: F401
from .clock import Clock, FixedClock, SystemClock  # noqa: F401
from .merger import merge  # noqa: F401
from .model import (  # noqa: F401
    FileChange,
    FileHistory,
    Vcs,
    VersioningError,
    make_branch_revision_symbol,
)
