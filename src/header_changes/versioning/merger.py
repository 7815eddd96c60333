"""
Merging of change lists.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Set

from header_changes.versioning.model import FileChange


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


def merge(changes: Iterable[FileChange], other_changes: Iterable[FileChange]) -> List[FileChange]:
    """Return the union of both lists with one entry per path.

    Records are deduplicated by path only. The first record seen for a
    path is kept, scanning ``changes`` before ``other_changes``; callers
    should not depend on the resulting order.
    """
    seen: Set[str] = set()
    merged: List[FileChange] = []
    for source in (changes, other_changes):
        for change in source:
            if change.path in seen:
                continue
            seen.add(change.path)
            merged.append(change)
    logger.debug("Merged changes into %d distinct file(s)", len(merged))
    return merged
