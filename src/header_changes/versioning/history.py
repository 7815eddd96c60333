"""
Resolution of the creation and last edition years of a file.

The years come from the commit timestamps reported by ``log
--format=%at``, newest first. Files without history (e.g. untracked
files) default to the current year of the supplied clock.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime

from header_changes.versioning.clock import Clock
from header_changes.versioning.model import FileHistory, Vcs, VersioningError


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())

_TIMESTAMP_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2 ** 63)
_INT64_MAX = 2 ** 63 - 1


def _year_of(timestamp: str) -> int:
    # Signed decimal digits only, within the 64-bit range
    if not _TIMESTAMP_PATTERN.fullmatch(timestamp):
        raise VersioningError(f"Invalid commit timestamp: {timestamp!r}")
    seconds = int(timestamp)
    if not _INT64_MIN <= seconds <= _INT64_MAX:
        raise VersioningError(f"Commit timestamp out of range: {timestamp!r}")
    try:
        return datetime.fromtimestamp(seconds).year
    except (ValueError, OverflowError, OSError) as exc:
        raise VersioningError(f"Unsupported commit timestamp: {timestamp!r}") from exc


def resolve_history(vcs: Vcs, path: str, clock: Clock) -> FileHistory:
    """Return the creation and last edition years of ``path``.

    Parameters
    ----------
    vcs : Vcs
        The VCS collaborator.
    path : str
        Path of the file relative to the repository root.
    clock : Clock
        Supplies the fallback year when history is missing.

    Returns
    -------
    FileHistory
        The resolved years.

    Raises
    ------
    VersioningError
        If a commit timestamp is not a signed 64-bit decimal integer or
        falls outside the supported calendar range.

    Notes
    -----
    A file with a single commit gets that commit's year as creation year
    but keeps the current year as last edition year. Only files with at
    least two commits have their last edition year read from the log.
    """
    output = vcs.log(["--format=%at", "--", path])
    # The log output ends with a newline, drop the trailing entry
    lines = output.split("\n")[:-1]
    line_count = len(lines)
    default_year = clock.now().year
    creation_year = default_year
    last_edition_year = default_year
    if line_count > 0:
        creation_year = _year_of(lines[line_count - 1])
    if line_count > 1:
        last_edition_year = _year_of(lines[0])
    logger.debug(
        "Resolved history of %s from %d commit(s): %d-%d",
        path,
        line_count,
        creation_year,
        last_edition_year,
    )
    return FileHistory(creation_year=creation_year, last_edition_year=last_edition_year)
