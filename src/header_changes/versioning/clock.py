"""
Clocks supplying the current time.

History resolution falls back to the current year for files without any
recorded commit. The clock is passed in explicitly so that callers (and
tests) can pin it.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol


class Clock(Protocol):
    """Source of the current time."""

    def now(self) -> datetime:
        ...


class SystemClock:
    """Clock backed by the local system time."""

    def now(self) -> datetime:
        return datetime.now()


class FixedClock:
    """Clock that always returns the same instant."""

    def __init__(self, moment: datetime) -> None:
        self.moment = moment

    def now(self) -> datetime:
        return self.moment
