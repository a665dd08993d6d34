"""
Time sources for time-based seeding.

TigerStyle: time is read through an explicit source, never a hidden global.
Production code uses SystemTimeSource; tests and simulations pass a
FixedTimeSource so the derived seed is known in advance.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Protocol


class TimeSource(Protocol):
    """Anything that reports nanoseconds since the Unix epoch."""

    def now_ns(self) -> int:
        ...


class SystemTimeSource:
    """Host wall clock."""

    def now_ns(self) -> int:
        return time.time_ns()


@dataclass
class FixedTimeSource:
    """Time source that reports whatever it was last set to.

    Readings may be negative, which lets tests drive the pre-epoch failure
    path of Generator.from_time.
    """

    _now_ns: int = 0

    def now_ns(self) -> int:
        return self._now_ns

    def set_ns(self, time_ns: int) -> None:
        self._now_ns = time_ns

    def advance_ns(self, delta_ns: int) -> int:
        """Move time forward and return the new reading."""
        assert delta_ns >= 0, f"cannot advance by negative time ({delta_ns}ns)"
        self._now_ns += delta_ns
        return self._now_ns
