"""
Clock Interface.

Protocol-based interface for reading the current time.

Key requirements:
- Date helpers compare against the local calendar date (now())
- Rate limiting measures elapsed time on a monotonic reading, never on
  wall-clock time that can jump
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol


class ClockPort(Protocol):
    """
    Clock interface.

    Adapters: SystemClock (real time), FrozenClock (deterministic tests).
    """

    def now(self) -> datetime:
        """Get current local time (naive)."""
        ...

    def monotonic(self) -> float:
        """
        Get a monotonic reading in seconds.

        Only differences between two readings are meaningful.
        """
        ...
