"""
Timer adapters for deferred calls.

Implements the TimerPort interface used by debounce and delay.

Key behaviors:
- schedule() returns a handle whose cancel() is idempotent
- A cancelled callback never fires
- ManualTimerAdapter fires callbacks only when advance() is called,
  in due-time order (ties in scheduling order)
"""

from __future__ import annotations

import heapq
import itertools
import logging
import threading
from collections.abc import Callable

logger = logging.getLogger(__name__)


class ThreadingTimerAdapter:
    """Real timers backed by threading.Timer daemon threads."""

    def schedule(self, delay_seconds: float, callback: Callable[[], None]) -> threading.Timer:
        """Run callback on a background thread after delay_seconds."""
        timer = threading.Timer(delay_seconds, callback)
        timer.daemon = True
        timer.start()
        return timer


class ManualTimerHandle:
    """Handle for a callback scheduled on a ManualTimerAdapter."""

    def __init__(self, due: float, callback: Callable[[], None]) -> None:
        self.due = due
        self.callback = callback
        self.cancelled = False
        self.fired = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualTimerAdapter:
    """
    Virtual-time timer.

    Nothing runs until advance() moves virtual time past a callback's due
    time. Useful for deterministic testing.
    """

    def __init__(self) -> None:
        self._now = 0.0
        self._counter = itertools.count()
        self._queue: list[tuple[float, int, ManualTimerHandle]] = []

    @property
    def now(self) -> float:
        """Current virtual time in seconds."""
        return self._now

    @property
    def pending_count(self) -> int:
        """Number of scheduled callbacks that are neither fired nor cancelled."""
        return sum(1 for _, _, h in self._queue if not h.cancelled and not h.fired)

    def schedule(self, delay_seconds: float, callback: Callable[[], None]) -> ManualTimerHandle:
        """Queue callback to fire at now + delay_seconds."""
        handle = ManualTimerHandle(self._now + max(delay_seconds, 0.0), callback)
        heapq.heappush(self._queue, (handle.due, next(self._counter), handle))
        return handle

    def advance(self, seconds: float = 0.0, *, ms: float = 0.0) -> int:
        """
        Move virtual time forward and fire everything now due.

        Callbacks scheduled by a firing callback are honoured if they fall
        inside the advanced window.

        Returns:
            Number of callbacks fired
        """
        delta = seconds + ms / 1000.0
        if delta < 0:
            raise ValueError("Timer cannot move backwards")
        target = self._now + delta
        fired = 0

        while self._queue and self._queue[0][0] <= target:
            due, _, handle = heapq.heappop(self._queue)
            self._now = due
            if handle.cancelled:
                continue
            handle.fired = True
            handle.callback()
            fired += 1

        self._now = target
        if fired:
            logger.debug("Manual timer fired %d callbacks (t=%.3fs)", fired, self._now)
        return fired
