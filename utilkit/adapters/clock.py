import time
from datetime import datetime, timedelta


class SystemClock:
    def now(self) -> datetime:
        return datetime.now()

    def monotonic(self) -> float:
        return time.monotonic()


class FrozenClock:
    """
    Clock that only moves when told to.

    Useful for deterministic testing of throttling, TTL expiry and
    "is today" checks.
    """

    def __init__(self, frozen: datetime | None = None, monotonic_start: float = 0.0) -> None:
        self._now = frozen or datetime(2023, 7, 1, 12, 0, 0)
        self._monotonic = monotonic_start

    def now(self) -> datetime:
        return self._now

    def monotonic(self) -> float:
        return self._monotonic

    def advance(self, seconds: float = 0.0, *, ms: float = 0.0) -> None:
        """Move both readings forward."""
        delta = seconds + ms / 1000.0
        if delta < 0:
            raise ValueError("Clock cannot move backwards")
        self._monotonic += delta
        self._now = self._now + timedelta(seconds=delta)

    def set_now(self, value: datetime) -> None:
        """Jump the wall clock without touching the monotonic reading."""
        self._now = value
