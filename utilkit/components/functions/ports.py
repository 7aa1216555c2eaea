"""
Functions component - Port interfaces.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol


class CachePolicyPort(Protocol):
    """Storage and eviction strategy for memoize."""

    def get(self, key: str) -> tuple[bool, Any]:
        """Look up key. Returns (found, value)."""
        ...

    def put(self, key: str, value: Any) -> None:
        """Store value, evicting entries as the policy requires."""
        ...

    def clear(self) -> None:
        """Drop every entry."""
        ...

    def __len__(self) -> int:
        """Number of live entries."""
        ...


class TimerHandle(Protocol):
    """Handle for a scheduled callback."""

    def cancel(self) -> None:
        """Prevent the callback from firing. Safe to call more than once."""
        ...


class TimerPort(Protocol):
    """Deferred execution used by debounce and delay."""

    def schedule(self, delay_seconds: float, callback: Callable[[], None]) -> TimerHandle:
        """Run callback once, delay_seconds from now."""
        ...
