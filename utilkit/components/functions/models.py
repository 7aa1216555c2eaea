"""
Functions component models.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CacheStats:
    """Snapshot of a memoized function's cache."""

    hits: int
    misses: int
    size: int
