"""
Functions component - memoize, throttle, debounce, curry, delay, times.
"""

from ._impl import (
    Curried,
    Debounced,
    Memoized,
    Throttled,
    curry,
    debounce,
    delay,
    infer_arity,
    make_cache_key,
    memoize,
    throttle,
    times,
)
from .component import (
    build_cache_policy,
    create_debounced,
    create_memoized,
    create_throttled,
)
from .models import CacheStats
from .ports import CachePolicyPort, TimerHandle, TimerPort

__all__ = [
    # Combinators
    "memoize",
    "throttle",
    "debounce",
    "curry",
    "delay",
    "times",
    # Wrapper types
    "Memoized",
    "Throttled",
    "Debounced",
    "Curried",
    # Helpers
    "infer_arity",
    "make_cache_key",
    # Rules-driven factories
    "build_cache_policy",
    "create_memoized",
    "create_throttled",
    "create_debounced",
    # Models
    "CacheStats",
    # Ports
    "CachePolicyPort",
    "TimerHandle",
    "TimerPort",
]
