"""
Functions component - Rules-driven construction of combinators.

Shell Layer - reads cache policy and default waits from rules and wires
the default adapters.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from utilkit.adapters.cache_policies import LRUPolicy, TTLPolicy, UnboundedPolicy
from utilkit.core.ports.time import ClockPort
from utilkit.rules.models import MemoizeRules, UtilRules

from ._impl import Debounced, Memoized, Throttled
from .ports import CachePolicyPort, TimerPort

logger = logging.getLogger(__name__)


def build_cache_policy(rules: MemoizeRules, clock: ClockPort | None = None) -> CachePolicyPort:
    """Create the eviction policy named by the memoize rules."""
    if rules.policy == "lru":
        return LRUPolicy(rules.max_size)  # type: ignore[arg-type]  # required by MemoizeRules
    if rules.policy == "ttl":
        return TTLPolicy(
            rules.ttl_seconds,  # type: ignore[arg-type]  # required by MemoizeRules
            clock=clock,
            max_size=rules.max_size,
        )
    return UnboundedPolicy()


def create_memoized(
    fn: Callable[..., Any],
    rules: UtilRules | None = None,
    clock: ClockPort | None = None,
) -> Memoized:
    """Memoize fn with the cache policy configured in rules."""
    rules = rules or UtilRules()
    policy = build_cache_policy(rules.memoize, clock)
    logger.debug("Memoizing %r with %s policy", fn, rules.memoize.policy)
    return Memoized(fn, policy=policy)


def create_throttled(
    fn: Callable[..., Any],
    wait_ms: float | None = None,
    rules: UtilRules | None = None,
    clock: ClockPort | None = None,
) -> Throttled:
    """Throttle fn, defaulting the window to rules.functions.throttle_wait_ms."""
    rules = rules or UtilRules()
    wait = rules.functions.throttle_wait_ms if wait_ms is None else wait_ms
    return Throttled(fn, wait, clock=clock)


def create_debounced(
    fn: Callable[..., Any],
    wait_ms: float | None = None,
    rules: UtilRules | None = None,
    timer: TimerPort | None = None,
) -> Debounced:
    """Debounce fn, defaulting the quiet period to rules.functions.debounce_wait_ms."""
    rules = rules or UtilRules()
    wait = rules.functions.debounce_wait_ms if wait_ms is None else wait_ms
    return Debounced(fn, wait, timer=timer)
