"""
Function combinators: memoize, throttle, debounce, curry, delay, times.

Functional Core - each wrapper owns its state (cache, last call time,
pending timer, accumulated arguments) as private attributes. Time and
storage are injected through ports so behaviour is deterministic under
test.

Invariants:
- memoize: structurally equal arguments compute once (until evicted)
- throttle: calls inside the window are dropped, not queued
- debounce: only the last call of a burst fires, with its arguments
- curry: any grouping of the same arguments gives the same result
"""

from __future__ import annotations

import functools
import inspect
import json
import logging
import threading
from collections.abc import Callable
from typing import Any

from utilkit.adapters.cache_policies import UnboundedPolicy
from utilkit.adapters.clock import SystemClock
from utilkit.adapters.timers import ThreadingTimerAdapter
from utilkit.core.ports.time import ClockPort

from .models import CacheStats
from .ports import CachePolicyPort, TimerHandle, TimerPort

logger = logging.getLogger(__name__)

KeyFunc = Callable[[tuple[Any, ...], dict[str, Any]], str]


def _name(fn: Callable[..., Any]) -> str:
    return getattr(fn, "__qualname__", None) or repr(fn)


def _check_wait(wait_ms: float) -> float:
    if isinstance(wait_ms, bool) or not isinstance(wait_ms, (int, float)) or wait_ms < 0:
        raise ValueError(f"wait_ms must be a non-negative number, got {wait_ms!r}")
    return float(wait_ms)


# --- Memoize ---


def make_cache_key(args: tuple[Any, ...], kwargs: dict[str, Any]) -> str:
    """
    Deterministic JSON key for a call.

    Mapping keys are sorted, so {"a": 1, "b": 2} and {"b": 2, "a": 1} share
    a key. Values JSON cannot encode are keyed by repr().

    Known collisions: a list and a tuple with equal members, a mapping
    with int keys vs one with the same keys as strings, and a non-JSON
    value vs the string of its repr ({1, 2} and "{1, 2}") serialize to
    the same key.
    """
    try:
        return json.dumps(
            [list(args), kwargs], sort_keys=True, default=repr, separators=(",", ":")
        )
    except (TypeError, ValueError):
        # Mixed-type mapping keys cannot be sorted; circular data cannot be encoded
        return repr((args, sorted(kwargs.items())))


class Memoized:
    """
    Caching wrapper around a pure function.

    Lookups go through an injectable cache policy (unbounded by default).
    """

    def __init__(
        self,
        fn: Callable[..., Any],
        *,
        policy: CachePolicyPort | None = None,
        key: KeyFunc | None = None,
    ) -> None:
        functools.update_wrapper(self, fn)
        self._fn = fn
        self._policy: CachePolicyPort = policy if policy is not None else UnboundedPolicy()
        self._key = key or make_cache_key
        self._hits = 0
        self._misses = 0

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        cache_key = self._key(args, kwargs)
        found, value = self._policy.get(cache_key)
        if found:
            self._hits += 1
            return value

        self._misses += 1
        result = self._fn(*args, **kwargs)
        self._policy.put(cache_key, result)
        return result

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return functools.partial(self, instance)

    @property
    def hits(self) -> int:
        return self._hits

    @property
    def misses(self) -> int:
        return self._misses

    @property
    def cache_size(self) -> int:
        return len(self._policy)

    def cache_stats(self) -> CacheStats:
        return CacheStats(hits=self._hits, misses=self._misses, size=len(self._policy))

    def cache_clear(self) -> None:
        """Empty the cache and reset counters."""
        self._policy.clear()
        self._hits = 0
        self._misses = 0


def memoize(
    fn: Callable[..., Any] | None = None,
    *,
    policy: CachePolicyPort | None = None,
    key: KeyFunc | None = None,
) -> Any:
    """
    Wrap fn so repeated calls with structurally equal arguments are cached.

    Usable directly (memoize(fn)), as @memoize, or as
    @memoize(policy=LRUPolicy(128)).
    """
    if fn is None:
        return lambda f: Memoized(f, policy=policy, key=key)
    return Memoized(fn, policy=policy, key=key)


# --- Throttle ---


class Throttled:
    """
    Rate-limited wrapper.

    The first call runs immediately. Later calls run only once wait_ms has
    passed since the last call that actually ran; others return None.
    """

    def __init__(
        self,
        fn: Callable[..., Any],
        wait_ms: float,
        *,
        clock: ClockPort | None = None,
    ) -> None:
        functools.update_wrapper(self, fn)
        self._fn = fn
        self._wait_s = _check_wait(wait_ms) / 1000.0
        self._clock = clock or SystemClock()
        self._last_call: float | None = None

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        now = self._clock.monotonic()
        if self._last_call is None or now - self._last_call >= self._wait_s:
            self._last_call = now
            return self._fn(*args, **kwargs)

        logger.debug("Throttled call to %s dropped", _name(self._fn))
        return None

    def reset(self) -> None:
        """Forget the last call so the next one runs immediately."""
        self._last_call = None


def throttle(fn: Callable[..., Any], wait_ms: float, *, clock: ClockPort | None = None) -> Throttled:
    return Throttled(fn, wait_ms, clock=clock)


# --- Debounce ---


class Debounced:
    """
    Quiet-period wrapper.

    Each call cancels the pending invocation and re-arms the timer with the
    newest arguments. The function runs once wait_ms passes without a call.
    Calls return None.
    """

    def __init__(
        self,
        fn: Callable[..., Any],
        wait_ms: float,
        *,
        timer: TimerPort | None = None,
    ) -> None:
        functools.update_wrapper(self, fn)
        self._fn = fn
        self._wait_s = _check_wait(wait_ms) / 1000.0
        self._timer = timer or ThreadingTimerAdapter()
        self._lock = threading.Lock()
        self._handle: TimerHandle | None = None
        self._pending: tuple[tuple[Any, ...], dict[str, Any]] | None = None
        self._generation = 0

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        with self._lock:
            if self._handle is not None:
                self._handle.cancel()
                logger.debug("Debounce re-armed for %s", _name(self._fn))
            self._generation += 1
            generation = self._generation
            self._pending = (args, kwargs)
            self._handle = self._timer.schedule(self._wait_s, lambda: self._fire(generation))

    @property
    def pending(self) -> bool:
        """True while an invocation is scheduled."""
        return self._pending is not None

    def cancel(self) -> None:
        """Drop the pending invocation, if any."""
        with self._lock:
            self._take_pending()

    def flush(self) -> Any:
        """
        Run the pending invocation now.

        Returns the function's result, or None when nothing was pending.
        Exceptions propagate to the caller.
        """
        with self._lock:
            pending = self._take_pending()
        if pending is None:
            return None
        args, kwargs = pending
        return self._fn(*args, **kwargs)

    def _take_pending(self) -> tuple[tuple[Any, ...], dict[str, Any]] | None:
        if self._handle is not None:
            self._handle.cancel()
        pending = self._pending
        self._handle = None
        self._pending = None
        self._generation += 1
        return pending

    def _fire(self, generation: int) -> None:
        with self._lock:
            # A cancelled timer may already be running; only the newest arm fires
            if generation != self._generation or self._pending is None:
                return
            args, kwargs = self._pending
            self._pending = None
            self._handle = None

        logger.debug("Debounced call to %s firing", _name(self._fn))
        try:
            self._fn(*args, **kwargs)
        except Exception:
            logger.exception("Error in debounced call to %s", _name(self._fn))


def debounce(fn: Callable[..., Any], wait_ms: float, *, timer: TimerPort | None = None) -> Debounced:
    return Debounced(fn, wait_ms, timer=timer)


# --- Curry ---


def infer_arity(fn: Callable[..., Any]) -> int:
    """
    Count the leading positional parameters without defaults.

    Raises:
        ValueError: If fn has no inspectable signature.
    """
    try:
        params = inspect.signature(fn).parameters.values()
    except (TypeError, ValueError) as e:
        raise ValueError(f"Cannot infer arity of {fn!r}; pass arity explicitly") from e

    arity = 0
    for param in params:
        if param.kind not in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD):
            break
        if param.default is not param.empty:
            break
        arity += 1
    return arity


class Curried:
    """
    Partially-applicable wrapper.

    Arguments accumulate across calls until there are at least `arity` of
    them, then fn is called with all of them. Each partial application
    returns a new Curried; existing ones are never modified.
    """

    def __init__(
        self,
        fn: Callable[..., Any],
        arity: int | None = None,
        args: tuple[Any, ...] = (),
    ) -> None:
        if arity is None:
            arity = infer_arity(fn)
        if isinstance(arity, bool) or not isinstance(arity, int) or arity < 0:
            raise ValueError(f"arity must be a non-negative integer, got {arity!r}")
        functools.update_wrapper(self, fn)
        self._fn = fn
        self._arity = arity
        self._args = tuple(args)

    @property
    def arity(self) -> int:
        return self._arity

    @property
    def args(self) -> tuple[Any, ...]:
        return self._args

    def __call__(self, *more: Any) -> Any:
        args = self._args + more
        if len(args) >= self._arity:
            return self._fn(*args)
        return Curried(self._fn, self._arity, args)

    def __repr__(self) -> str:
        return f"<Curried {_name(self._fn)} {len(self._args)}/{self._arity}>"


def curry(fn: Callable[..., Any], arity: int | None = None) -> Curried:
    return Curried(fn, arity)


# --- Delay / Times ---


def delay(
    fn: Callable[..., Any],
    wait_ms: float,
    *args: Any,
    timer: TimerPort | None = None,
) -> TimerHandle:
    """
    Call fn(*args) once after wait_ms.

    Returns a handle whose cancel() stops the call if it has not run yet.
    """
    wait_s = _check_wait(wait_ms) / 1000.0

    def _run() -> None:
        try:
            fn(*args)
        except Exception:
            logger.exception("Error in delayed call to %s", _name(fn))

    return (timer or ThreadingTimerAdapter()).schedule(wait_s, _run)


def times(n: object, iteratee: Callable[[int], Any]) -> list[Any]:
    """[iteratee(0), ..., iteratee(n - 1)]; [] for a non-int or negative n."""
    if isinstance(n, bool) or not isinstance(n, int) or n < 0:
        return []
    return [iteratee(i) for i in range(n)]
