"""
Numeric helpers.

Functional Core - pure, total functions. Non-numeric input yields NaN
instead of raising. bool is never accepted as a number.
"""

from __future__ import annotations

import math
import random as _random
from collections.abc import Sequence
from numbers import Real


def is_number(value: object) -> bool:
    """Real number check that excludes bool."""
    return isinstance(value, Real) and not isinstance(value, bool)


def is_finite(value: float) -> bool:
    """math.isfinite that also accepts ints too large for a float."""
    try:
        return math.isfinite(value)
    except OverflowError:
        return True


def clamp(n: float, lower: float, upper: float) -> float:
    """Bound n to [lower, upper]."""
    if not (is_number(n) and is_number(lower) and is_number(upper)):
        return math.nan
    return min(max(n, lower), upper)


def random(low: float, high: float, rng: _random.Random | None = None) -> int | float:
    """
    Uniform integer in [ceil(low), floor(high)], both ends inclusive.

    Returns NaN when the interval holds no integer.
    """
    if not (is_number(low) and is_number(high)):
        return math.nan
    if not (is_finite(low) and is_finite(high)):
        return math.nan
    lo = math.ceil(low)
    hi = math.floor(high)
    if lo > hi:
        return math.nan
    return (rng or _random).randint(lo, hi)


def mean(values: object) -> float:
    """Arithmetic mean. NaN for empty, non-sequence or non-numeric input."""
    if not isinstance(values, Sequence) or isinstance(values, (str, bytes)):
        return math.nan
    if not values or not all(is_number(v) for v in values):
        return math.nan
    try:
        return sum(values) / len(values)
    except OverflowError:
        return math.nan


def round(n: float, precision: int = 0) -> float:
    """
    Round to `precision` decimal places, halves towards +infinity.

    round(2.5) == 3.0 and round(-2.5) == -2.0, unlike the builtin's
    round-half-to-even. Values that cannot be scaled without overflowing
    (infinities, NaN, 1e300 at ten places) come back unchanged. A
    non-finite precision yields NaN.
    """
    if not is_number(n) or not is_number(precision):
        return math.nan
    if not is_finite(precision):
        return math.nan
    if not is_finite(n):
        return n
    try:
        factor = 10**precision
        scaled = n * factor
        if not factor:
            # 10**precision underflowed; every finite n rounds to zero
            return 0.0
        if not is_finite(scaled):
            return n
        return math.floor(scaled + 0.5) / factor
    except OverflowError:
        return n
