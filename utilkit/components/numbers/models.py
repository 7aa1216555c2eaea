"""
Numbers component input/output models.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field

# --- Validation Error ---


@dataclass(frozen=True)
class NumberValidationError:
    """Numeric input validation error."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class ClampInput:
    """Input for clamping a number."""

    n: object
    lower: object
    upper: object


@dataclass(frozen=True)
class RandomInput:
    """Input for drawing a random integer."""

    low: object
    high: object
    rng: random.Random | None = None


@dataclass(frozen=True)
class MeanInput:
    """Input for averaging a sequence of numbers."""

    values: object


@dataclass(frozen=True)
class RoundInput:
    """Input for rounding to a fixed precision."""

    n: object
    precision: object = 0


# --- Output Models ---


@dataclass(frozen=True)
class NumberOutput:
    """Output for numeric operations."""

    result: float | int | None
    errors: list[NumberValidationError] = field(default_factory=list)
    success: bool = True
