"""
Numbers component - Numeric helpers with validated entry points.

Shell Layer - reports invalid input as errors instead of returning NaN.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from . import _impl
from .models import (
    ClampInput,
    MeanInput,
    NumberOutput,
    NumberValidationError,
    RandomInput,
    RoundInput,
)

logger = logging.getLogger(__name__)

# Beyond this 10**precision no longer fits in a float
MAX_PRECISION = 308


def _check_numbers(**named: object) -> list[NumberValidationError]:
    errors: list[NumberValidationError] = []
    for name, value in named.items():
        # value != value is the NaN test that also works for huge ints
        if not _impl.is_number(value) or value != value:
            errors.append(
                NumberValidationError(
                    code="not_a_number",
                    message=f"{name} must be a real number, got {value!r}",
                    field=name,
                )
            )
    return errors


def _failed(errors: list[NumberValidationError]) -> NumberOutput:
    logger.warning("Numeric input rejected: %s", ", ".join(e.code for e in errors))
    return NumberOutput(result=None, errors=errors, success=False)


def run_clamp(inp: ClampInput) -> NumberOutput:
    """Clamp n into [lower, upper]."""
    errors = _check_numbers(n=inp.n, lower=inp.lower, upper=inp.upper)
    if not errors and inp.lower > inp.upper:  # type: ignore[operator]
        errors.append(
            NumberValidationError(
                code="bounds_inverted",
                message=f"lower ({inp.lower}) is greater than upper ({inp.upper})",
                field="lower",
            )
        )
    if errors:
        return _failed(errors)
    return NumberOutput(result=_impl.clamp(inp.n, inp.lower, inp.upper))  # type: ignore[arg-type]


def run_random(inp: RandomInput) -> NumberOutput:
    """Draw a random integer from [ceil(low), floor(high)]."""
    errors = _check_numbers(low=inp.low, high=inp.high)
    if errors:
        return _failed(errors)

    result = _impl.random(inp.low, inp.high, inp.rng)  # type: ignore[arg-type]
    if isinstance(result, float) and math.isnan(result):
        return _failed(
            [
                NumberValidationError(
                    code="bounds_inverted",
                    message=f"No integer lies in [{inp.low}, {inp.high}]",
                    field="low",
                )
            ]
        )
    return NumberOutput(result=result)


def run_mean(inp: MeanInput) -> NumberOutput:
    """Average a sequence of numbers."""
    values = inp.values
    if not isinstance(values, Sequence) or isinstance(values, (str, bytes)):
        return _failed(
            [
                NumberValidationError(
                    code="not_a_number",
                    message=f"values must be a sequence of numbers, got {type(values).__name__}",
                    field="values",
                )
            ]
        )
    if not values:
        return _failed(
            [NumberValidationError(code="empty_values", message="values is empty", field="values")]
        )

    bad = [i for i, v in enumerate(values) if not _impl.is_number(v)]
    if bad:
        return _failed(
            [
                NumberValidationError(
                    code="not_a_number",
                    message=f"values[{i}] is not a real number",
                    field="values",
                )
                for i in bad
            ]
        )
    return NumberOutput(result=_impl.mean(values))


def run_round(inp: RoundInput) -> NumberOutput:
    """Round n half-up to the given precision."""
    errors = _check_numbers(n=inp.n)
    if isinstance(inp.precision, bool) or not isinstance(inp.precision, int):
        errors.append(
            NumberValidationError(
                code="precision_invalid",
                message="precision must be an integer",
                field="precision",
            )
        )
    elif abs(inp.precision) > MAX_PRECISION:
        errors.append(
            NumberValidationError(
                code="precision_invalid",
                message=f"precision must be within ±{MAX_PRECISION}, got {inp.precision}",
                field="precision",
            )
        )
    if errors:
        return _failed(errors)
    return NumberOutput(result=_impl.round(inp.n, inp.precision))  # type: ignore[arg-type]


def run(inp: ClampInput | RandomInput | MeanInput | RoundInput) -> NumberOutput:
    """
    Main entry point for the numbers component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, ClampInput):
        return run_clamp(inp)
    elif isinstance(inp, RandomInput):
        return run_random(inp)
    elif isinstance(inp, MeanInput):
        return run_mean(inp)
    elif isinstance(inp, RoundInput):
        return run_round(inp)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
