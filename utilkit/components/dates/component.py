"""
Dates component - Date helpers with validated entry points.

Shell Layer - reports unparsable dates as errors.
"""

from __future__ import annotations

import logging

from utilkit.core.ports.time import ClockPort
from utilkit.rules.models import UtilRules

from . import _impl
from .models import (
    DateOutput,
    DateValidationError,
    DaysBetweenInput,
    FormatDateInput,
    IsTodayInput,
)

logger = logging.getLogger(__name__)


def _check_date(value: object, field_name: str) -> list[DateValidationError]:
    if _impl.to_datetime(value) is not None:
        return []
    return [
        DateValidationError(
            code="invalid_date",
            message=f"Cannot interpret {value!r} as a date",
            field=field_name,
        )
    ]


def _failed(errors: list[DateValidationError]) -> DateOutput:
    logger.warning("Date input rejected: %s", ", ".join(e.code for e in errors))
    return DateOutput(result=None, errors=errors, success=False)


def run_format_date(inp: FormatDateInput, rules: UtilRules | None = None) -> DateOutput:
    """Format a date, defaulting the pattern to rules.dates.default_pattern."""
    rules = rules or UtilRules()
    pattern = rules.dates.default_pattern if inp.pattern is None else inp.pattern

    errors = _check_date(inp.value, "value")
    if not isinstance(pattern, str):
        errors.append(
            DateValidationError(
                code="pattern_not_string",
                message=f"Expected str pattern, got {type(pattern).__name__}",
                field="pattern",
            )
        )
    if errors:
        return _failed(errors)
    return DateOutput(result=_impl.format_date(inp.value, pattern))


def run_is_today(inp: IsTodayInput, clock: ClockPort | None = None) -> DateOutput:
    """Check whether a date falls on the clock's current day."""
    errors = _check_date(inp.value, "value")
    if errors:
        return _failed(errors)
    return DateOutput(result=_impl.is_today(inp.value, clock=clock))


def run_days_between(inp: DaysBetweenInput) -> DateOutput:
    """Count whole days between two dates."""
    errors = _check_date(inp.a, "a") + _check_date(inp.b, "b")
    if errors:
        return _failed(errors)
    return DateOutput(result=_impl.days_between(inp.a, inp.b))


def run(
    inp: FormatDateInput | IsTodayInput | DaysBetweenInput,
    *,
    rules: UtilRules | None = None,
    clock: ClockPort | None = None,
) -> DateOutput:
    """
    Main entry point for the dates component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, FormatDateInput):
        return run_format_date(inp, rules)
    elif isinstance(inp, IsTodayInput):
        return run_is_today(inp, clock)
    elif isinstance(inp, DaysBetweenInput):
        return run_days_between(inp)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
