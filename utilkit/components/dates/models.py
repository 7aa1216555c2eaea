"""
Dates component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

# --- Validation Error ---


@dataclass(frozen=True)
class DateValidationError:
    """Date input validation error."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class FormatDateInput:
    """Input for formatting a date. Omitted pattern comes from rules."""

    value: object
    pattern: str | None = None


@dataclass(frozen=True)
class IsTodayInput:
    """Input for checking a date against today."""

    value: object


@dataclass(frozen=True)
class DaysBetweenInput:
    """Input for counting days between two dates."""

    a: object
    b: object


# --- Output Models ---


@dataclass(frozen=True)
class DateOutput:
    """Output for date operations."""

    result: str | bool | int | None
    errors: list[DateValidationError] = field(default_factory=list)
    success: bool = True
