"""
Dates component - format_date, is_today, days_between.
"""

from ._impl import days_between, format_date, is_today, to_datetime
from .component import run, run_days_between, run_format_date, run_is_today
from .models import (
    DateOutput,
    DateValidationError,
    DaysBetweenInput,
    FormatDateInput,
    IsTodayInput,
)

__all__ = [
    # Core helpers
    "format_date",
    "is_today",
    "days_between",
    "to_datetime",
    # Entry points
    "run",
    "run_format_date",
    "run_is_today",
    "run_days_between",
    # Input models
    "FormatDateInput",
    "IsTodayInput",
    "DaysBetweenInput",
    # Output models
    "DateOutput",
    "DateValidationError",
]
