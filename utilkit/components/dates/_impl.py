"""
Date helpers.

Functional Core - pure, total functions. Accepted date-like values:
datetime, date, ISO-8601 strings and epoch seconds (local time).
Anything else is invalid and yields "", False or NaN.

Timezone-aware values are converted to local time before their
calendar components are read.
"""

from __future__ import annotations

import math
import re
from datetime import date, datetime, time

from utilkit.adapters.clock import SystemClock
from utilkit.core.ports.time import ClockPort

_TOKENS = re.compile(r"YYYY|MM|DD|HH|mm|ss")


def to_datetime(value: object) -> datetime | None:
    """Coerce a date-like value to a naive local datetime, or None."""
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, date):
        dt = datetime.combine(value, time())
    elif isinstance(value, str):
        try:
            dt = datetime.fromisoformat(value.strip())
        except ValueError:
            return None
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            dt = datetime.fromtimestamp(value)
        except (OverflowError, OSError, ValueError):
            return None
    else:
        return None

    if dt.tzinfo is not None:
        dt = dt.astimezone().replace(tzinfo=None)
    return dt


def format_date(value: object, pattern: str = "YYYY-MM-DD") -> str:
    """
    Render YYYY, MM, DD, HH, mm and ss tokens of pattern.

    Every occurrence of a token is replaced; other text is kept as-is.
    """
    dt = to_datetime(value)
    if dt is None or not isinstance(pattern, str):
        return ""

    parts = {
        "YYYY": f"{dt.year:04d}",
        "MM": f"{dt.month:02d}",
        "DD": f"{dt.day:02d}",
        "HH": f"{dt.hour:02d}",
        "mm": f"{dt.minute:02d}",
        "ss": f"{dt.second:02d}",
    }
    return _TOKENS.sub(lambda m: parts[m.group(0)], pattern)


def is_today(value: object, *, clock: ClockPort | None = None) -> bool:
    dt = to_datetime(value)
    if dt is None:
        return False
    return dt.date() == (clock or SystemClock()).now().date()


def days_between(a: object, b: object) -> int | float:
    """Whole calendar days between a and b, ignoring time of day. Always >= 0."""
    first = to_datetime(a)
    second = to_datetime(b)
    if first is None or second is None:
        return math.nan
    return abs((first.date() - second.date()).days)
