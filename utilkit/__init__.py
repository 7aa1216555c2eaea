"""
utilkit - lodash-style helpers for strings, numbers, sequences, mappings,
functions and dates.
"""

from utilkit.components.arrays import (
    chunk,
    flatten,
    group_by,
    includes,
    last,
    unique,
    without,
)
from utilkit.components.dates import days_between, format_date, is_today
from utilkit.components.functions import (
    curry,
    debounce,
    delay,
    memoize,
    throttle,
    times,
)
from utilkit.components.numbers import clamp, mean, random, round
from utilkit.components.objects import deep_clone, keys, omit, pick, values
from utilkit.components.strings import (
    capitalize,
    is_palindrome,
    kebab_case,
    truncate,
)

__version__ = "0.1.0"

__all__ = [
    # Strings
    "capitalize",
    "truncate",
    "kebab_case",
    "is_palindrome",
    # Numbers
    "clamp",
    "random",
    "mean",
    "round",
    # Arrays
    "last",
    "includes",
    "without",
    "chunk",
    "unique",
    "flatten",
    "group_by",
    # Objects
    "keys",
    "values",
    "pick",
    "omit",
    "deep_clone",
    # Functions
    "memoize",
    "throttle",
    "debounce",
    "curry",
    "delay",
    "times",
    # Dates
    "format_date",
    "is_today",
    "days_between",
]
