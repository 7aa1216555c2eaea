"""
Strings component - Capitalize, truncate, kebab-case, palindrome check.
"""

from ._impl import capitalize, is_palindrome, kebab_case, truncate
from .component import (
    run,
    run_capitalize,
    run_is_palindrome,
    run_kebab_case,
    run_truncate,
)
from .models import (
    CapitalizeInput,
    KebabCaseInput,
    PalindromeInput,
    StringOutput,
    StringValidationError,
    TruncateInput,
)

__all__ = [
    # Core helpers
    "capitalize",
    "truncate",
    "kebab_case",
    "is_palindrome",
    # Entry points
    "run",
    "run_capitalize",
    "run_truncate",
    "run_kebab_case",
    "run_is_palindrome",
    # Input models
    "CapitalizeInput",
    "TruncateInput",
    "KebabCaseInput",
    "PalindromeInput",
    # Output models
    "StringOutput",
    "StringValidationError",
]
