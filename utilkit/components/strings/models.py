"""
Strings component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

# --- Validation Error ---


@dataclass(frozen=True)
class StringValidationError:
    """String input validation error."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class CapitalizeInput:
    """Input for capitalizing text."""

    text: object


@dataclass(frozen=True)
class TruncateInput:
    """Input for truncating text. Omitted settings come from rules."""

    text: object
    length: int | None = None
    suffix: str | None = None


@dataclass(frozen=True)
class KebabCaseInput:
    """Input for converting text to kebab-case."""

    text: object


@dataclass(frozen=True)
class PalindromeInput:
    """Input for the palindrome check."""

    text: object


# --- Output Models ---


@dataclass(frozen=True)
class StringOutput:
    """Output for string operations."""

    result: str | bool | None
    errors: list[StringValidationError] = field(default_factory=list)
    success: bool = True
