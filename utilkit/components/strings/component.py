"""
Strings component - Text helpers with validated entry points.

Shell Layer - validates input and reports errors instead of silently
substituting neutral values.
"""

from __future__ import annotations

import logging

from utilkit.rules.models import UtilRules

from . import _impl
from .models import (
    CapitalizeInput,
    KebabCaseInput,
    PalindromeInput,
    StringOutput,
    StringValidationError,
    TruncateInput,
)

logger = logging.getLogger(__name__)


def _check_text(text: object) -> list[StringValidationError]:
    if isinstance(text, str):
        return []
    return [
        StringValidationError(
            code="text_not_string",
            message=f"Expected str, got {type(text).__name__}",
            field="text",
        )
    ]


def _failed(errors: list[StringValidationError]) -> StringOutput:
    logger.warning("String input rejected: %s", ", ".join(e.code for e in errors))
    return StringOutput(result=None, errors=errors, success=False)


def run_capitalize(inp: CapitalizeInput) -> StringOutput:
    """Capitalize text."""
    errors = _check_text(inp.text)
    if errors:
        return _failed(errors)
    return StringOutput(result=_impl.capitalize(inp.text))


def run_truncate(inp: TruncateInput, rules: UtilRules | None = None) -> StringOutput:
    """Truncate text, taking default length and suffix from rules."""
    rules = rules or UtilRules()
    length = rules.strings.truncate_length if inp.length is None else inp.length
    suffix = rules.strings.truncate_suffix if inp.suffix is None else inp.suffix

    errors = _check_text(inp.text)
    if isinstance(length, bool) or not isinstance(length, int) or length < 0:
        errors.append(
            StringValidationError(
                code="length_invalid",
                message="Length must be a non-negative integer",
                field="length",
            )
        )
    if not isinstance(suffix, str):
        errors.append(
            StringValidationError(
                code="suffix_not_string",
                message=f"Expected str suffix, got {type(suffix).__name__}",
                field="suffix",
            )
        )
    if errors:
        return _failed(errors)

    return StringOutput(result=_impl.truncate(inp.text, length, suffix))


def run_kebab_case(inp: KebabCaseInput) -> StringOutput:
    """Convert text to kebab-case."""
    errors = _check_text(inp.text)
    if errors:
        return _failed(errors)
    return StringOutput(result=_impl.kebab_case(inp.text))


def run_is_palindrome(inp: PalindromeInput) -> StringOutput:
    """Check whether text is a palindrome."""
    errors = _check_text(inp.text)
    if errors:
        return _failed(errors)
    return StringOutput(result=_impl.is_palindrome(inp.text))


def run(
    inp: CapitalizeInput | TruncateInput | KebabCaseInput | PalindromeInput,
    *,
    rules: UtilRules | None = None,
) -> StringOutput:
    """
    Main entry point for the strings component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, CapitalizeInput):
        return run_capitalize(inp)
    elif isinstance(inp, TruncateInput):
        return run_truncate(inp, rules)
    elif isinstance(inp, KebabCaseInput):
        return run_kebab_case(inp)
    elif isinstance(inp, PalindromeInput):
        return run_is_palindrome(inp)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
