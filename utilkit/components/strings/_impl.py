"""
String helpers.

Functional Core - pure, total functions. Non-string input yields "" (or
False for predicates) instead of raising.
"""

from __future__ import annotations

import re

_CAMEL_BOUNDARY = re.compile(r"([a-z])([A-Z])")
_WHITESPACE = re.compile(r"\s+")
_NON_ALNUM = re.compile(r"[^a-z0-9]")


def capitalize(text: object) -> str:
    """Uppercase the first character and lowercase the rest."""
    if not isinstance(text, str) or not text:
        return ""
    return text[0].upper() + text[1:].lower()


def truncate(text: object, length: int = 30, suffix: str = "...") -> str:
    """
    Shorten text to at most `length` characters, ending with `suffix`.

    Text that already fits is returned unchanged. A length that is not an
    int, or a suffix that is not a string, yields "".
    """
    if not isinstance(text, str):
        return ""
    if isinstance(length, bool) or not isinstance(length, int) or not isinstance(suffix, str):
        return ""
    if len(text) <= length:
        return text
    return text[: max(length - len(suffix), 0)] + suffix


def kebab_case(text: object) -> str:
    """helloWorld / "hello World" -> hello-world."""
    if not isinstance(text, str):
        return ""
    text = _CAMEL_BOUNDARY.sub(r"\1-\2", text)
    return _WHITESPACE.sub("-", text).lower()


def is_palindrome(text: object) -> bool:
    """
    Check whether text reads the same backwards.

    Only ASCII letters and digits are compared, case-insensitively.
    """
    if not isinstance(text, str):
        return False
    cleaned = _NON_ALNUM.sub("", text.lower())
    if not cleaned:
        return False
    return cleaned == cleaned[::-1]
