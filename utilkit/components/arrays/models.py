"""
Arrays component input/output models.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable
from dataclasses import dataclass, field
from typing import Any

# --- Validation Error ---


@dataclass(frozen=True)
class ArrayValidationError:
    """Array input validation error."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class LastInput:
    """Input for getting the last element."""

    items: object


@dataclass(frozen=True)
class IncludesInput:
    """Input for a membership check."""

    items: object
    value: object


@dataclass(frozen=True)
class WithoutInput:
    """Input for removing values."""

    items: object
    values: tuple[object, ...] = ()


@dataclass(frozen=True)
class ChunkInput:
    """Input for chunking. Omitted size comes from rules."""

    items: object
    size: int | None = None


@dataclass(frozen=True)
class UniqueInput:
    """Input for de-duplication."""

    items: object


@dataclass(frozen=True)
class FlattenInput:
    """Input for flattening. Omitted depth comes from rules."""

    items: object
    depth: float | None = None


@dataclass(frozen=True)
class GroupByInput:
    """Input for grouping by a key function or field name."""

    items: object
    key: Callable[[Any], Any] | Hashable


# --- Output Models ---


@dataclass(frozen=True)
class ArrayOutput:
    """Output for array operations."""

    result: Any
    errors: list[ArrayValidationError] = field(default_factory=list)
    success: bool = True
