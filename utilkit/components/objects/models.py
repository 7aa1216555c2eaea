"""
Objects component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

# --- Validation Error ---


@dataclass(frozen=True)
class ObjectValidationError:
    """Mapping input validation error."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class KeysInput:
    """Input for listing keys."""

    obj: object


@dataclass(frozen=True)
class ValuesInput:
    """Input for listing values."""

    obj: object


@dataclass(frozen=True)
class PickInput:
    """Input for selecting keys."""

    obj: object
    names: tuple[Any, ...] = ()


@dataclass(frozen=True)
class OmitInput:
    """Input for dropping keys."""

    obj: object
    names: tuple[Any, ...] = ()


@dataclass(frozen=True)
class DeepCloneInput:
    """Input for deep cloning a mapping."""

    obj: object


# --- Output Models ---


@dataclass(frozen=True)
class ObjectOutput:
    """Output for object operations."""

    result: Any
    errors: list[ObjectValidationError] = field(default_factory=list)
    success: bool = True
