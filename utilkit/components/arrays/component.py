"""
Arrays component - Sequence helpers with validated entry points.

Shell Layer - rejects non-array input with an error instead of treating
it as empty.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable

from utilkit.rules.models import UtilRules

from . import _impl
from .models import (
    ArrayOutput,
    ArrayValidationError,
    ChunkInput,
    FlattenInput,
    GroupByInput,
    IncludesInput,
    LastInput,
    UniqueInput,
    WithoutInput,
)

logger = logging.getLogger(__name__)

ArrayInput = (
    LastInput
    | IncludesInput
    | WithoutInput
    | ChunkInput
    | UniqueInput
    | FlattenInput
    | GroupByInput
)


def _check_items(items: object) -> list[ArrayValidationError]:
    if _impl.is_array(items):
        return []
    return [
        ArrayValidationError(
            code="not_an_array",
            message=f"Expected list or tuple, got {type(items).__name__}",
            field="items",
        )
    ]


def _failed(errors: list[ArrayValidationError]) -> ArrayOutput:
    logger.warning("Array input rejected: %s", ", ".join(e.code for e in errors))
    return ArrayOutput(result=None, errors=errors, success=False)


def _check_chunk(inp: ChunkInput, rules: UtilRules) -> ArrayOutput:
    size = rules.arrays.chunk_size if inp.size is None else inp.size
    errors = _check_items(inp.items)
    if isinstance(size, bool) or not isinstance(size, int) or size < 1:
        errors.append(
            ArrayValidationError(
                code="size_invalid",
                message="size must be a positive integer",
                field="size",
            )
        )
    if errors:
        return _failed(errors)
    return ArrayOutput(result=_impl.chunk(inp.items, size))


def _check_flatten(inp: FlattenInput, rules: UtilRules) -> ArrayOutput:
    depth = rules.arrays.flatten_depth if inp.depth is None else inp.depth
    errors = _check_items(inp.items)
    if not _impl.is_valid_depth(depth):
        errors.append(
            ArrayValidationError(
                code="depth_invalid",
                message="depth must be a non-negative integer or math.inf",
                field="depth",
            )
        )
    if errors:
        return _failed(errors)
    return ArrayOutput(result=_impl.flatten(inp.items, depth))


def _check_group_by(inp: GroupByInput) -> ArrayOutput:
    errors = _check_items(inp.items)
    if not callable(inp.key) and not isinstance(inp.key, Hashable):
        errors.append(
            ArrayValidationError(
                code="key_invalid",
                message="key must be callable or a hashable field name",
                field="key",
            )
        )
    if errors:
        return _failed(errors)
    return ArrayOutput(result=_impl.group_by(inp.items, inp.key))


def run(inp: ArrayInput, *, rules: UtilRules | None = None) -> ArrayOutput:
    """
    Main entry point for the arrays component.

    Dispatches to appropriate handler based on input type.
    """
    rules = rules or UtilRules()

    if isinstance(inp, ChunkInput):
        return _check_chunk(inp, rules)
    if isinstance(inp, FlattenInput):
        return _check_flatten(inp, rules)
    if isinstance(inp, GroupByInput):
        return _check_group_by(inp)

    if not isinstance(inp, (LastInput, IncludesInput, WithoutInput, UniqueInput)):
        raise ValueError(f"Unknown input type: {type(inp)}")

    errors = _check_items(inp.items)
    if errors:
        return _failed(errors)

    if isinstance(inp, LastInput):
        return ArrayOutput(result=_impl.last(inp.items))
    elif isinstance(inp, IncludesInput):
        return ArrayOutput(result=_impl.includes(inp.items, inp.value))
    elif isinstance(inp, WithoutInput):
        return ArrayOutput(result=_impl.without(inp.items, *inp.values))
    else:
        return ArrayOutput(result=_impl.unique(inp.items))
