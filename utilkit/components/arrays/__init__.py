"""
Arrays component - last, includes, without, chunk, unique, flatten, group_by.
"""

from ._impl import chunk, flatten, group_by, includes, is_array, last, unique, without
from .component import run
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

__all__ = [
    # Core helpers
    "last",
    "includes",
    "without",
    "chunk",
    "unique",
    "flatten",
    "group_by",
    "is_array",
    # Entry point
    "run",
    # Input models
    "LastInput",
    "IncludesInput",
    "WithoutInput",
    "ChunkInput",
    "UniqueInput",
    "FlattenInput",
    "GroupByInput",
    # Output models
    "ArrayOutput",
    "ArrayValidationError",
]
