"""
Objects component - keys, values, pick, omit, deep_clone.
"""

from ._impl import deep_clone, keys, omit, pick, values
from .component import run
from .models import (
    DeepCloneInput,
    KeysInput,
    ObjectOutput,
    ObjectValidationError,
    OmitInput,
    PickInput,
    ValuesInput,
)

__all__ = [
    # Core helpers
    "keys",
    "values",
    "pick",
    "omit",
    "deep_clone",
    # Entry point
    "run",
    # Input models
    "KeysInput",
    "ValuesInput",
    "PickInput",
    "OmitInput",
    "DeepCloneInput",
    # Output models
    "ObjectOutput",
    "ObjectValidationError",
]
