"""
Objects component - Mapping helpers with validated entry points.

Shell Layer - rejects non-mapping input with an error instead of treating
it as empty.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from . import _impl
from .models import (
    DeepCloneInput,
    KeysInput,
    ObjectOutput,
    ObjectValidationError,
    OmitInput,
    PickInput,
    ValuesInput,
)

logger = logging.getLogger(__name__)


def run(inp: KeysInput | ValuesInput | PickInput | OmitInput | DeepCloneInput) -> ObjectOutput:
    """
    Main entry point for the objects component.

    Dispatches to appropriate handler based on input type.
    """
    if not isinstance(inp, (KeysInput, ValuesInput, PickInput, OmitInput, DeepCloneInput)):
        raise ValueError(f"Unknown input type: {type(inp)}")

    if not isinstance(inp.obj, Mapping):
        error = ObjectValidationError(
            code="not_a_mapping",
            message=f"Expected a mapping, got {type(inp.obj).__name__}",
            field="obj",
        )
        logger.warning("Object input rejected: %s", error.code)
        return ObjectOutput(result=None, errors=[error], success=False)

    if isinstance(inp, KeysInput):
        return ObjectOutput(result=_impl.keys(inp.obj))
    elif isinstance(inp, ValuesInput):
        return ObjectOutput(result=_impl.values(inp.obj))
    elif isinstance(inp, PickInput):
        return ObjectOutput(result=_impl.pick(inp.obj, *inp.names))
    elif isinstance(inp, OmitInput):
        return ObjectOutput(result=_impl.omit(inp.obj, *inp.names))
    else:
        return ObjectOutput(result=_impl.deep_clone(inp.obj))
