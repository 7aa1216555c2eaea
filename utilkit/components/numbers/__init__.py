"""
Numbers component - clamp, random, mean, round.
"""

from ._impl import clamp, is_number, mean, random, round
from .component import run, run_clamp, run_mean, run_random, run_round
from .models import (
    ClampInput,
    MeanInput,
    NumberOutput,
    NumberValidationError,
    RandomInput,
    RoundInput,
)

__all__ = [
    # Core helpers
    "clamp",
    "random",
    "mean",
    "round",
    "is_number",
    # Entry points
    "run",
    "run_clamp",
    "run_random",
    "run_mean",
    "run_round",
    # Input models
    "ClampInput",
    "RandomInput",
    "MeanInput",
    "RoundInput",
    # Output models
    "NumberOutput",
    "NumberValidationError",
]
