"""
Numbers component unit tests.
"""

from __future__ import annotations

import math
import random as stdlib_random

import pytest

from utilkit.components.numbers import (
    ClampInput,
    MeanInput,
    RandomInput,
    RoundInput,
    clamp,
    mean,
    random,
    round,
    run,
)


class TestClamp:
    """Test clamp."""

    def test_inside_range(self) -> None:
        assert clamp(15, 10, 20) == 15

    def test_below_and_above(self) -> None:
        assert clamp(5, 10, 20) == 10
        assert clamp(25, 10, 20) == 20

    def test_result_always_within_bounds(self) -> None:
        rng = stdlib_random.Random(7)
        for _ in range(500):
            lo = rng.uniform(-100, 100)
            hi = lo + rng.uniform(0, 100)
            n = rng.uniform(-300, 300)
            v = clamp(n, lo, hi)
            assert lo <= v <= hi

    def test_non_number_is_nan(self) -> None:
        assert math.isnan(clamp("5", 0, 10))
        assert math.isnan(clamp(True, 0, 10))


class TestRandom:
    """Test random."""

    def test_inclusive_integer_range(self) -> None:
        rng = stdlib_random.Random(42)
        seen = {random(1, 3, rng) for _ in range(200)}
        assert seen == {1, 2, 3}

    def test_fractional_bounds_are_tightened(self) -> None:
        rng = stdlib_random.Random(0)
        for _ in range(100):
            assert random(0.2, 2.9, rng) in (1, 2)

    def test_empty_interval_is_nan(self) -> None:
        assert math.isnan(random(5, 1))
        assert math.isnan(random(1.2, 1.8))

    def test_non_number_is_nan(self) -> None:
        assert math.isnan(random("a", 3))


class TestMean:
    """Test mean."""

    def test_mean(self) -> None:
        assert mean([1, 2, 3, 4, 5]) == 3
        assert mean((1.5, 2.5)) == 2.0

    def test_empty_and_invalid(self) -> None:
        assert math.isnan(mean([]))
        assert math.isnan(mean(None))
        assert math.isnan(mean("123"))
        assert math.isnan(mean([1, "2"]))

    def test_sum_too_large_for_float_is_nan(self) -> None:
        assert math.isnan(mean([10**400]))
        assert math.isnan(mean([10**400, 1]))


class TestRound:
    """Test round."""

    def test_precision(self) -> None:
        assert round(3.1415926, 2) == 3.14
        assert round(3.7) == 4.0

    def test_halves_go_up(self) -> None:
        assert round(2.5) == 3.0
        assert round(-2.5) == -2.0
        assert round(0.125, 2) == 0.13

    def test_negative_precision(self) -> None:
        assert round(1250, -2) == pytest.approx(1300)

    def test_non_number_is_nan(self) -> None:
        assert math.isnan(round(None))

    def test_overflowing_scale_returns_input(self) -> None:
        assert round(1e300, 10) == 1e300
        assert round(1.5, 400) == 1.5
        assert round(10**400) == 10**400

    def test_non_finite_values_pass_through(self) -> None:
        assert round(math.inf, 2) == math.inf
        assert math.isnan(round(math.nan, 2))

    def test_non_finite_precision_is_nan(self) -> None:
        assert math.isnan(round(1.0, math.nan))
        assert math.isnan(round(1.0, math.inf))

    def test_precision_below_float_range_rounds_to_zero(self) -> None:
        assert round(1234.5, -400) == 0.0


class TestRun:
    """Test validated entry points."""

    def test_clamp_success(self) -> None:
        result = run(ClampInput(n=5, lower=10, upper=20))
        assert result.success is True
        assert result.result == 10

    def test_clamp_inverted_bounds(self) -> None:
        result = run(ClampInput(n=5, lower=20, upper=10))
        assert result.success is False
        assert result.errors[0].code == "bounds_inverted"

    def test_clamp_reports_every_bad_field(self) -> None:
        result = run(ClampInput(n="x", lower=None, upper=1))
        assert [e.field for e in result.errors] == ["n", "lower"]

    def test_random_with_seeded_rng(self) -> None:
        result = run(RandomInput(low=1, high=1, rng=stdlib_random.Random(1)))
        assert result.result == 1

    def test_random_empty_interval(self) -> None:
        result = run(RandomInput(low=3, high=2))
        assert result.success is False
        assert result.errors[0].code == "bounds_inverted"

    def test_mean_empty(self) -> None:
        result = run(MeanInput(values=[]))
        assert result.success is False
        assert result.errors[0].code == "empty_values"

    def test_mean_points_at_bad_members(self) -> None:
        result = run(MeanInput(values=[1, "two", 3, None]))
        assert len(result.errors) == 2
        assert "values[1]" in result.errors[0].message

    def test_round_precision_must_be_int(self) -> None:
        result = run(RoundInput(n=1.234, precision=1.5))
        assert result.errors[0].code == "precision_invalid"

    def test_round_precision_out_of_range(self) -> None:
        result = run(RoundInput(n=1.5, precision=400))
        assert result.success is False
        assert result.errors[0].code == "precision_invalid"
        assert result.errors[0].field == "precision"

    def test_round_huge_int_is_accepted(self) -> None:
        result = run(RoundInput(n=10**400, precision=2))
        assert result.success is True
        assert result.result == 10**400


    def test_round_success(self) -> None:
        assert run(RoundInput(n=1.234, precision=1)).result == 1.2
