from datetime import datetime

import pytest

from utilkit.adapters.clock import FrozenClock, SystemClock


def test_system_clock():
    clock = SystemClock()
    now = clock.now()
    assert isinstance(now, datetime)
    # Sanity check: is it close to real now?
    real_now = datetime.now()
    diff = abs((real_now - now).total_seconds())
    assert diff < 1.0 # Should be very fast


def test_system_clock_monotonic_never_goes_back():
    clock = SystemClock()
    first = clock.monotonic()
    assert clock.monotonic() >= first


def test_frozen_clock_only_moves_when_advanced():
    clock = FrozenClock(datetime(2023, 7, 1, 12, 0))
    assert clock.now() == datetime(2023, 7, 1, 12, 0)
    assert clock.monotonic() == 0.0

    clock.advance(2, ms=500)

    assert clock.monotonic() == 2.5
    assert clock.now() == datetime(2023, 7, 1, 12, 0, 2, 500000)


def test_frozen_clock_set_now_keeps_monotonic():
    clock = FrozenClock()
    clock.advance(1)
    clock.set_now(datetime(2030, 1, 1))
    assert clock.now() == datetime(2030, 1, 1)
    assert clock.monotonic() == 1.0


def test_frozen_clock_rejects_going_back():
    with pytest.raises(ValueError):
        FrozenClock().advance(-1)
