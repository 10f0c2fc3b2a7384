from __future__ import annotations

import math

from config import MAX_FRAME_MS
from core.clock import SessionClock


def test_accumulator_carries_remainder() -> None:
    clock = SessionClock(physics_step_ms=30)
    assert clock.accumulate(45) == 1
    assert clock.accumulator == 15
    assert clock.accumulate(15) == 1
    assert clock.accumulator == 0
    assert clock.accumulate(10) == 0


def test_step_count_independent_of_frame_rate() -> None:
    fast = SessionClock(physics_step_ms=30)
    slow = SessionClock(physics_step_ms=30)

    fast_steps = sum(fast.accumulate(16.5) for _ in range(60))
    slow_steps = sum(slow.accumulate(33.0) for _ in range(30))

    assert fast_steps == slow_steps == 33


def test_sanitize_rejects_bad_values() -> None:
    clock = SessionClock()
    assert clock.sanitize(-5) == 0.0
    assert clock.sanitize(math.nan) == 0.0
    assert clock.sanitize(math.inf) == 0.0
    assert clock.sanitize(None) == 0.0
    assert clock.sanitize("soon") == 0.0
    assert clock.sanitize(10_000) == MAX_FRAME_MS
    assert clock.sanitize(16.7) == 16.7


def test_frame_elapsed_from_timestamps() -> None:
    clock = SessionClock()
    assert clock.frame_elapsed(1000.0) == 0.0
    assert clock.frame_elapsed(1016.0) == 16.0
    # a timestamp going backwards counts as no time
    assert clock.frame_elapsed(1010.0) == 0.0

    clock.resync()
    assert clock.frame_elapsed(9000.0) == 0.0
    assert clock.frame_elapsed(9020.0) == 20.0


def test_reset_clears_partial_step() -> None:
    clock = SessionClock(physics_step_ms=30)
    clock.accumulate(29)
    clock.reset()
    assert clock.accumulator == 0.0
    assert clock.accumulate(29) == 0


def test_bad_timestamp_counts_as_first_frame() -> None:
    clock = SessionClock()
    assert clock.frame_elapsed("later") == 0.0
    assert clock.frame_elapsed(None) == 0.0
    assert clock.frame_elapsed(1000.0) == 0.0
    assert clock.frame_elapsed(1016.0) == 16.0
    assert clock.frame_elapsed(math.nan) == 0.0
    # the next good timestamp starts over instead of measuring from 1016
    assert clock.frame_elapsed(5000.0) == 0.0
    assert clock.frame_elapsed(5010.0) == 10.0
