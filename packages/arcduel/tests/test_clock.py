"""Tests for clock advancement, wall-clock marks and TickContext generation."""

import random

import pytest
from arcduel.clock import Clock
from arcduel.types import TickContext

_test_rng = random.Random(0)


def test_clock_starts_at_zero():
    clock = Clock()
    assert clock.tick_number == 0
    assert clock.elapsed == 0.0


def test_advance_increments_tick_number():
    clock = Clock()
    assert clock.advance(0.016) == 1
    assert clock.advance(0.016) == 2
    assert clock.tick_number == 2


def test_advance_accumulates_elapsed():
    clock = Clock()
    clock.advance(0.25)
    clock.advance(0.5)
    assert abs(clock.elapsed - 0.75) < 1e-9


def test_advance_rejects_negative_dt():
    clock = Clock()
    with pytest.raises(ValueError):
        clock.advance(-0.1)


def test_zero_dt_still_counts_a_tick():
    clock = Clock()
    clock.advance(0.0)
    assert clock.tick_number == 1
    assert clock.elapsed == 0.0


def test_first_mark_returns_zero():
    """No reference yet, so the first frame sees no elapsed time."""
    clock = Clock()
    assert clock.mark(10.0) == 0.0


def test_mark_measures_since_previous_mark():
    clock = Clock()
    clock.mark(10.0)
    assert abs(clock.mark(10.5) - 0.5) < 1e-9
    assert abs(clock.mark(10.75) - 0.25) < 1e-9


def test_mark_never_negative():
    clock = Clock()
    clock.mark(10.0)
    assert clock.mark(9.0) == 0.0


def test_mark_uses_time_fn_when_now_omitted():
    times = iter([1.0, 3.0])
    clock = Clock(time_fn=lambda: next(times))
    clock.mark()
    assert abs(clock.mark() - 2.0) < 1e-9


def test_realign_skips_gap():
    """After realign the next mark measures from the new reference."""
    clock = Clock()
    clock.mark(0.0)
    clock.realign(100.0)
    assert abs(clock.mark(100.1) - 0.1) < 1e-9


def test_context_returns_correct_values():
    clock = Clock()
    clock.advance(0.1)

    stop_called = []

    def stop_fn():
        stop_called.append(True)

    rng = random.Random(0)
    ctx = clock.context(0.1, stop_fn, rng)

    assert isinstance(ctx, TickContext)
    assert ctx.tick_number == 1
    assert abs(ctx.dt - 0.1) < 1e-9
    assert abs(ctx.elapsed - 0.1) < 1e-9
    assert ctx.random is rng

    ctx.request_stop()
    assert stop_called == [True]


def test_context_is_frozen():
    clock = Clock()
    ctx = clock.context(0.1, lambda: None, _test_rng)
    with pytest.raises(AttributeError):
        ctx.tick_number = 99  # type: ignore[misc]

