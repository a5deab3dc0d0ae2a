"""Clock and TickContext for the frame-driven engine."""

import random
import time
from typing import Callable

from arcduel.types import TickContext


class Clock:
    """Counts ticks and simulated seconds.

    Elapsed time per tick is supplied by the caller.  ``mark()`` measures it
    against a wall-clock reference which ``realign()`` recaptures, e.g. after
    the engine was paused.
    """

    def __init__(self, time_fn: Callable[[], float] = time.monotonic) -> None:
        self._time_fn = time_fn
        self._tick_number = 0
        self._elapsed = 0.0
        self._last: float | None = None

    @property
    def tick_number(self) -> int:
        return self._tick_number

    @property
    def elapsed(self) -> float:
        return self._elapsed

    def mark(self, now: float | None = None) -> float:
        """Return seconds since the previous mark and move the reference."""
        if now is None:
            now = self._time_fn()
        last = self._last
        self._last = now
        if last is None:
            return 0.0
        return max(0.0, now - last)

    def realign(self, now: float | None = None) -> None:
        self._last = self._time_fn() if now is None else now

    def advance(self, dt: float) -> int:
        if dt < 0:
            raise ValueError(f"dt must be >= 0, got {dt}")
        self._tick_number += 1
        self._elapsed += dt
        return self._tick_number

    def context(
        self, dt: float, stop_fn: Callable[[], None], rng: random.Random
    ) -> TickContext:
        return TickContext(
            tick_number=self._tick_number,
            dt=dt,
            elapsed=self._elapsed,
            request_stop=stop_fn,
            random=rng,
        )
