"""Engine - tick loop, pause gating, and lifecycle hooks."""

import os
import random
from typing import Callable

from arcduel.clock import Clock
from arcduel.config import MatchConfig
from arcduel.match import Match, new_match, restart
from arcduel.types import System, TickContext


class Engine:
    def __init__(
        self,
        config: MatchConfig | None = None,
        seed: int | None = None,
        clock: Clock | None = None,
    ) -> None:
        self._config = config if config is not None else MatchConfig()
        self._clock = clock if clock is not None else Clock()
        self._systems: list[System] = []
        self._start_hooks: list[Callable[[Match, TickContext], None]] = []
        self._stop_hooks: list[Callable[[Match, TickContext], None]] = []
        self._stop_requested: bool = False
        self._paused: bool = False

        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed
        self._rng = random.Random(seed)
        self._match = new_match(self._config, self._rng)

    @property
    def match(self) -> Match:
        return self._match

    @property
    def config(self) -> MatchConfig:
        return self._config

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def rng(self) -> random.Random:
        return self._rng

    @property
    def paused(self) -> bool:
        return self._paused

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def on_start(self, hook: Callable[[Match, TickContext], None]) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Callable[[Match, TickContext], None]) -> None:
        self._stop_hooks.append(hook)

    def _request_stop(self) -> None:
        self._stop_requested = True

    def pause(self) -> None:
        self._paused = True

    def resume(self, now: float | None = None) -> None:
        """Unpause and recapture the clock reference so the paused span is skipped."""
        self._paused = False
        self._clock.realign(now)

    def toggle_pause(self, now: float | None = None) -> bool:
        if self._paused:
            self.resume(now)
        else:
            self.pause()
        return self._paused

    def restart(self) -> None:
        restart(self._match, self._config, self._rng)

    def _tick(self, dt: float) -> None:
        self._clock.advance(dt)
        ctx = self._clock.context(dt, self._request_stop, self._rng)
        for system in self._systems:
            system(self._match, ctx)
            if self._stop_requested:
                break

    def step(self, dt: float) -> bool:
        """Run one tick with *dt* seconds elapsed. Returns False when paused."""
        if self._paused:
            return False
        self._stop_requested = False
        self._tick(dt)
        return True

    def frame(self, now: float | None = None) -> bool:
        """Run one tick timed against the clock's wall-clock reference."""
        if self._paused:
            return False
        return self.step(self._clock.mark(now))

    def run(self, n: int, dt: float) -> None:
        """Run *n* fixed-size ticks headlessly, honouring pause and stop requests."""
        self._stop_requested = False
        ctx = self._clock.context(dt, self._request_stop, self._rng)
        for hook in self._start_hooks:
            hook(self._match, ctx)

        for _ in range(n):
            if self._paused:
                break
            self._tick(dt)
            if self._stop_requested:
                break

        ctx = self._clock.context(dt, self._request_stop, self._rng)
        for hook in self._stop_hooks:
            hook(self._match, ctx)
