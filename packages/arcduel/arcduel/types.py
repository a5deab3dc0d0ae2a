"""Shared type aliases and protocols for the duel engine."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

Point = tuple[float, float]


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    dt: float
    elapsed: float
    request_stop: Callable[[], None]
    random: _random.Random


if TYPE_CHECKING:
    from arcduel.match import Match

System = Callable[["Match", TickContext], None]
