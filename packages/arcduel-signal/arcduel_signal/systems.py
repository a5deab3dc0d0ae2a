"""System factory for end-of-tick signal delivery."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from arcduel_signal.bus import SignalBus

if TYPE_CHECKING:
    from arcduel import Match, TickContext


def make_signal_system(bus: SignalBus) -> Callable[[Match, TickContext], None]:
    def signal_system(match: Match, ctx: TickContext) -> None:
        bus.flush()

    return signal_system
