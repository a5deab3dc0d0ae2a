"""System factories for the turn state machine."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from arcduel import Phase
from arcduel_signal import cues

from arcduel_turns.phases import TRANSITIONS, enter_get_ready

if TYPE_CHECKING:
    from arcduel import Match, MatchConfig, TickContext
    from arcduel_signal import SignalBus

TransitionHook = Callable[["Match", "TickContext", Phase, Phase], None]


def _announce(
    match: Match,
    ctx: TickContext,
    old: Phase,
    new: Phase,
    bus: SignalBus | None,
    on_transition: TransitionHook | None,
) -> None:
    if old is new:
        return
    if new is Phase.GET_READY and bus is not None:
        bus.publish(cues.START)
    if on_transition is not None:
        on_transition(match, ctx, old, new)


def make_turn_system(
    config: MatchConfig,
    bus: SignalBus | None = None,
    on_transition: TransitionHook | None = None,
) -> Callable[[Match, TickContext], None]:
    """Return a system that advances phase timers by ``ctx.dt`` each tick.

    One handler runs per tick; a phase entered this tick starts counting on
    the next one.  Nothing advances once the match is over.
    """

    def turn_system(match: Match, ctx: TickContext) -> None:
        if match.game_over:
            return
        old = match.phase
        match.phase = TRANSITIONS[old](match, ctx.dt, config)
        _announce(match, ctx, old, match.phase, bus, on_transition)

    return turn_system


def make_settle_system(
    config: MatchConfig,
    bus: SignalBus | None = None,
    on_transition: TransitionHook | None = None,
) -> Callable[[Match, TickContext], None]:
    """End the executing phase early once no avatar is left in free flight."""

    def settle_system(match: Match, ctx: TickContext) -> None:
        if match.game_over or match.phase is not Phase.EXECUTING:
            return
        if not match.all_settled:
            return
        enter_get_ready(match, config)
        _announce(match, ctx, Phase.EXECUTING, match.phase, bus, on_transition)

    return settle_system
