"""System factories for flight integration and impact resolution."""
from __future__ import annotations

import math
from typing import TYPE_CHECKING, Callable

from arcduel import Phase, check_winner
from arcduel_signal import cues

from arcduel_physics.ballistics import advance_avatar
from arcduel_physics.impact import Impact, resolve_impact

if TYPE_CHECKING:
    from arcduel import Match, MatchConfig, TickContext
    from arcduel_signal import SignalBus


def make_flight_system(
    config: MatchConfig,
    bus: SignalBus | None = None,
) -> Callable[["Match", "TickContext"], None]:
    """Integrate every launched, unfrozen avatar and land it on the floor.

    Runs in every phase, including after the match is over. Steps are per
    tick; elapsed time does not scale them.
    """

    def flight_system(match: "Match", ctx: "TickContext") -> None:
        for avatar in match.avatars:
            if advance_avatar(avatar, config) and bus is not None:
                bus.publish(cues.LAND)

    return flight_system


def make_impact_system(
    config: MatchConfig,
    bus: SignalBus | None = None,
    on_impact: Callable[["Match", "TickContext", Impact], None] | None = None,
) -> Callable[["Match", "TickContext"], None]:
    """Check the avatar pair once per tick while executing.

    Skipped entirely once the match is over; the tick that ends the match
    still completes its bounce and effects.
    """

    def impact_system(match: "Match", ctx: "TickContext") -> None:
        if match.phase is not Phase.EXECUTING or match.game_over:
            return
        first, second = match.avatars
        impact = resolve_impact(first, second, config)
        if impact is None:
            return
        check_winner(match)
        if on_impact is not None:
            on_impact(match, ctx, impact)
        if bus is None or not impact.approaching:
            return
        bus.publish(cues.COLLISION)
        if impact.base_damage > config.min_damage:
            bus.publish(cues.DAMAGE)
        if match.game_over:
            bus.publish(cues.GAMEOVER)
        x, y = impact.contact
        bus.request_particles(x, y, math.floor(impact.base_damage * 2))

    return impact_system
