"""Phase transition functions.

Each ``advance_*`` function receives the match and the elapsed seconds of
the tick, mutates timers and avatar flags, and returns the phase the match
should be in afterwards.  ``complete_aim`` and ``enter_get_ready`` are the
shared transition effects used by timers, manual launches and the round
settle check.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from arcduel import Phase

if TYPE_CHECKING:
    from arcduel import Avatar, Match, MatchConfig

PhaseHandler = Callable[["Match", float, "MatchConfig"], Phase]


def complete_aim(match: Match, config: MatchConfig) -> Phase:
    """Lock in the active player's aim and pass control on.

    Player 0 hands over to player 1.  Player 1 starts the executing phase:
    both avatars take off and player 0 gets the first executing window.
    Control returns to player 0 rather than staying with player 1, who
    just aimed, so the executing windows always run 0 then 1.
    """
    match.turn_time_left = config.turn_time_limit
    if match.current_player == 0:
        match.current_player = 1
        match.phase = Phase.AIMING
    else:
        for avatar in match.avatars:
            avatar.launched = True
            avatar.frozen = False
        match.current_player = 0
        match.phase = Phase.EXECUTING
    return match.phase


def enter_get_ready(match: Match, config: MatchConfig) -> Phase:
    for avatar in match.avatars:
        avatar.aiming = False
        avatar.arc_set = False
        avatar.frozen = False
        avatar.air_jump_used = False
    match.current_player = 0
    match.turn_time_left = config.turn_time_limit
    match.get_ready_elapsed = 0.0
    match.phase = Phase.GET_READY
    return match.phase


def forfeit_aim(avatar: Avatar) -> None:
    """Timeout: the avatar launches with whatever it has, which is nothing."""
    avatar.velocity = (0.0, 0.0)
    avatar.arc_set = True
    avatar.aiming = False


def advance_get_ready(match: Match, dt: float, config: MatchConfig) -> Phase:
    match.get_ready_elapsed += dt
    if match.get_ready_elapsed < config.get_ready_duration:
        return Phase.GET_READY
    match.get_ready_elapsed = 0.0
    match.turn_time_left = config.turn_time_limit
    return Phase.AIMING


def advance_aiming(match: Match, dt: float, config: MatchConfig) -> Phase:
    match.turn_time_left -= dt
    if match.turn_time_left > 0:
        return Phase.AIMING
    forfeit_aim(match.active)
    return complete_aim(match, config)


def advance_executing(match: Match, dt: float, config: MatchConfig) -> Phase:
    # Each player only keeps a short window of control while executing.
    if match.turn_time_left > config.execute_window:
        match.turn_time_left = config.execute_window
    match.turn_time_left -= dt
    if match.turn_time_left > 0:
        return Phase.EXECUTING
    match.active.frozen = True
    match.active.aiming = False
    if match.current_player == 0:
        match.current_player = 1
        match.turn_time_left = config.turn_time_limit
        return Phase.EXECUTING
    if match.all_settled:
        return enter_get_ready(match, config)
    return Phase.EXECUTING


TRANSITIONS: dict[Phase, PhaseHandler] = {
    Phase.GET_READY: advance_get_ready,
    Phase.AIMING: advance_aiming,
    Phase.EXECUTING: advance_executing,
}
