"""arcduel-turns - Turn state machine for the duel engine."""
from __future__ import annotations

from arcduel_turns.phases import (
    TRANSITIONS,
    advance_aiming,
    advance_executing,
    advance_get_ready,
    complete_aim,
    enter_get_ready,
    forfeit_aim,
)
from arcduel_turns.systems import make_settle_system, make_turn_system

__all__ = [
    "TRANSITIONS",
    "advance_aiming",
    "advance_executing",
    "advance_get_ready",
    "complete_aim",
    "enter_get_ready",
    "forfeit_aim",
    "make_settle_system",
    "make_turn_system",
]
