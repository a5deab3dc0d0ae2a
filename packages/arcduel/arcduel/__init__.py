"""arcduel - Turn-based two-player projectile duel simulation."""

from arcduel.clock import Clock
from arcduel.config import MatchConfig
from arcduel.engine import Engine
from arcduel.match import Avatar, Match, Phase, check_winner, new_match, restart
from arcduel.types import Point, System, TickContext

__all__ = [
    "Avatar",
    "Clock",
    "Engine",
    "Match",
    "MatchConfig",
    "Phase",
    "Point",
    "System",
    "TickContext",
    "check_winner",
    "new_match",
    "restart",
]
