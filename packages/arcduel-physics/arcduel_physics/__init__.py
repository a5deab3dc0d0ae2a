"""arcduel-physics - Ballistics and avatar impacts for the duel engine."""
from __future__ import annotations

from arcduel_physics import vec
from arcduel_physics.ballistics import Trajectory, advance_avatar, clamp_to_floor, integrate
from arcduel_physics.collision import circle_vs_circle
from arcduel_physics.impact import Impact, resolve_impact, split_damage
from arcduel_physics.systems import make_flight_system, make_impact_system

__all__ = [
    "Impact",
    "Trajectory",
    "advance_avatar",
    "circle_vs_circle",
    "clamp_to_floor",
    "integrate",
    "make_flight_system",
    "make_impact_system",
    "resolve_impact",
    "split_damage",
    "vec",
]
