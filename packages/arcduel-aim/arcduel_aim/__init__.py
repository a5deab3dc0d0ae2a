"""arcduel-aim - Drag-to-launch input for the duel engine."""
from __future__ import annotations

from arcduel_aim.launch import (
    AimGesture,
    Launch,
    LaunchKind,
    capped_velocity,
    plan_release,
    resolve_release,
)
from arcduel_aim.pointer import PointerController

__all__ = [
    "AimGesture",
    "Launch",
    "LaunchKind",
    "PointerController",
    "capped_velocity",
    "plan_release",
    "resolve_release",
]
