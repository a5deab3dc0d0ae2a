"""arcduel-camera - Follow camera for the duel engine."""
from __future__ import annotations

from arcduel_camera.camera import (
    Viewport,
    camera_target,
    focus_point,
    screen_to_world,
    smooth_toward,
    world_to_screen,
)
from arcduel_camera.systems import make_camera_system

__all__ = [
    "Viewport",
    "camera_target",
    "focus_point",
    "make_camera_system",
    "screen_to_world",
    "smooth_toward",
    "world_to_screen",
]
