"""Viewport and camera-follow math."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from arcduel import Match, Point


@dataclass
class Viewport:
    """Size of the visible area in world units. Owned by the renderer."""

    width: float = 800.0
    height: float = 600.0

    def resize(self, width: float, height: float) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"viewport must be positive, got {width}x{height}")
        self.width = width
        self.height = height


def focus_point(match: Match) -> Point:
    """Midpoint of the pair while anyone is launched, else the active avatar."""
    if match.any_launched:
        first, second = match.avatars
        return ((first.x + second.x) / 2, (first.y + second.y) / 2)
    return match.active.position


def camera_target(match: Match, viewport: Viewport) -> Point:
    fx, fy = focus_point(match)
    return (fx - viewport.width / 2, fy - viewport.height / 2)


def smooth_toward(camera: Point, target: Point, factor: float) -> Point:
    return (
        camera[0] + (target[0] - camera[0]) * factor,
        camera[1] + (target[1] - camera[1]) * factor,
    )


def screen_to_world(point: Point, camera: Point) -> Point:
    return (point[0] + camera[0], point[1] + camera[1])


def world_to_screen(point: Point, camera: Point) -> Point:
    return (point[0] - camera[0], point[1] - camera[1])
