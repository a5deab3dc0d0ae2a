"""Per-tick ballistic integration, floor containment and trajectory preview."""
from __future__ import annotations

from typing import TYPE_CHECKING, Iterator

from arcduel_physics.vec import Vec

if TYPE_CHECKING:
    from arcduel import Avatar, MatchConfig


def integrate(position: Vec, velocity: Vec, gravity: float) -> tuple[Vec, Vec]:
    """One explicit step: gravity into vy, then velocity into position."""
    vx, vy = velocity[0], velocity[1] + gravity
    return (position[0] + vx, position[1] + vy), (vx, vy)


def clamp_to_floor(avatar: Avatar, floor_y: float) -> bool:
    """Rest *avatar* on the floor if it sank below it. Returns True on landing."""
    if avatar.position[1] + avatar.radius <= floor_y:
        return False
    avatar.position = (avatar.position[0], floor_y - avatar.radius)
    avatar.velocity = (0.0, 0.0)
    avatar.launched = False
    avatar.air_jump_used = False
    return True


def advance_avatar(avatar: Avatar, config: MatchConfig) -> bool:
    """Move an in-flight avatar by one tick. Returns True if it landed."""
    if not avatar.in_flight:
        return False
    avatar.position, avatar.velocity = integrate(
        avatar.position, avatar.velocity, config.gravity
    )
    return clamp_to_floor(avatar, config.floor_y)


class Trajectory:
    """Predicted flight path, recomputed on every iteration.

    Yields at most ``steps`` points and stops after the first one below
    the floor. Display only; never feeds back into the simulation.
    """

    __slots__ = ("start", "velocity", "gravity", "floor_y", "steps")

    def __init__(
        self,
        start: Vec,
        velocity: Vec,
        gravity: float,
        floor_y: float,
        steps: int = 60,
    ) -> None:
        self.start = start
        self.velocity = velocity
        self.gravity = gravity
        self.floor_y = floor_y
        self.steps = steps

    def __iter__(self) -> Iterator[Vec]:
        position, velocity = self.start, self.velocity
        for _ in range(self.steps):
            position, velocity = integrate(position, velocity, self.gravity)
            yield position
            if position[1] > self.floor_y:
                return

    def points(self) -> list[Vec]:
        return list(self)
