"""Drag gestures and the three release modes: ground launch, air jump, nudge."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from arcduel import Phase
from arcduel_physics import vec
from arcduel_turns import complete_aim

if TYPE_CHECKING:
    from arcduel import Avatar, Match, MatchConfig, Point


@dataclass
class AimGesture:
    """An in-progress drag. ``start`` stays anchored where the avatar was."""

    start: Point
    end: Point

    @property
    def delta(self) -> Point:
        return vec.sub(self.end, self.start)

    def force(self, drag_scale: float) -> float:
        return vec.magnitude(self.delta) * drag_scale


class LaunchKind(Enum):
    GROUND = "ground"
    AIR = "air"
    NUDGE = "nudge"


@dataclass(frozen=True)
class Launch:
    kind: LaunchKind
    velocity: Point


def capped_velocity(delta: Point, drag_scale: float, cap: float) -> Point:
    return vec.clamp_magnitude(vec.scale(delta, drag_scale), cap)


def plan_release(
    match: Match, avatar: Avatar, gesture: AimGesture, config: MatchConfig
) -> Launch | None:
    """Work out what releasing *gesture* would do to *avatar*, without doing it."""
    if match.game_over:
        return None
    if match.phase is Phase.AIMING:
        if avatar.launched:
            return None
        return Launch(
            LaunchKind.GROUND,
            capped_velocity(gesture.delta, config.drag_scale, config.max_force),
        )
    if match.phase is not Phase.EXECUTING or not avatar.launched:
        return None
    if avatar.air_jump_used:
        nudge = vec.scale(gesture.delta, config.drag_scale * config.nudge_ratio)
        return Launch(LaunchKind.NUDGE, vec.add(avatar.velocity, nudge))
    if not avatar.airborne(config.floor_y):
        return None
    return Launch(
        LaunchKind.AIR,
        capped_velocity(
            gesture.delta,
            config.drag_scale,
            config.max_force * config.air_force_ratio,
        ),
    )


def resolve_release(
    match: Match, gesture: AimGesture, config: MatchConfig
) -> Launch | None:
    """Apply a released gesture to the active avatar.

    The drag always ends. Only a ground launch passes the turn; releases
    that fit no mode change nothing else.
    """
    avatar = match.active
    avatar.aiming = False
    launch = plan_release(match, avatar, gesture, config)
    if launch is None:
        return None
    avatar.velocity = launch.velocity
    if launch.kind is LaunchKind.GROUND:
        avatar.arc_set = True
        complete_aim(match, config)
    elif launch.kind is LaunchKind.AIR:
        avatar.air_jump_used = True
    return launch
