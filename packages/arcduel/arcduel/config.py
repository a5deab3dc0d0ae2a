"""Match configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass

from arcduel.types import Point


@dataclass(frozen=True)
class MatchConfig:
    """Immutable tuning for a duel.

    Distances are in world units, velocities in units per tick and timers in
    seconds of elapsed frame time.

    Attributes:
        gravity: Added to vertical velocity every tick while in flight.
        max_force: Cap on the ground-launch force.
        drag_scale: Converts drag length into force.
        floor_y: World y of the floor line (y grows downward).
        turn_time_limit: Seconds a player has to aim.
        get_ready_duration: Pause between rounds.
        execute_window: Seconds each player keeps control while executing.
        air_force_ratio: First air correction cap, as a share of max_force.
        nudge_ratio: Scale of every later air correction.
        restitution: Bounciness of avatar/avatar impacts.
        min_damage: Floor on the damage of any impact.
        dominance_ratio: Speed ratio above which one avatar is the attacker.
        glancing_share: Share of the damage taken by the attacker.
        even_share: Share each avatar takes when speeds are comparable.
        trajectory_steps: Length of the aim preview.
        camera_smoothing: Fraction of the remaining distance covered per tick.
        avatar_radius: Radius of both avatars.
        max_health: Starting and maximum health.
        spawn_points: Starting positions of player 0 and player 1.
    """

    gravity: float = 0.3
    max_force: float = 20.0
    drag_scale: float = 0.1
    floor_y: float = 600.0
    turn_time_limit: float = 15.0
    get_ready_duration: float = 1.0
    execute_window: float = 2.0
    air_force_ratio: float = 0.6
    nudge_ratio: float = 0.1
    restitution: float = 0.8
    min_damage: float = 2.0
    dominance_ratio: float = 1.5
    glancing_share: float = 0.2
    even_share: float = 0.5
    trajectory_steps: int = 60
    camera_smoothing: float = 0.05
    avatar_radius: float = 20.0
    max_health: float = 100.0
    spawn_points: tuple[Point, Point] = ((200.0, 580.0), (600.0, 580.0))

    def __post_init__(self) -> None:
        for name in ("max_force", "drag_scale", "turn_time_limit",
                     "execute_window", "avatar_radius", "max_health"):
            value = getattr(self, name)
            if value <= 0:
                raise ValueError(f"{name} must be > 0, got {value}")
        if self.get_ready_duration < 0:
            raise ValueError(
                f"get_ready_duration must be >= 0, got {self.get_ready_duration}"
            )
        if not 0.0 <= self.restitution <= 1.0:
            raise ValueError(
                f"restitution must be in [0, 1], got {self.restitution}"
            )
        if not 0.0 < self.camera_smoothing <= 1.0:
            raise ValueError(
                f"camera_smoothing must be in (0, 1], got {self.camera_smoothing}"
            )
        if self.trajectory_steps < 1:
            raise ValueError(
                f"trajectory_steps must be >= 1, got {self.trajectory_steps}"
            )
        if len(self.spawn_points) != 2:
            raise ValueError(
                f"spawn_points needs exactly 2 entries, got {len(self.spawn_points)}"
            )
