"""Avatar/avatar impact: separation, asymmetric damage and elastic bounce."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from arcduel_physics import vec
from arcduel_physics.collision import circle_vs_circle

if TYPE_CHECKING:
    from arcduel import Avatar, MatchConfig


@dataclass(frozen=True)
class Impact:
    """Outcome of one resolved overlap. Not stored on the match."""

    normal: vec.Vec
    depth: float
    speed: float
    base_damage: float
    damage: tuple[float, float]
    impulse: float
    contact: vec.Vec

    @property
    def approaching(self) -> bool:
        return self.speed <= 0.0


def split_damage(
    base: float, speed_a: float, speed_b: float, config: MatchConfig
) -> tuple[float, float]:
    """Share *base* between two bodies; a clearly faster body is the attacker."""
    if speed_a > speed_b * config.dominance_ratio:
        return base * config.glancing_share, base
    if speed_b > speed_a * config.dominance_ratio:
        return base, base * config.glancing_share
    return base * config.even_share, base * config.even_share


def _take(avatar: Avatar, amount: float) -> None:
    avatar.health = max(0.0, min(avatar.max_health, avatar.health - amount))


def resolve_impact(first: Avatar, second: Avatar, config: MatchConfig) -> Impact | None:
    """Resolve an overlap between *first* and *second*, mutating both.

    Bodies are pushed apart evenly and damaged whether or not they are
    still approaching. The bounce impulse applies only to approaching
    bodies (equal masses).
    """
    hit = circle_vs_circle(
        first.position, first.radius, second.position, second.radius
    )
    if hit is None:
        return None
    normal, depth = hit

    push = vec.scale(normal, depth * 0.5)
    first.position = vec.sub(first.position, push)
    second.position = vec.add(second.position, push)

    speed = vec.dot(vec.sub(second.velocity, first.velocity), normal)
    base = max(config.min_damage, abs(speed))
    damage = split_damage(
        base, vec.magnitude(first.velocity), vec.magnitude(second.velocity), config
    )
    _take(first, damage[0])
    _take(second, damage[1])

    impulse = 0.0
    if speed <= 0.0:
        impulse = -(1.0 + config.restitution) * speed / 2
        kick = vec.scale(normal, impulse)
        first.velocity = vec.sub(first.velocity, kick)
        second.velocity = vec.add(second.velocity, kick)

    return Impact(
        normal=normal,
        depth=depth,
        speed=speed,
        base_damage=base,
        damage=damage,
        impulse=impulse,
        contact=vec.midpoint(first.position, second.position),
    )
