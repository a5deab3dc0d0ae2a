"""Pure circle overlap detection."""
from __future__ import annotations

import math

from arcduel_physics.vec import Vec


def circle_vs_circle(
    pos_a: Vec,
    radius_a: float,
    pos_b: Vec,
    radius_b: float,
) -> tuple[Vec, float] | None:
    """Detect circle overlap. Returns (unit normal A→B, depth) or None.

    Coincident centres have no usable normal and are reported as no
    collision.
    """
    dx = pos_b[0] - pos_a[0]
    dy = pos_b[1] - pos_a[1]
    dist = math.hypot(dx, dy)
    r_sum = radius_a + radius_b
    if dist >= r_sum or dist == 0.0:
        return None
    return (dx / dist, dy / dist), r_sum - dist
