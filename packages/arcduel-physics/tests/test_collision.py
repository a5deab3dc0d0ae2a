"""Tests for circle overlap detection."""
from __future__ import annotations

import math

from arcduel_physics.collision import circle_vs_circle


class TestCircleVsCircle:
    def test_no_overlap(self) -> None:
        assert circle_vs_circle((0.0, 0.0), 20.0, (100.0, 0.0), 20.0) is None

    def test_touching_is_no_collision(self) -> None:
        assert circle_vs_circle((0.0, 0.0), 20.0, (40.0, 0.0), 20.0) is None

    def test_overlapping(self) -> None:
        result = circle_vs_circle((0.0, 0.0), 20.0, (30.0, 0.0), 20.0)
        assert result is not None
        normal, depth = result
        assert math.isclose(depth, 10.0)
        assert normal == (1.0, 0.0)

    def test_normal_points_from_a_to_b(self) -> None:
        result = circle_vs_circle((0.0, 0.0), 20.0, (-18.0, -24.0), 20.0)
        assert result is not None
        normal, depth = result
        assert math.isclose(normal[0], -0.6)
        assert math.isclose(normal[1], -0.8)
        assert math.isclose(depth, 10.0)

    def test_coincident_centers_are_not_resolvable(self) -> None:
        assert circle_vs_circle((5.0, 5.0), 20.0, (5.0, 5.0), 20.0) is None

    def test_unequal_radii(self) -> None:
        result = circle_vs_circle((0.0, 0.0), 5.0, (0.0, 12.0), 10.0)
        assert result is not None
        _, depth = result
        assert math.isclose(depth, 3.0)
