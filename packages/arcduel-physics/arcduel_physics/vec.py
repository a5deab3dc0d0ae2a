"""Plane vector helpers operating on (x, y) tuples."""
from __future__ import annotations

import math

Vec = tuple[float, float]


def add(a: Vec, b: Vec) -> Vec:
    return (a[0] + b[0], a[1] + b[1])


def sub(a: Vec, b: Vec) -> Vec:
    return (a[0] - b[0], a[1] - b[1])


def scale(v: Vec, s: float) -> Vec:
    return (v[0] * s, v[1] * s)


def dot(a: Vec, b: Vec) -> float:
    return a[0] * b[0] + a[1] * b[1]


def magnitude(v: Vec) -> float:
    return math.hypot(v[0], v[1])


def distance(a: Vec, b: Vec) -> float:
    return math.hypot(b[0] - a[0], b[1] - a[1])


def midpoint(a: Vec, b: Vec) -> Vec:
    return ((a[0] + b[0]) / 2, (a[1] + b[1]) / 2)


def from_angle(angle: float, length: float) -> Vec:
    return (math.cos(angle) * length, math.sin(angle) * length)


def clamp_magnitude(v: Vec, max_mag: float) -> Vec:
    """Shorten *v* to *max_mag* along its own heading; shorter vectors pass through."""
    if magnitude(v) <= max_mag:
        return v
    return from_angle(math.atan2(v[1], v[0]), max_mag)
