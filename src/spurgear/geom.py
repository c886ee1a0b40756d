"""Planar point type and the handful of transforms the gear code needs.

Points are immutable; every transform returns new points.
"""

from __future__ import annotations

import math
from typing import Iterable, NamedTuple, Tuple

epsilon = 0.000005
pi2 = 2.0 * math.pi


class Point2D(NamedTuple):
    x: float
    y: float


PointSeq = Tuple[Point2D, ...]


def close(a: float, b: float) -> bool:
    """ are two scalars the same within epsilon
    """
    return abs(a - b) < epsilon


def mag(p: Point2D) -> float:
    """Distance of ``p`` from the origin."""
    return math.hypot(p.x, p.y)


def angle(p: Point2D) -> float:
    """Quadrant-correct polar angle of ``p`` in radians."""
    return math.atan2(p.y, p.x)


def polar(radius: float, theta: float) -> Point2D:
    return Point2D(radius * math.cos(theta), radius * math.sin(theta))


def dist(a: Point2D, b: Point2D) -> float:
    return math.hypot(a.x - b.x, a.y - b.y)


def rotate(p: Point2D, theta: float) -> Point2D:
    """Rotate ``p`` about the origin by ``theta`` radians."""
    c = math.cos(theta)
    s = math.sin(theta)
    return Point2D(p.x * c - p.y * s, p.x * s + p.y * c)


def rotate_all(points: Iterable[Point2D], theta: float) -> PointSeq:
    c = math.cos(theta)
    s = math.sin(theta)
    return tuple(Point2D(p.x * c - p.y * s, p.x * s + p.y * c) for p in points)


def mirror_x(points: Iterable[Point2D]) -> PointSeq:
    """Mirror points about the X axis (negate y)."""
    return tuple(Point2D(p.x, -p.y) for p in points)


def to_polar(points: Iterable[Point2D]) -> Tuple[Tuple[float, float], ...]:
    """Return ``(distance, angle)`` pairs for ``points``."""
    return tuple((mag(p), angle(p)) for p in points)


def from_polar(pairs: Iterable[Tuple[float, float]], offset: float = 0.0) -> PointSeq:
    return tuple(polar(r, a + offset) for r, a in pairs)


__all__ = [
    "Point2D",
    "PointSeq",
    "epsilon",
    "pi2",
    "close",
    "mag",
    "angle",
    "polar",
    "dist",
    "rotate",
    "rotate_all",
    "mirror_x",
    "to_polar",
    "from_polar",
]
