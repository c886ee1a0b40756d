"""Sampling of the involute of a circle.

The involute is parametrised by the distance from the gear centre: for a
base circle of radius ``rb`` and a radius ``r > rb`` the unwound string has
length ``l = sqrt(r**2 - rb**2)``, the roll angle is ``l / rb`` and the polar
angle of the curve point is the roll angle less ``acos(rb / r)``.
"""

from __future__ import annotations

import math
from typing import Tuple

from spurgear.errors import DomainError, InvalidArgument
from spurgear.geom import Point2D

__all__ = [
    "point_at",
    "involute_origin",
    "sample_sequence",
]


def point_at(base_circle_radius: float, radius: float) -> Point2D:
    """Return the point of the involute at distance ``radius`` from the centre."""
    if base_circle_radius <= 0:
        raise InvalidArgument(f"base circle radius must be positive, got {base_circle_radius}")
    if radius <= base_circle_radius:
        raise DomainError(
            f"involute undefined at radius {radius} (base circle radius {base_circle_radius})"
        )
    l = math.sqrt(radius * radius - base_circle_radius * base_circle_radius)
    alpha = l / base_circle_radius
    theta = alpha - math.acos(base_circle_radius / radius)
    return Point2D(radius * math.cos(theta), radius * math.sin(theta))


def involute_origin(base_circle_radius: float) -> Point2D:
    """Start of the involute, where it leaves the base circle on the X axis."""
    if base_circle_radius <= 0:
        raise InvalidArgument(f"base circle radius must be positive, got {base_circle_radius}")
    return Point2D(base_circle_radius, 0.0)


def sample_sequence(
    base_circle_radius: float,
    start_radius: float,
    end_radius: float,
    count: int,
) -> Tuple[Point2D, ...]:
    """Sample ``count`` involute points equally spaced in radius.

    Both ``start_radius`` and ``end_radius`` are included.
    """
    if count < 2:
        raise InvalidArgument(f"need at least two samples, got {count}")
    if start_radius <= base_circle_radius:
        raise InvalidArgument(
            f"start radius {start_radius} must lie outside the base circle ({base_circle_radius})"
        )
    if end_radius < start_radius:
        raise InvalidArgument("end radius must not be smaller than start radius")

    step = (end_radius - start_radius) / (count - 1)
    points = [point_at(base_circle_radius, start_radius + step * i) for i in range(count - 1)]
    # last sample lands exactly on end_radius
    points.append(point_at(base_circle_radius, end_radius))
    return tuple(points)
