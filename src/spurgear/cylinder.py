"""Geometry of a lightening cylinder: two rings joined by radial supports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from spurgear.geom import Point2D
from spurgear.tooth import pattern_angles
from spurgear.validation import require_cylinder_inputs

__all__ = [
    "LighteningCylinderSpec",
    "LighteningCylinderGeometry",
    "SUPPORT_INSET",
    "cylinder_geometry",
]

# the support bar reaches 90% of the way into each ring wall
SUPPORT_INSET = 0.9


@dataclass(frozen=True)
class LighteningCylinderSpec:
    inner_diameter: float
    outer_diameter: float
    thickness_y: float
    thickness_z: float
    num_support: int


@dataclass(frozen=True)
class LighteningCylinderGeometry:
    spec: LighteningCylinderSpec
    ring_radii: Tuple[float, float, float, float]
    support_bar: Tuple[Point2D, Point2D, Point2D, Point2D]
    support_angles: Tuple[float, ...]

    @property
    def inner_ring(self) -> Tuple[float, float]:
        return self.ring_radii[0], self.ring_radii[1]

    @property
    def outer_ring(self) -> Tuple[float, float]:
        return self.ring_radii[2], self.ring_radii[3]


def cylinder_geometry(spec: LighteningCylinderSpec) -> LighteningCylinderGeometry:
    """Compute ring radii and the support bar outline for ``spec``.

    The bar is the rectangle drawn along +Y; ``support_angles`` are the
    pattern positions of its copies.
    """
    require_cylinder_inputs(spec)

    r_inner = spec.inner_diameter / 2.0
    r_outer = spec.outer_diameter / 2.0
    radii = (
        r_inner,
        r_inner + spec.thickness_y,
        r_outer - spec.thickness_y,
        r_outer,
    )

    px1 = spec.thickness_y / 2.0
    px2 = -spec.thickness_y / 2.0
    py1 = r_inner + SUPPORT_INSET * spec.thickness_y
    py2 = r_outer - SUPPORT_INSET * spec.thickness_y
    bar = (Point2D(px1, py1), Point2D(px1, py2), Point2D(px2, py2), Point2D(px2, py1))

    return LighteningCylinderGeometry(
        spec=spec,
        ring_radii=radii,
        support_bar=bar,
        support_angles=pattern_angles(spec.num_support),
    )
