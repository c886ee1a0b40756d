"""Host-neutral sketch entities for gear and cylinder outlines.

A CAD adapter needs four kinds of curve to draw what the builders compute:
fitted splines through the involute samples, straight root segments, a
three point tip arc and full circles.  The entity classes below carry just
enough data for that, and :mod:`spurgear.ezdxf_exporter` writes them to DXF.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple, Union

from spurgear.cylinder import LighteningCylinderGeometry
from spurgear.geom import Point2D, rotate, rotate_all
from spurgear.solver import GearDerivedValues
from spurgear.tooth import ToothProfile, index_flanks, pattern_angles

__all__ = [
    "FittedSpline",
    "Line",
    "ThreePointArc",
    "Circle",
    "Entity",
    "ORIGIN",
    "tooth_sketch",
    "gear_sketch",
    "cylinder_sketch",
    "body_name",
]

ORIGIN = Point2D(0.0, 0.0)


@dataclass(frozen=True)
class FittedSpline:
    points: Tuple[Point2D, ...]

    @property
    def start(self) -> Point2D:
        return self.points[0]

    @property
    def end(self) -> Point2D:
        return self.points[-1]

    def rotated(self, theta: float) -> "FittedSpline":
        return FittedSpline(rotate_all(self.points, theta))


@dataclass(frozen=True)
class Line:
    start: Point2D
    end: Point2D

    def rotated(self, theta: float) -> "Line":
        return Line(rotate(self.start, theta), rotate(self.end, theta))


@dataclass(frozen=True)
class ThreePointArc:
    start: Point2D
    mid: Point2D
    end: Point2D

    def rotated(self, theta: float) -> "ThreePointArc":
        return ThreePointArc(rotate(self.start, theta), rotate(self.mid, theta),
                             rotate(self.end, theta))


@dataclass(frozen=True)
class Circle:
    center: Point2D
    radius: float

    def rotated(self, theta: float) -> "Circle":
        return Circle(rotate(self.center, theta), self.radius)


Entity = Union[FittedSpline, Line, ThreePointArc, Circle]


def _tooth_entities(profile: ToothProfile, flank_a, flank_b, theta: float = 0.0) -> List[Entity]:
    # flanks arrive already placed; anchor points are rotated to the same tooth
    spline1 = FittedSpline(tuple(flank_a))
    spline2 = FittedSpline(tuple(flank_b))
    entities: List[Entity] = [spline1, spline2]
    if profile.has_root_segments:
        entities.append(Line(rotate(profile.root_point_a, theta), spline1.start))
        entities.append(Line(rotate(profile.root_point_b, theta), spline2.start))
    entities.append(ThreePointArc(spline1.end, rotate(profile.outside_mid_point, theta), spline2.end))
    return entities


def tooth_sketch(profile: ToothProfile) -> List[Entity]:
    """Entities for a single tooth: flanks, root lines, tip arc, root circle."""
    entities = _tooth_entities(profile, profile.flank_a, profile.flank_b)
    entities.append(Circle(ORIGIN, profile.derived.root_radius))
    return entities


def gear_sketch(profile: ToothProfile) -> List[Entity]:
    """Entities for the whole gear: root circle plus every tooth."""
    entities: List[Entity] = [Circle(ORIGIN, profile.derived.root_radius)]
    for step, theta in enumerate(pattern_angles(profile.spec.num_teeth)):
        flank_a, flank_b = index_flanks(profile, step)
        entities.extend(_tooth_entities(profile, flank_a, flank_b, theta))
    return entities


def cylinder_sketch(geometry: LighteningCylinderGeometry) -> List[Entity]:
    """Entities for the rings and every support bar of a lightening cylinder."""
    entities: List[Entity] = [Circle(ORIGIN, r) for r in geometry.ring_radii]
    bar = geometry.support_bar
    edges = [Line(bar[i], bar[(i + 1) % len(bar)]) for i in range(len(bar))]
    for theta in geometry.support_angles:
        entities.extend(edge.rotated(theta) for edge in edges)
    return entities


def body_name(derived: GearDerivedValues) -> str:
    return f"Gear ({derived.pitch_diameter:g} pitch dia.)"
