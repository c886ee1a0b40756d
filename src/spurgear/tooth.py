"""Construction of one involute tooth gap.

The builder samples one involute flank, rotates it so that its crossing of
the pitch circle sits half a tooth-thickness angle below the X axis, mirrors
it to get the opposing flank, and records the anchor points needed to close
the outline with straight root segments and a tip arc.  Everything is
returned as immutable values; a host adapter (or :mod:`spurgear.sketch`)
turns them into curves.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Tuple

from spurgear.errors import InvalidArgument
from spurgear.geom import (
    Point2D,
    PointSeq,
    angle,
    from_polar,
    mirror_x,
    polar,
    rotate_all,
    to_polar,
)
from spurgear.involute import involute_origin, point_at, sample_sequence
from spurgear.solver import GearDerivedValues, GearSpec, solve

__all__ = [
    "INVOLUTE_POINT_COUNT",
    "ToothProfile",
    "build_tooth",
    "index_flanks",
    "pattern_angles",
]

INVOLUTE_POINT_COUNT = 10

PolarSeq = Tuple[Tuple[float, float], ...]


@dataclass(frozen=True)
class ToothProfile:
    spec: GearSpec
    derived: GearDerivedValues
    flank_a: PointSeq
    flank_b: PointSeq
    root_point_a: Optional[Point2D]
    root_point_b: Optional[Point2D]
    outside_mid_point: Point2D
    pitch_point_angle: float
    tooth_thickness_angle: float
    index_angle: float
    polar_a: PolarSeq
    polar_b: PolarSeq

    @property
    def has_root_segments(self) -> bool:
        return self.root_point_a is not None


def _involute_or_origin(base_radius: float, radius: float) -> Point2D:
    # At the base circle the involute degenerates to its starting point.
    if radius == base_radius:
        return involute_origin(base_radius)
    return point_at(base_radius, radius)


def _sample_flank(derived: GearDerivedValues, count: int) -> PointSeq:
    rb = derived.base_circle_radius
    ro = derived.outside_radius
    step = (ro - rb) / (count - 1)
    if count == 2:
        rest = (point_at(rb, ro),)
    else:
        rest = sample_sequence(rb, rb + step, ro, count - 1)
    return (involute_origin(rb),) + rest


def build_tooth(spec: GearSpec, *, point_count: int = INVOLUTE_POINT_COUNT) -> ToothProfile:
    """Compute the flanks and anchor points of one tooth gap for ``spec``.

    Raises :class:`~spurgear.errors.InvalidGearSpec` or
    :class:`~spurgear.errors.DomainError` without producing partial output.
    """
    if point_count < 2:
        raise InvalidArgument(f"need at least two involute points, got {point_count}")

    derived = solve(spec.diametral_pitch, spec.num_teeth, spec.pressure_angle)
    rb = derived.base_circle_radius
    if rb <= 0:
        # cos(pressure_angle) <= 0 leaves no base circle to unwind from
        raise InvalidArgument(f"pressure angle {spec.pressure_angle} gives no base circle")

    raw = _sample_flank(derived, point_count)

    pitch_point = _involute_or_origin(rb, derived.pitch_radius)
    pitch_point_angle = angle(pitch_point)

    tooth_thickness_angle = -math.pi / spec.num_teeth

    flank_a = rotate_all(raw, -pitch_point_angle + tooth_thickness_angle / 2)
    flank_b = mirror_x(flank_a)

    polar_a = to_polar(flank_a)
    polar_b = to_polar(flank_b)

    root_point_a = root_point_b = None
    if derived.base_circle_diameter >= derived.root_diameter:
        root_point_a = polar(derived.root_radius, polar_a[0][1])
        root_point_b = polar(derived.root_radius, polar_b[0][1])

    return ToothProfile(
        spec=spec,
        derived=derived,
        flank_a=flank_a,
        flank_b=flank_b,
        root_point_a=root_point_a,
        root_point_b=root_point_b,
        outside_mid_point=Point2D(derived.outside_radius, 0.0),
        pitch_point_angle=pitch_point_angle,
        tooth_thickness_angle=tooth_thickness_angle,
        index_angle=-2 * tooth_thickness_angle,
        polar_a=polar_a,
        polar_b=polar_b,
    )


def index_flanks(profile: ToothProfile, steps: int = 1) -> Tuple[PointSeq, PointSeq]:
    """Flanks of the gap ``steps`` positions further round the gear.

    Rebuilt from the stored polar pairs so repeated indexing does not
    accumulate rotation error.
    """
    offset = steps * profile.index_angle
    return from_polar(profile.polar_a, offset), from_polar(profile.polar_b, offset)


def pattern_angles(count: int, start: float = 0.0) -> Tuple[float, ...]:
    """Instance angles of a full circular pattern with ``count`` copies."""
    if count < 1:
        raise InvalidArgument(f"pattern count must be at least 1, got {count}")
    step = 2 * math.pi / count
    return tuple(start + step * i for i in range(count))
