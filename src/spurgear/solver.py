"""Gear parameter solver for diametral-pitch spur gears."""

from __future__ import annotations

import math
from dataclasses import dataclass

from spurgear.errors import InvalidGearSpec

__all__ = [
    "GearSpec",
    "GearDerivedValues",
    "DEDENDUM_THRESHOLD",
    "solve",
]

# The coarse/fine dedendum switch compares the diametral pitch against 20
# degrees expressed in radians.
DEDENDUM_THRESHOLD = math.radians(20.0)
COARSE_DEDENDUM_FACTOR = 1.157
FINE_DEDENDUM_FACTOR = 1.25


@dataclass(frozen=True)
class GearSpec:
    diametral_pitch: float
    num_teeth: int
    pressure_angle: float
    thickness: float = 2.0

    def derived(self) -> "GearDerivedValues":
        return solve(self.diametral_pitch, self.num_teeth, self.pressure_angle)


@dataclass(frozen=True)
class GearDerivedValues:
    pitch_diameter: float
    dedendum: float
    root_diameter: float
    base_circle_diameter: float
    outside_diameter: float

    @property
    def pitch_radius(self) -> float:
        return self.pitch_diameter / 2.0

    @property
    def root_radius(self) -> float:
        return self.root_diameter / 2.0

    @property
    def base_circle_radius(self) -> float:
        return self.base_circle_diameter / 2.0

    @property
    def outside_radius(self) -> float:
        return self.outside_diameter / 2.0

    def as_dict(self) -> dict:
        return {
            "pitch_diameter": self.pitch_diameter,
            "dedendum": self.dedendum,
            "root_diameter": self.root_diameter,
            "base_circle_diameter": self.base_circle_diameter,
            "outside_diameter": self.outside_diameter,
        }


def solve(diametral_pitch: float, num_teeth: int, pressure_angle: float) -> GearDerivedValues:
    """Derive the reference diameters of a spur gear.

    ``pressure_angle`` is in radians.  Raises :class:`InvalidGearSpec` for a
    non-positive pitch or tooth count.
    """
    if diametral_pitch <= 0:
        raise InvalidGearSpec(f"diametral pitch must be positive, got {diametral_pitch}")
    if num_teeth <= 0:
        raise InvalidGearSpec(f"tooth count must be positive, got {num_teeth}")

    pitch_dia = num_teeth / diametral_pitch
    if diametral_pitch < DEDENDUM_THRESHOLD:
        dedendum = COARSE_DEDENDUM_FACTOR / diametral_pitch
    else:
        dedendum = FINE_DEDENDUM_FACTOR / diametral_pitch

    return GearDerivedValues(
        pitch_diameter=pitch_dia,
        dedendum=dedendum,
        root_diameter=pitch_dia - 2 * dedendum,
        base_circle_diameter=pitch_dia * math.cos(pressure_angle),
        outside_diameter=(num_teeth + 2) / diametral_pitch,
    )
