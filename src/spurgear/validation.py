"""Pre-flight checks for user supplied gear and cylinder parameters.

These mirror the input validation a command dialog performs before it
enables its OK button: a failed check means the build is never attempted.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List

from spurgear.errors import InvalidCylinderSpec, InvalidGearSpec

MIN_TEETH = 3
MIN_SUPPORTS = 2
MAX_PRESSURE_ANGLE = math.radians(30.0)


@dataclass
class CheckResult:
    ok: bool
    messages: List[str] = field(default_factory=list)

    def __bool__(self) -> bool:
        return self.ok


def parse_count(text: str) -> int:
    """Parse a tooth or support count typed as text.

    Only plain digit strings are accepted; anything else yields 0, which
    the checks below reject.
    """
    text = text.strip()
    if not text or not text.isdigit():
        return 0
    return int(text)


def check_gear_inputs(diametral_pitch: float, num_teeth: int,
                      pressure_angle: float, thickness: float) -> CheckResult:
    messages = []
    if num_teeth < MIN_TEETH:
        messages.append(f"number of teeth must be at least {MIN_TEETH}, got {num_teeth}")
    if diametral_pitch <= 0:
        messages.append(f"diametral pitch must be positive, got {diametral_pitch}")
    if thickness <= 0:
        messages.append(f"thickness must be positive, got {thickness}")
    if pressure_angle < 0 or pressure_angle > MAX_PRESSURE_ANGLE:
        messages.append(
            f"pressure angle must be between 0 and 30 degrees, got {math.degrees(pressure_angle):.4g}"
        )
    return CheckResult(not messages, messages)


def check_cylinder_inputs(inner_diameter: float, outer_diameter: float,
                          thickness_y: float, thickness_z: float,
                          num_support: int) -> CheckResult:
    messages = []
    if inner_diameter <= 0:
        messages.append(f"inner diameter must be positive, got {inner_diameter}")
    if outer_diameter <= 0:
        messages.append(f"outer diameter must be positive, got {outer_diameter}")
    if thickness_y <= 0:
        messages.append(f"support thickness must be positive, got {thickness_y}")
    if thickness_z < 0:
        messages.append(f"part thickness must not be negative, got {thickness_z}")
    if num_support < MIN_SUPPORTS:
        messages.append(f"number of supports must be at least {MIN_SUPPORTS}, got {num_support}")
    return CheckResult(not messages, messages)


def require_gear_inputs(spec) -> None:
    """Raise :class:`InvalidGearSpec` unless ``spec`` passes the gear checks."""
    result = check_gear_inputs(spec.diametral_pitch, spec.num_teeth,
                               spec.pressure_angle, spec.thickness)
    if not result:
        raise InvalidGearSpec("; ".join(result.messages))


def require_cylinder_inputs(spec) -> None:
    result = check_cylinder_inputs(spec.inner_diameter, spec.outer_diameter,
                                   spec.thickness_y, spec.thickness_z,
                                   spec.num_support)
    if not result:
        raise InvalidCylinderSpec("; ".join(result.messages))


__all__ = [
    "CheckResult",
    "MIN_TEETH",
    "MIN_SUPPORTS",
    "MAX_PRESSURE_ANGLE",
    "parse_count",
    "check_gear_inputs",
    "check_cylinder_inputs",
    "require_gear_inputs",
    "require_cylinder_inputs",
]
