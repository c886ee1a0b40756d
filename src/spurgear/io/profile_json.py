"""JSON documents describing a computed tooth profile.

The document is plain data so it can be handed to an out-of-process CAD
adapter: the gear parameters, the derived diameters and every point the
adapter needs to draw one tooth and pattern it.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Sequence

from spurgear.errors import GearError
from spurgear.geom import Point2D, to_polar
from spurgear.solver import GearDerivedValues, GearSpec
from spurgear.tooth import ToothProfile

SCHEMA_ID = "spurgear-tooth-profile-v0.1"


def _point(pt: Optional[Point2D]) -> Optional[List[float]]:
    if pt is None:
        return None
    return [float(pt.x), float(pt.y)]


def _points(pts: Iterable[Point2D]) -> List[List[float]]:
    return [[float(p.x), float(p.y)] for p in pts]


def _point_from(components: Optional[Sequence[float]]) -> Optional[Point2D]:
    if components is None:
        return None
    return Point2D(float(components[0]), float(components[1]))


def profile_to_json(profile: ToothProfile, *, generator: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    spec = profile.spec
    doc: Dict[str, Any] = {
        "schema": SCHEMA_ID,
        "spec": {
            "diametral_pitch": float(spec.diametral_pitch),
            "num_teeth": int(spec.num_teeth),
            "pressure_angle": float(spec.pressure_angle),
            "thickness": float(spec.thickness),
        },
        "derived": profile.derived.as_dict(),
        "angles": {
            "pitch_point": profile.pitch_point_angle,
            "tooth_thickness": profile.tooth_thickness_angle,
            "index": profile.index_angle,
        },
        "flank_a": _points(profile.flank_a),
        "flank_b": _points(profile.flank_b),
        "root_point_a": _point(profile.root_point_a),
        "root_point_b": _point(profile.root_point_b),
        "outside_mid_point": _point(profile.outside_mid_point),
    }
    if generator:
        doc["generator"] = dict(generator)
    return doc


def profile_from_json(doc: Dict[str, Any]) -> ToothProfile:
    """Rebuild a :class:`ToothProfile` from :func:`profile_to_json` output."""
    if doc.get("schema") != SCHEMA_ID:
        raise GearError(f"unsupported profile schema: {doc.get('schema')!r}")

    spec = GearSpec(**doc["spec"])
    derived = GearDerivedValues(**doc["derived"])
    flank_a = tuple(_point_from(p) for p in doc["flank_a"])
    flank_b = tuple(_point_from(p) for p in doc["flank_b"])
    angles = doc["angles"]
    return ToothProfile(
        spec=spec,
        derived=derived,
        flank_a=flank_a,
        flank_b=flank_b,
        root_point_a=_point_from(doc.get("root_point_a")),
        root_point_b=_point_from(doc.get("root_point_b")),
        outside_mid_point=_point_from(doc["outside_mid_point"]),
        pitch_point_angle=angles["pitch_point"],
        tooth_thickness_angle=angles["tooth_thickness"],
        index_angle=angles["index"],
        polar_a=to_polar(flank_a),
        polar_b=to_polar(flank_b),
    )


__all__ = ["SCHEMA_ID", "profile_to_json", "profile_from_json"]
