#!/usr/bin/env python3
"""
Command line front end for spurgear.

Usage:
    python -m spurgear gear [--preset NAME] [--pitch P] [--teeth N]
                            [--pressure-angle DEG] [--thickness T]
                            [--json FILE] [--dxf FILE] [--full]
    python -m spurgear cylinder [--preset NAME] [--inner D] [--outer D]
                                [--thickness-y T] [--thickness-z T]
                                [--supports N] [--dxf FILE]
    python -m spurgear presets

Examples:
    # Print the tooth profile of the default 24 tooth gear as JSON
    python -m spurgear gear --json -

    # Write a complete 12 tooth gear outline to DXF
    python -m spurgear gear --preset pinion --dxf pinion.dxf --full
"""

import argparse
import json
import sys
from pathlib import Path

from spurgear import __version__
from spurgear.cylinder import cylinder_geometry
from spurgear.errors import GearError
from spurgear.ezdxf_exporter import write_dxf
from spurgear.io.profile_json import profile_to_json
from spurgear.presets import (
    KINDS,
    cylinder_spec_from_preset,
    gear_spec_from_preset,
    get_preset,
    list_presets,
)
from spurgear.sketch import body_name, cylinder_sketch, gear_sketch, tooth_sketch
from spurgear.tooth import INVOLUTE_POINT_COUNT, build_tooth
from spurgear.validation import (
    check_cylinder_inputs,
    check_gear_inputs,
    parse_count,
)


def _report_invalid(result) -> int:
    print("Error: invalid inputs", file=sys.stderr)
    for message in result.messages:
        print(f"  {message}", file=sys.stderr)
    return 1


def cmd_gear(args) -> int:
    """Build one tooth profile and write the requested outputs."""
    spec = gear_spec_from_preset(
        args.preset,
        args.preset_file,
        diametral_pitch=args.pitch,
        num_teeth=args.teeth,
        pressure_angle=args.pressure_angle,
        thickness=args.thickness,
    )
    result = check_gear_inputs(spec.diametral_pitch, spec.num_teeth,
                               spec.pressure_angle, spec.thickness)
    if not result:
        return _report_invalid(result)

    profile = build_tooth(spec, point_count=args.points)
    derived = profile.derived

    if args.verbose:
        print(body_name(derived), file=sys.stderr)
        for key, value in derived.as_dict().items():
            print(f"  {key}: {value:.6g}", file=sys.stderr)
        print(f"  root segments: {'yes' if profile.has_root_segments else 'no'}",
              file=sys.stderr)

    if args.json:
        doc = profile_to_json(profile, generator={"name": "spurgear", "version": __version__})
        text = json.dumps(doc, indent=2)
        if args.json == "-":
            print(text)
        else:
            Path(args.json).write_text(text + "\n", encoding="utf-8")

    if args.dxf:
        entities = gear_sketch(profile) if args.full else tooth_sketch(profile)
        path = write_dxf(entities, args.dxf)
        print(f"Wrote {len(entities)} entities to {path}")

    if not args.json and not args.dxf:
        print(f"{body_name(derived)}: outside diameter {derived.outside_diameter:.6g}, "
              f"root diameter {derived.root_diameter:.6g}")
    return 0


def cmd_cylinder(args) -> int:
    spec = cylinder_spec_from_preset(
        args.preset,
        args.preset_file,
        inner_diameter=args.inner,
        outer_diameter=args.outer,
        thickness_y=args.thickness_y,
        thickness_z=args.thickness_z,
        num_support=args.supports,
    )
    result = check_cylinder_inputs(spec.inner_diameter, spec.outer_diameter,
                                   spec.thickness_y, spec.thickness_z,
                                   spec.num_support)
    if not result:
        return _report_invalid(result)

    geometry = cylinder_geometry(spec)
    if args.verbose:
        radii = ", ".join(f"{r:.6g}" for r in geometry.ring_radii)
        print(f"ring radii: {radii}", file=sys.stderr)

    if args.dxf:
        entities = cylinder_sketch(geometry)
        path = write_dxf(entities, args.dxf)
        print(f"Wrote {len(entities)} entities to {path}")
    else:
        print(f"Lightening cylinder: {spec.num_support} supports, "
              f"ring radii {geometry.ring_radii[0]:.6g}-{geometry.ring_radii[3]:.6g}")
    return 0


def cmd_presets(args) -> int:
    for kind in KINDS:
        print(f"{kind}:")
        for name in list_presets(kind, args.preset_file):
            values = get_preset(kind, name, args.preset_file)
            source = values.pop("_source_path", "")
            shown = ", ".join(f"{k}={v}" for k, v in values.items())
            print(f"  {name}: {shown}")
            if args.verbose:
                print(f"    from {source}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spurgear",
        description="Compute involute spur gear and lightening cylinder sketch geometry.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--preset-file", type=Path, default=None,
                        help="Read presets from this YAML file only")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Print derived values to stderr")
    sub = parser.add_subparsers(dest="command", required=True)

    gear = sub.add_parser("gear", help="Build an involute spur gear tooth profile")
    gear.add_argument("--preset", default="default", help="Gear preset name")
    gear.add_argument("--pitch", type=float, default=None, help="Diametral pitch")
    gear.add_argument("--teeth", type=parse_count, default=None, help="Number of teeth")
    gear.add_argument("--pressure-angle", type=float, default=None,
                      help="Pressure angle in degrees")
    gear.add_argument("--thickness", type=float, default=None, help="Gear thickness")
    gear.add_argument("--points", type=int, default=INVOLUTE_POINT_COUNT,
                      help="Samples per involute flank")
    gear.add_argument("--json", metavar="FILE", default=None,
                      help="Write the profile as JSON ('-' for stdout)")
    gear.add_argument("--dxf", metavar="FILE", default=None, help="Write a DXF sketch")
    gear.add_argument("--full", action="store_true",
                      help="Pattern the tooth round the whole gear in the DXF output")
    gear.set_defaults(func=cmd_gear)

    cyl = sub.add_parser("cylinder", help="Build lightening cylinder sketch geometry")
    cyl.add_argument("--preset", default="default", help="Cylinder preset name")
    cyl.add_argument("--inner", type=float, default=None, help="Inner diameter")
    cyl.add_argument("--outer", type=float, default=None, help="Outer diameter")
    cyl.add_argument("--thickness-y", type=float, default=None,
                     help="Thickness of the support material")
    cyl.add_argument("--thickness-z", type=float, default=None, help="Part thickness")
    cyl.add_argument("--supports", type=parse_count, default=None, help="Number of supports")
    cyl.add_argument("--dxf", metavar="FILE", default=None, help="Write a DXF sketch")
    cyl.set_defaults(func=cmd_cylinder)

    presets = sub.add_parser("presets", help="List available presets")
    presets.set_defaults(func=cmd_presets)

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return args.func(args)
    except (GearError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
