"""Named parameter presets with bundled data and external override support.

Presets are read from ``presets.yaml`` files found, in priority order, in:

1. the directories listed in ``$SPURGEAR_PRESETS`` (``:`` separated, ``;``
   on Windows)
2. the user config directory (``~/.config/spurgear/``)
3. the data bundled with the package

A preset defined in a higher priority file replaces the bundled preset of
the same name; all other presets remain available.

Example:
    export SPURGEAR_PRESETS="/path/to/my/presets"
"""

from __future__ import annotations

import math
import os
import sys
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from spurgear.cylinder import LighteningCylinderSpec
from spurgear.errors import PresetError
from spurgear.solver import GearSpec

__all__ = [
    "SPURGEAR_PRESETS",
    "PRESET_FILENAME",
    "KINDS",
    "load_presets",
    "list_presets",
    "get_preset",
    "gear_spec_from_preset",
    "cylinder_spec_from_preset",
    "clear_cache",
]

SPURGEAR_PRESETS = "SPURGEAR_PRESETS"
PRESET_FILENAME = "presets.yaml"
KINDS = ("gear", "cylinder")

_BUNDLED_DATA_DIR = Path(__file__).parent / "data"

_GEAR_KEYS = {"diametral_pitch", "pressure_angle", "num_teeth", "thickness"}
_CYLINDER_KEYS = {"inner_diameter", "outer_diameter", "thickness_y", "thickness_z", "num_support"}


def clear_cache() -> None:
    """Forget cached preset data, e.g. after editing a preset file."""
    _get_data_dirs.cache_clear()
    _load_presets_cached.cache_clear()


@lru_cache(maxsize=None)
def _get_data_dirs() -> tuple:
    dirs: List[Path] = []

    env_path = os.environ.get(SPURGEAR_PRESETS)
    if env_path:
        sep = ";" if sys.platform == "win32" else ":"
        for p in env_path.split(sep):
            p = p.strip()
            if p:
                path = Path(p).expanduser().resolve()
                if path.is_dir():
                    dirs.append(path)

    if sys.platform == "win32":
        config_base = Path(os.environ.get("APPDATA", "~")).expanduser()
    else:
        config_base = Path.home() / ".config"
    user_config = config_base / "spurgear"
    if user_config.is_dir():
        dirs.append(user_config)

    if _BUNDLED_DATA_DIR.is_dir():
        dirs.append(_BUNDLED_DATA_DIR)

    return tuple(dirs)


def _load_yaml(path: Path) -> Dict[str, Any]:
    with open(path, 'r', encoding='utf-8') as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise PresetError(f"Cannot parse preset file {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise PresetError(f"Invalid preset file {path}: expected a mapping at root")

    schema_version = str(data.get("schema_version", "1.0"))
    if not schema_version.startswith("1."):
        raise PresetError(
            f"Unsupported schema version '{schema_version}' in {path}. "
            f"Expected version 1.x"
        )

    for kind in KINDS:
        section = data.get(kind, {}) or {}
        if not isinstance(section, dict):
            raise PresetError(f"Invalid '{kind}' section in {path}: expected a mapping")
        data[kind] = section
    return data


@lru_cache(maxsize=8)
def _load_presets_cached(custom_path_str: Optional[str]) -> Dict[str, Dict[str, Any]]:
    if custom_path_str:
        custom_path = Path(custom_path_str)
        if not custom_path.exists():
            raise FileNotFoundError(f"Preset file not found: {custom_path}")
        files = [custom_path]
    else:
        # lowest priority first so later files override
        files = [d / PRESET_FILENAME for d in reversed(_get_data_dirs())]

    merged: Dict[str, Dict[str, Any]] = {kind: {} for kind in KINDS}
    for path in files:
        if not path.exists():
            continue
        data = _load_yaml(path)
        for kind in KINDS:
            for name, values in data[kind].items():
                if not isinstance(values, dict):
                    raise PresetError(f"{kind} preset '{name}' in {path} must be a mapping")
                merged[kind][str(name)] = dict(values, _source_path=str(path))
    return merged


def load_presets(custom_path: Optional[Path] = None) -> Dict[str, Dict[str, Any]]:
    """Return ``{"gear": {...}, "cylinder": {...}}`` preset tables."""
    custom_str = str(custom_path) if custom_path else None
    return _load_presets_cached(custom_str)


def list_presets(kind: str, custom_path: Optional[Path] = None) -> List[str]:
    if kind not in KINDS:
        raise PresetError(f"Unknown preset kind '{kind}'. Available: {list(KINDS)}")
    return sorted(load_presets(custom_path)[kind].keys())


def get_preset(kind: str, name: str, custom_path: Optional[Path] = None) -> Dict[str, Any]:
    if kind not in KINDS:
        raise PresetError(f"Unknown preset kind '{kind}'. Available: {list(KINDS)}")
    table = load_presets(custom_path)[kind]
    if name not in table:
        raise PresetError(
            f"No {kind} preset named '{name}'. Available: {sorted(table.keys())}"
        )
    return dict(table[name])


def _check_keys(kind: str, name: str, values: Dict[str, Any], required: set) -> None:
    missing = required - set(values)
    if missing:
        raise PresetError(f"{kind} preset '{name}' is missing {sorted(missing)}")


def _number(kind: str, name: str, values: Dict[str, Any], key: str, cast=float):
    try:
        return cast(values[key])
    except (TypeError, ValueError) as exc:
        raise PresetError(
            f"{kind} preset '{name}' has a non-numeric {key}: {values[key]!r}"
        ) from exc


def gear_spec_from_preset(name: str = "default", custom_path: Optional[Path] = None,
                          **overrides) -> GearSpec:
    """Build a :class:`GearSpec` from a preset; the preset angle is in degrees.

    Keyword overrides use the same names and units as the preset file.
    """
    values = get_preset("gear", name, custom_path)
    values.update({k: v for k, v in overrides.items() if v is not None})
    _check_keys("gear", name, values, _GEAR_KEYS)
    return GearSpec(
        diametral_pitch=_number("gear", name, values, "diametral_pitch"),
        num_teeth=_number("gear", name, values, "num_teeth", int),
        pressure_angle=math.radians(_number("gear", name, values, "pressure_angle")),
        thickness=_number("gear", name, values, "thickness"),
    )


def cylinder_spec_from_preset(name: str = "default", custom_path: Optional[Path] = None,
                              **overrides) -> LighteningCylinderSpec:
    values = get_preset("cylinder", name, custom_path)
    values.update({k: v for k, v in overrides.items() if v is not None})
    _check_keys("cylinder", name, values, _CYLINDER_KEYS)
    return LighteningCylinderSpec(
        inner_diameter=_number("cylinder", name, values, "inner_diameter"),
        outer_diameter=_number("cylinder", name, values, "outer_diameter"),
        thickness_y=_number("cylinder", name, values, "thickness_y"),
        thickness_z=_number("cylinder", name, values, "thickness_z"),
        num_support=_number("cylinder", name, values, "num_support", int),
    )
