import math
import textwrap

import pytest

from spurgear import presets
from spurgear.errors import PresetError


@pytest.fixture(autouse=True)
def _fresh_cache(monkeypatch, tmp_path):
    monkeypatch.delenv(presets.SPURGEAR_PRESETS, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    presets.clear_cache()
    yield
    presets.clear_cache()


def _write(path, text):
    path.write_text(textwrap.dedent(text), encoding="utf-8")
    return path


def test_bundled_gear_default():
    spec = presets.gear_spec_from_preset()
    assert spec.diametral_pitch == 7.62
    assert spec.num_teeth == 24
    assert math.isclose(spec.pressure_angle, math.radians(20.0))
    assert spec.thickness == 2.0


def test_bundled_cylinder_default():
    spec = presets.cylinder_spec_from_preset()
    assert (spec.inner_diameter, spec.outer_diameter) == (1.0, 2.0)
    assert (spec.thickness_y, spec.thickness_z) == (0.2, 0.2)
    assert spec.num_support == 3


def test_list_presets():
    assert {"default", "thick", "pinion"} <= set(presets.list_presets("gear"))
    assert "default" in presets.list_presets("cylinder")
    with pytest.raises(PresetError):
        presets.list_presets("rack")


def test_overrides_skip_none():
    spec = presets.gear_spec_from_preset("thick", num_teeth=30, diametral_pitch=None)
    assert spec.num_teeth == 30
    assert spec.diametral_pitch == 7.62
    assert spec.thickness == 3.5


def test_unknown_preset():
    with pytest.raises(PresetError, match="Available"):
        presets.get_preset("gear", "nonesuch")


def test_environment_override(monkeypatch, tmp_path):
    custom = tmp_path / "custom"
    custom.mkdir()
    _write(custom / "presets.yaml", """\
        schema_version: "1.2"
        gear:
          default:
            diametral_pitch: 10.0
            pressure_angle: 14.5
            num_teeth: 40
            thickness: 1.0
        """)
    monkeypatch.setenv(presets.SPURGEAR_PRESETS, str(custom))
    presets.clear_cache()

    spec = presets.gear_spec_from_preset()
    assert spec.num_teeth == 40
    assert math.isclose(spec.pressure_angle, math.radians(14.5))
    # bundled presets not redefined stay available
    assert presets.gear_spec_from_preset("pinion").num_teeth == 12
    assert presets.get_preset("gear", "default")["_source_path"].startswith(str(custom.resolve()))


def test_custom_file_only(tmp_path):
    path = _write(tmp_path / "mine.yaml", """\
        cylinder:
          wide:
            inner_diameter: 4.0
            outer_diameter: 12.0
            thickness_y: 1.0
            thickness_z: 0.5
            num_support: 6
        """)
    assert presets.list_presets("gear", path) == []
    spec = presets.cylinder_spec_from_preset("wide", path)
    assert spec.num_support == 6


def test_missing_custom_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        presets.load_presets(tmp_path / "missing.yaml")


def test_bad_schema_version(tmp_path):
    path = _write(tmp_path / "old.yaml", """\
        schema_version: "2.0"
        gear: {}
        """)
    with pytest.raises(PresetError, match="schema version"):
        presets.load_presets(path)


def test_incomplete_preset(tmp_path):
    path = _write(tmp_path / "partial.yaml", """\
        gear:
          broken:
            num_teeth: 12
        """)
    with pytest.raises(PresetError, match="missing"):
        presets.gear_spec_from_preset("broken", path)


def test_unparsable_yaml(tmp_path):
    path = _write(tmp_path / "broken.yaml", """\
        gear: [unclosed
        """)
    with pytest.raises(PresetError, match="Cannot parse"):
        presets.load_presets(path)


def test_non_numeric_values(tmp_path):
    path = _write(tmp_path / "words.yaml", """\
        gear:
          wordy:
            diametral_pitch: fine
            num_teeth: 12
            pressure_angle: 20
            thickness: 2.0
        cylinder:
          wordy:
            inner_diameter: 1.0
            outer_diameter: 2.0
            thickness_y: 0.2
            thickness_z: 0.2
            num_support: [3]
        """)
    with pytest.raises(PresetError, match="diametral_pitch"):
        presets.gear_spec_from_preset("wordy", path)
    with pytest.raises(PresetError, match="num_support"):
        presets.cylinder_spec_from_preset("wordy", path)
