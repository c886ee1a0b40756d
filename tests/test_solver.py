import math

import pytest

from spurgear.errors import InvalidGearSpec
from spurgear.solver import DEDENDUM_THRESHOLD, GearSpec, solve


def test_three_tooth_boundary_gear():
    derived = solve(7.62, 3, math.radians(20.0))
    assert math.isclose(derived.pitch_diameter, 3 / 7.62)
    assert math.isclose(derived.pitch_diameter, 0.3937007874, rel_tol=1e-9)
    assert math.isclose(derived.outside_diameter, 5 / 7.62)
    assert math.isclose(derived.outside_diameter, 0.6561679790, rel_tol=1e-9)


def test_fine_pitch_dedendum():
    derived = solve(7.62, 24, math.radians(20.0))
    assert math.isclose(derived.dedendum, 1.25 / 7.62)
    assert math.isclose(derived.root_diameter, 24 / 7.62 - 2 * 1.25 / 7.62)


def test_dedendum_threshold_compares_pitch_to_twenty_degrees():
    # pitches below 20 degrees-in-radians (~0.349) use the 1.157 factor
    assert math.isclose(DEDENDUM_THRESHOLD, 20 * math.pi / 180)
    coarse = solve(0.3, 24, math.radians(20.0))
    assert math.isclose(coarse.dedendum, 1.157 / 0.3)
    fine = solve(0.35, 24, math.radians(20.0))
    assert math.isclose(fine.dedendum, 1.25 / 0.35)


def test_base_circle_follows_pressure_angle():
    pa = math.radians(14.5)
    derived = solve(10.0, 40, pa)
    assert math.isclose(derived.base_circle_diameter, 4.0 * math.cos(pa))
    assert math.isclose(derived.base_circle_radius, derived.base_circle_diameter / 2.0)
    flat = solve(10.0, 40, 0.0)
    assert flat.base_circle_diameter == flat.pitch_diameter


@pytest.mark.parametrize("pitch, teeth", [(7.62, 3), (7.62, 24), (1.0, 100), (32.0, 17), (0.2, 8)])
def test_pitch_circle_lies_between_root_and_outside(pitch, teeth):
    derived = solve(pitch, teeth, math.radians(20.0))
    assert derived.root_diameter < derived.pitch_diameter < derived.outside_diameter


@pytest.mark.parametrize("pitch, teeth", [(0.0, 24), (-1.0, 24), (7.62, 0), (7.62, -5)])
def test_invalid_spec_rejected(pitch, teeth):
    with pytest.raises(InvalidGearSpec):
        solve(pitch, teeth, math.radians(20.0))


def test_gear_spec_is_immutable_and_derives():
    spec = GearSpec(7.62, 24, math.radians(20.0), 2.0)
    with pytest.raises(AttributeError):
        spec.num_teeth = 12
    assert spec.derived() == solve(7.62, 24, math.radians(20.0))
    assert set(spec.derived().as_dict()) == {
        "pitch_diameter",
        "dedendum",
        "root_diameter",
        "base_circle_diameter",
        "outside_diameter",
    }
