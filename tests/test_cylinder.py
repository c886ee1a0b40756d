import math

import pytest

from spurgear.cylinder import LighteningCylinderSpec, cylinder_geometry
from spurgear.errors import InvalidCylinderSpec


def test_ring_radii():
    geometry = cylinder_geometry(LighteningCylinderSpec(1.0, 2.0, 0.2, 0.2, 3))
    assert geometry.ring_radii == pytest.approx((0.5, 0.7, 0.8, 1.0))
    assert geometry.inner_ring == pytest.approx((0.5, 0.7))
    assert geometry.outer_ring == pytest.approx((0.8, 1.0))


def test_support_bar_overlaps_both_rings():
    geometry = cylinder_geometry(LighteningCylinderSpec(10.0, 20.0, 2.0, 2.0, 3))
    xs = sorted({p.x for p in geometry.support_bar})
    ys = sorted({p.y for p in geometry.support_bar})
    assert xs == pytest.approx([-1.0, 1.0])
    assert ys == pytest.approx([6.8, 8.2])
    r0, r1, r2, r3 = geometry.ring_radii
    assert r0 < ys[0] < r1
    assert r2 < ys[1] < r3


def test_support_bar_drawing_order():
    bar = cylinder_geometry(LighteningCylinderSpec(1.0, 2.0, 0.2, 0.2, 3)).support_bar
    assert bar[0] == pytest.approx((0.1, 0.68))
    assert bar[1] == pytest.approx((0.1, 0.82))
    assert bar[2] == pytest.approx((-0.1, 0.82))
    assert bar[3] == pytest.approx((-0.1, 0.68))


def test_support_angles():
    geometry = cylinder_geometry(LighteningCylinderSpec(1.0, 2.0, 0.2, 0.2, 4))
    assert geometry.support_angles == pytest.approx((0.0, math.pi / 2, math.pi, 3 * math.pi / 2))


def test_invalid_spec_rejected():
    with pytest.raises(InvalidCylinderSpec):
        cylinder_geometry(LighteningCylinderSpec(1.0, 2.0, 0.0, 0.2, 3))
