import math

import pytest
from spurgear.geom import *
## unit tests for spurgear geom.py

class TestGeom:
    """unit tests for planar point helpers"""

    def test_close(self):
        assert close(1.0, 1.0 + epsilon / 2)
        assert not close(1.0, 1.0 + epsilon * 2)

    def test_rotate(self):
        p = rotate(Point2D(2.0, 0.0), math.pi / 2)
        assert p == pytest.approx((0.0, 2.0))
        assert mag(p) == pytest.approx(2.0)

    def test_rotate_uses_original_coordinates(self):
        theta = 0.3
        p = Point2D(1.5, -0.4)
        got = rotate(p, theta)
        assert got.x == pytest.approx(1.5 * math.cos(theta) + 0.4 * math.sin(theta))
        assert got.y == pytest.approx(1.5 * math.sin(theta) - 0.4 * math.cos(theta))
        assert rotate_all([p], theta) == (got,)

    def test_mirror(self):
        pts = (Point2D(1.0, 2.0), Point2D(3.0, -4.0))
        assert mirror_x(pts) == (Point2D(1.0, -2.0), Point2D(3.0, 4.0))

    def test_angle_is_quadrant_correct(self):
        assert angle(Point2D(-1.0, 1.0)) == pytest.approx(3 * math.pi / 4)
        assert angle(Point2D(-1.0, -1.0)) == pytest.approx(-3 * math.pi / 4)

    def test_polar_pairs(self):
        pts = (Point2D(1.0, 1.0), Point2D(0.0, -2.0))
        pairs = to_polar(pts)
        assert pairs[0] == pytest.approx((math.sqrt(2), math.pi / 4))
        back = from_polar(pairs)
        for a, b in zip(back, pts):
            assert dist(a, b) < epsilon
        shifted = from_polar(pairs, math.pi)
        assert shifted[1] == pytest.approx((0.0, 2.0))
