"""Unit tests for quadratic and cubic Bezier segments."""

import math

import pytest

from bezshape.domain import CurveTo, MoveTo, Point, QuadTo
from bezshape.shapes import CubicBez, QuadBez, Rect
from bezshape.shapes.curves import solve_quadratic

# Cubic approximating the unit quarter circle from (1, 0) to (0, 1)
KAPPA = 4.0 / 3.0 * math.tan(math.pi / 8)
QUARTER = CubicBez(Point(1, 0), Point(1, KAPPA), Point(KAPPA, 1), Point(0, 1))


def sampled_length(curve, samples: int = 20000) -> float:
    """Length of a dense polyline through the curve."""
    points = [curve.eval(i / samples) for i in range(samples + 1)]
    return sum(points[i].distance(points[i + 1]) for i in range(samples))


class TestSolveQuadratic:
    """Tests for the quadratic root solver."""

    def test_two_roots(self):
        """Test a quadratic with two real roots."""
        assert sorted(solve_quadratic(1.0, -3.0, 2.0)) == pytest.approx([1.0, 2.0])

    def test_no_real_roots(self):
        """Test a quadratic with a negative discriminant."""
        assert solve_quadratic(1.0, 0.0, 1.0) == []

    def test_linear_fallback(self):
        """Test the degenerate linear case."""
        assert solve_quadratic(0.0, 2.0, -1.0) == [0.5]
        assert solve_quadratic(0.0, 0.0, 1.0) == []

    def test_small_root_is_stable(self):
        """Test that a tiny root is not lost to cancellation."""
        roots = sorted(solve_quadratic(1.0, -1e8, 1.0))
        assert roots[0] == pytest.approx(1e-8, rel=1e-9)


class TestQuadBez:
    """Tests for QuadBez."""

    @pytest.fixture
    def hump(self) -> QuadBez:
        return QuadBez(Point(0, 0), Point(1, 2), Point(2, 0))

    def test_eval(self, hump):
        """Test evaluation at the ends and middle."""
        assert hump.eval(0.0) == Point(0, 0)
        assert hump.eval(1.0) == Point(2, 0)
        assert hump.eval(0.5) == Point(1, 1)

    def test_end_points(self, hump):
        """Test the start and end accessors."""
        assert hump.start() == Point(0, 0)
        assert hump.end() == Point(2, 0)

    def test_subdivide(self, hump):
        """Test that halves meet at the curve midpoint."""
        left, right = hump.subdivide()
        assert left.p0 == hump.p0
        assert left.p2 == right.p0 == hump.eval(0.5)
        assert right.p2 == hump.p2

    def test_bounding_box_is_exact(self, hump):
        """Test that the box hugs the curve rather than the control point."""
        assert hump.bounding_box() == Rect(0, 0, 2, 1)

    def test_signed_area(self, hump):
        """Test the area term against the parabolic segment formula."""
        assert hump.signed_area() == pytest.approx(-4.0 / 3.0)

    def test_arclen(self, hump):
        """Test arc length against a dense polyline."""
        assert hump.arclen(1e-9) == pytest.approx(sampled_length(hump), rel=1e-6)

    def test_arclen_accuracy(self, hump):
        """Test that a loose accuracy stays within its bound."""
        assert abs(hump.arclen(1e-2) - hump.arclen(1e-10)) <= 1e-2

    def test_as_open_shape(self, hump):
        """Test the Shape view of a lone curve."""
        assert list(hump.path_elements(0.1)) == [
            MoveTo(Point(0, 0)),
            QuadTo(Point(1, 2), Point(2, 0)),
        ]
        assert hump.perimeter(1e-6) == pytest.approx(hump.arclen(1e-6))
        assert hump.area() == 0.0
        assert hump.winding(Point(1, 0.5)) == 0


class TestCubicBez:
    """Tests for CubicBez."""

    def test_eval(self):
        """Test evaluation of a symmetric arch."""
        arch = CubicBez(Point(0, 0), Point(0, 1), Point(1, 1), Point(1, 0))
        assert arch.eval(0.5) == Point(0.5, 0.75)

    def test_end_points(self):
        """Test the start and end accessors."""
        assert QUARTER.start() == Point(1, 0)
        assert QUARTER.end() == Point(0, 1)

    def test_subdivide_halves_match(self):
        """Test that each half traces its part of the curve."""
        left, right = QUARTER.subdivide()
        assert left.eval(0.5).distance(QUARTER.eval(0.25)) < 1e-12
        assert right.eval(0.5).distance(QUARTER.eval(0.75)) < 1e-12

    def test_bounding_box_is_exact(self):
        """Test the box of an arch with an interior y extremum."""
        arch = CubicBez(Point(0, 0), Point(0, 1), Point(1, 1), Point(1, 0))
        assert arch.bounding_box() == Rect(0, 0, 1, 0.75)

    def test_bounding_box_with_overshoot(self):
        """Test the box of an S-curve whose extrema lie inside (0, 1)."""
        s_curve = CubicBez(Point(0, 0), Point(4, 1), Point(-3, 2), Point(1, 3))
        bbox = s_curve.bounding_box()
        for t in s_curve.extrema():
            pt = s_curve.eval(t)
            assert bbox.contains_point(pt, epsilon=1e-12)
        assert bbox.x1 > 1.0
        assert bbox.x0 < 0.0

    def test_straight_arclen_exact(self):
        """Test that a straight cubic measures its chord."""
        straight = CubicBez(Point(0, 0), Point(1, 0), Point(2, 0), Point(3, 0))
        assert straight.arclen(1e-9) == 3.0

    def test_quarter_circle_arclen(self):
        """Test the arc length of a quarter circle approximation."""
        assert QUARTER.arclen(1e-9) == pytest.approx(math.pi / 2, rel=1e-3)
        assert QUARTER.arclen(1e-9) == pytest.approx(sampled_length(QUARTER), rel=1e-6)

    def test_signed_area_quarter(self):
        """Test that the quarter-circle area term is close to pi/4."""
        assert QUARTER.signed_area() == pytest.approx(math.pi / 4, rel=1e-3)

    def test_winding_contribution(self):
        """Test crossings of the +x ray from either side of the curve."""
        assert QUARTER.winding_contribution(Point(0.5, 0.5)) == 1
        assert QUARTER.winding_contribution(Point(0.9, 0.9)) == 0
        assert QUARTER.winding_contribution(Point(0.5, 2.0)) == 0

    def test_as_open_shape(self):
        """Test the Shape view of a lone cubic."""
        assert list(QUARTER.path_elements(0.1)) == [
            MoveTo(Point(1, 0)),
            CurveTo(Point(1, KAPPA), Point(KAPPA, 1), Point(0, 1)),
        ]
        assert QUARTER.as_line() is None
