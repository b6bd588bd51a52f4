"""Tests for domain models to verify they work correctly."""

import math

import pytest

from bezshape.domain import (
    ORIGIN,
    ClosePath,
    CurveTo,
    LineTo,
    MoveTo,
    Point,
    QuadTo,
    subpaths,
)


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point(100.0, 200.0)
        assert p.x == 100.0
        assert p.y == 200.0

    def test_point_to_tuple(self) -> None:
        """Test point to tuple conversion."""
        p = Point(100.0, 200.0)
        assert p.to_tuple() == (100.0, 200.0)

    def test_point_from_tuple_converts_to_float(self) -> None:
        """Test building a point from an integer pair."""
        p = Point.from_tuple((3, 4))
        assert p == Point(3.0, 4.0)
        assert isinstance(p.x, float)

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(100.0, 200.0)
        with pytest.raises(AttributeError):
            p.x = 300.0  # type: ignore

    def test_point_hashable(self) -> None:
        """Test that equal points hash equal."""
        assert len({Point(1.0, 2.0), Point(1.0, 2.0), Point(2.0, 1.0)}) == 2

    def test_vector_arithmetic(self) -> None:
        """Test addition, subtraction, scaling and negation."""
        a = Point(1.0, 2.0)
        b = Point(3.0, 5.0)
        assert a + b == Point(4.0, 7.0)
        assert b - a == Point(2.0, 3.0)
        assert a * 2 == Point(2.0, 4.0)
        assert 2 * a == Point(2.0, 4.0)
        assert -a == Point(-1.0, -2.0)

    def test_lerp_and_midpoint(self) -> None:
        """Test interpolation helpers."""
        a = Point(0.0, 0.0)
        b = Point(4.0, 8.0)
        assert a.lerp(b, 0.25) == Point(1.0, 2.0)
        assert a.midpoint(b) == Point(2.0, 4.0)

    def test_distance_and_hypot(self) -> None:
        """Test Euclidean length helpers."""
        assert Point(3.0, 4.0).hypot() == 5.0
        assert Point(1.0, 1.0).distance(Point(4.0, 5.0)) == 5.0

    def test_cross(self) -> None:
        """Test cross product sign follows the area convention."""
        assert Point(1.0, 0.0).cross(Point(0.0, 1.0)) == 1.0
        assert Point(0.0, 1.0).cross(Point(1.0, 0.0)) == -1.0

    def test_is_finite(self) -> None:
        """Test finiteness check."""
        assert Point(1.0, 2.0).is_finite()
        assert not Point(math.inf, 0.0).is_finite()
        assert not Point(0.0, math.nan).is_finite()

    def test_origin(self) -> None:
        """Test the origin constant."""
        assert ORIGIN == Point(0.0, 0.0)


class TestPathElements:
    """Tests for path element classes."""

    def test_end_points(self) -> None:
        """Test end point of each element kind."""
        a, b, c = Point(1, 1), Point(2, 2), Point(3, 3)
        assert MoveTo(a).end_point() == a
        assert LineTo(a).end_point() == a
        assert QuadTo(a, b).end_point() == b
        assert CurveTo(a, b, c).end_point() == c
        assert ClosePath().end_point() is None

    def test_points(self) -> None:
        """Test point lists in drawing order."""
        a, b, c = Point(1, 1), Point(2, 2), Point(3, 3)
        assert MoveTo(a).points() == (a,)
        assert QuadTo(a, b).points() == (a, b)
        assert CurveTo(a, b, c).points() == (a, b, c)
        assert ClosePath().points() == ()

    def test_elements_compare_by_value(self) -> None:
        """Test value equality between elements."""
        assert LineTo(Point(1, 2)) == LineTo(Point(1, 2))
        assert LineTo(Point(1, 2)) != MoveTo(Point(1, 2))
        assert ClosePath() == ClosePath()

    def test_elements_immutable(self) -> None:
        """Test that elements are immutable."""
        el = LineTo(Point(1, 2))
        with pytest.raises(AttributeError):
            el.p = Point(0, 0)  # type: ignore


class TestSubpaths:
    """Tests for the subpaths grouping helper."""

    def test_closed_and_open_runs(self) -> None:
        """Test grouping of a closed run followed by an open run."""
        elements = [
            MoveTo(Point(0, 0)),
            LineTo(Point(1, 0)),
            ClosePath(),
            MoveTo(Point(5, 5)),
            LineTo(Point(6, 5)),
        ]
        runs = list(subpaths(elements))
        assert runs == [elements[:3], elements[3:]]

    def test_move_starts_new_run(self) -> None:
        """Test that a MoveTo ends the previous open run."""
        elements = [
            MoveTo(Point(0, 0)),
            LineTo(Point(1, 0)),
            MoveTo(Point(2, 0)),
            LineTo(Point(3, 0)),
        ]
        runs = list(subpaths(elements))
        assert len(runs) == 2
        assert runs[1][0] == MoveTo(Point(2, 0))

    def test_leading_drawing_without_move(self) -> None:
        """Test a sequence that does not start with a MoveTo."""
        elements = [LineTo(Point(1, 0)), ClosePath()]
        assert list(subpaths(elements)) == [elements]

    def test_empty(self) -> None:
        """Test that no elements means no runs."""
        assert list(subpaths([])) == []

    def test_lazy(self) -> None:
        """Test that runs are produced before the input is exhausted."""

        def source():
            yield MoveTo(Point(0, 0))
            yield ClosePath()
            raise AssertionError("input consumed too eagerly")

        runs = subpaths(source())
        assert next(runs) == [MoveTo(Point(0, 0)), ClosePath()]
