"""Cross-module properties every shape must satisfy.

Each property is checked for every kind of shape, including paths built
from elements and views of other shapes.
"""

import math

import pytest

from bezshape.domain import ClosePath, CurveTo, LineTo, MoveTo, Point, QuadTo
from bezshape.shapes import (
    BezPath,
    Circle,
    CubicBez,
    Line,
    QuadBez,
    Rect,
    RoundedRect,
    RoundedRectRadii,
    ShapeRef,
)

TOLERANCES = [1.0, 0.1, 1e-3, 0.0]


def blob_path() -> BezPath:
    """A closed path mixing every element kind."""
    path = BezPath()
    path.move_to(Point(0, 0))
    path.line_to(Point(6, 0))
    path.quad_to(Point(9, 2), Point(6, 4))
    path.curve_to(Point(4, 7), Point(1, 6), Point(0, 4))
    path.close_path()
    return path


# (id, shape, closed, a point strictly inside when closed)
SHAPES = [
    ("line", Line(Point(0, 0), Point(3, 4)), False, None),
    ("rect", Rect(0, 0, 4, 2), True, Point(1, 1)),
    ("flipped_rect", Rect(4, 0, 0, 2), True, Point(1, 1)),
    ("rounded_rect", RoundedRect.from_coords(0, 0, 10, 6, 2), True, Point(5, 3)),
    (
        "mixed_radii",
        RoundedRect(Rect(0, 0, 10, 8), RoundedRectRadii(1, 2, 0, 3)),
        True,
        Point(5, 4),
    ),
    ("circle", Circle(Point(1, -2), 3.0), True, Point(1.5, -1.5)),
    ("quad", QuadBez(Point(0, 0), Point(1, 2), Point(2, 0)), False, None),
    ("cubic", CubicBez(Point(0, 0), Point(4, 1), Point(-3, 2), Point(1, 3)), False, None),
    ("path", blob_path(), True, Point(3, 2)),
]

shape_params = pytest.mark.parametrize(
    "shape,closed,inside",
    [(shape, closed, inside) for _, shape, closed, inside in SHAPES],
    ids=[name for name, *_ in SHAPES],
)
closed_shape_params = pytest.mark.parametrize(
    "shape,inside",
    [(shape, inside) for _, shape, closed, inside in SHAPES if closed],
    ids=[name for name, _, closed, _ in SHAPES if closed],
)


class TestElementSequences:
    """Properties of the element sequences shapes produce."""

    @shape_params
    @pytest.mark.parametrize("tolerance", TOLERANCES)
    def test_starts_with_move_and_closes(self, shape, closed, inside, tolerance):  # noqa: ARG002
        """Test the first and last element of every materialized path."""
        elements = list(shape.to_path(tolerance))
        assert isinstance(elements[0], MoveTo)
        if closed:
            assert isinstance(elements[-1], ClosePath)

    @shape_params
    @pytest.mark.parametrize("tolerance", TOLERANCES)
    def test_into_path_matches_to_path(self, shape, closed, inside, tolerance):  # noqa: ARG002
        """Test that both conversions give the same elements."""
        assert list(shape.into_path(tolerance)) == list(shape.to_path(tolerance))

    @shape_params
    def test_segments_match_drawing_elements(self, shape, closed, inside):  # noqa: ARG002
        """Test that every drawing element yields exactly one segment."""
        elements = list(shape.path_elements(0.1))
        drawing = sum(isinstance(el, (LineTo, QuadTo, CurveTo)) for el in elements)
        segs = list(shape.path_segments(0.1))
        assert drawing <= len(segs) <= drawing + 1


class TestIdentityRecovery:
    """Properties of the identity probes."""

    @shape_params
    def test_probes_idempotent_and_exclusive(self, shape, closed, inside):  # noqa: ARG002
        """Test repeated probing and that at most one primitive probe answers."""
        probes = ("as_line", "as_rect", "as_rounded_rect", "as_circle")
        first = [getattr(shape, name)() for name in probes]
        second = [getattr(shape, name)() for name in probes]
        assert first == second
        assert sum(result is not None for result in first) <= 1

    def test_rect_probe_excludes_others(self):
        """Test that a recovered rectangle rules out every other primitive."""
        rect = Rect(0, 0, 4, 2)
        assert rect.as_rect() == rect.as_rect() == Rect(0, 0, 4, 2)
        assert rect.as_line() is None
        assert rect.as_circle() is None
        assert rect.as_rounded_rect() is None


class TestSignConsistency:
    """Area and winding signs agree."""

    @closed_shape_params
    def test_winding_sign_matches_area(self, shape, inside):
        """Test interior winding sign against the area sign."""
        area = shape.area()
        winding = shape.winding(inside)
        assert area != 0.0
        assert math.copysign(1, area) == math.copysign(1, winding)
        assert winding != 0

    @closed_shape_params
    def test_path_conversion_keeps_signs(self, shape, inside):
        """Test that the converted path agrees with the shape."""
        path = shape.to_path(0.01)
        assert path.area() == pytest.approx(shape.area(), rel=1e-3)
        assert path.winding(inside) == shape.winding(inside)


class TestBoundingBoxContainment:
    """Every point a shape draws lies inside its bounding box."""

    @shape_params
    @pytest.mark.parametrize("tolerance", TOLERANCES)
    def test_curve_points_inside_box(self, shape, closed, inside, tolerance):  # noqa: ARG002
        """Test sampled points of every segment against the box."""
        bbox = shape.bounding_box()
        eps = 1e-9 * max(1.0, abs(bbox.x0), abs(bbox.x1), abs(bbox.y0), abs(bbox.y1))
        for seg in shape.path_segments(tolerance):
            for i in range(17):
                assert bbox.contains_point(seg.eval(i / 16), epsilon=eps)

    @shape_params
    def test_path_box_within_shape_box(self, shape, closed, inside):  # noqa: ARG002
        """Test that the converted path's exact box stays inside."""
        bbox = shape.bounding_box()
        path_bbox = shape.to_path(0.1).bounding_box()
        assert bbox.inset(1e-9).contains_point(Point(path_bbox.x0, path_bbox.y0))
        assert bbox.inset(1e-9).contains_point(Point(path_bbox.x1, path_bbox.y1))


class TestBorrowedViewEquivalence:
    """A ShapeRef behaves exactly like the shape it references."""

    @shape_params
    def test_view_matches_shape(self, shape, closed, inside):  # noqa: ARG002
        """Test measurements and elements through a view."""
        view = ShapeRef(shape)
        assert view.area() == shape.area()
        assert view.perimeter(1e-6) == shape.perimeter(1e-6)
        assert view.bounding_box() == shape.bounding_box()
        assert list(view.path_elements(0.1)) == list(shape.path_elements(0.1))
        if inside is not None:
            assert view.winding(inside) == shape.winding(inside)


class TestToleranceContract:
    """Drawn outlines stay within the requested tolerance of the true arcs."""

    @staticmethod
    def max_arc_deviation(shape, centers, radius, tolerance, samples=65):
        """Largest distance from any sampled cubic point to its arc."""
        worst = 0.0
        cubics = [seg for seg in shape.path_segments(tolerance) if isinstance(seg, CubicBez)]
        assert cubics
        for cubic in cubics:
            center = min(centers, key=cubic.start().distance)
            for i in range(samples + 1):
                pt = cubic.eval(i / samples)
                worst = max(worst, abs(pt.distance(center) - radius))
        return worst

    @pytest.mark.parametrize("radius", [1.0, 100.0, 1e4])
    @pytest.mark.parametrize("tolerance", [1.0, 0.1, 1e-3, 1e-6])
    def test_circle(self, radius, tolerance):
        """Test sampled circle outline points against the exact circle."""
        center = Point(3, -2)
        circle = Circle(center, radius)
        assert self.max_arc_deviation(circle, [center], radius, tolerance) <= tolerance

    @pytest.mark.parametrize("radius", [1.0, 100.0, 1e4])
    @pytest.mark.parametrize("tolerance", [1.0, 0.1, 1e-3, 1e-6])
    def test_rounded_rect(self, radius, tolerance):
        """Test sampled corner points against each corner's exact arc."""
        rr = RoundedRect.from_coords(0, 0, 4 * radius, 3 * radius, radius)
        centers = [
            Point(radius, radius),
            Point(3 * radius, radius),
            Point(3 * radius, 2 * radius),
            Point(radius, 2 * radius),
        ]
        assert self.max_arc_deviation(rr, centers, radius, tolerance) <= tolerance


class TestScenarios:
    """Concrete end-to-end scenarios."""

    def test_unit_circle(self):
        """Test area, box and winding of a unit circle."""
        circle = Circle(Point(0, 0), 1.0)
        assert circle.area() == pytest.approx(math.pi, rel=0.01)
        assert circle.to_path(0.1).area() == pytest.approx(math.pi, rel=0.01)
        assert circle.bounding_box() == Rect(-1.0, -1.0, 1.0, 1.0)
        # Positive area, so the center winds +1
        assert circle.area() > 0
        assert circle.winding(Point(0, 0)) == 1

    def test_rectangle(self):
        """Test identity and exact measurements of a rectangle."""
        rect = Rect(0, 0, 4, 2)
        assert rect.as_rect() == Rect(0, 0, 4, 2)
        assert rect.as_circle() is None
        assert rect.area() == 8.0
        for accuracy in (0.0, 1e-9, 0.5, 10.0):
            assert rect.perimeter(accuracy) == 12.0

    def test_traced_rectangle_is_not_a_rect(self):
        """Test that a path tracing a rectangle does not identify as one."""
        path = BezPath(
            [
                MoveTo(Point(0, 0)),
                LineTo(Point(4, 0)),
                LineTo(Point(4, 2)),
                LineTo(Point(0, 2)),
                LineTo(Point(0, 0)),
                ClosePath(),
            ]
        )
        assert path.as_rect() is None
        assert path.area() == 8.0
        assert path.bounding_box() == Rect(0, 0, 4, 2).bounding_box()

    def test_open_line(self):
        """Test exact perimeter and box of an open line."""
        line = Line(Point(0, 0), Point(3, 4))
        for accuracy in (0.0, 1e-9, 0.5, 10.0):
            assert line.perimeter(accuracy) == 5.0
        assert line.bounding_box() == Rect(0, 0, 3, 4)

    def test_rounded_rect_segments_grow_as_tolerance_tightens(self):
        """Test that segment counts never decrease with a tighter tolerance."""
        rr = RoundedRect.from_coords(0, 0, 200, 100, 40)
        tolerances = [0.5, 0.2, 0.1, 0.05, 0.02, 0.01]
        counts = [len(list(rr.path_segments(tol))) for tol in tolerances]
        assert all(a <= b for a, b in zip(counts, counts[1:]))
        assert counts[-1] >= counts[0]
