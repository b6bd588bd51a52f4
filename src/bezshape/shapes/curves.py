"""Quadratic and cubic Bezier segments.

Both curve types are open Shapes as well as path segments. They provide:
- Evaluation and subdivision (de Casteljau)
- Signed area contribution (closed form from Green's theorem)
- Arc length to a requested accuracy (Gravesen estimate, adaptive)
- Exact bounding boxes from the roots of the derivative
- Winding contribution by recursive subdivision
"""

import math
from collections.abc import Iterator
from dataclasses import dataclass

from bezshape.domain import CurveTo, MoveTo, PathEl, Point, QuadTo
from bezshape.shapes.base import Shape, check_tolerance
from bezshape.shapes.line import Line, direction_crossing
from bezshape.shapes.rect import Rect

# Subdivision limits. Each halving shrinks the error of the arc length
# estimate roughly 16x, so these are only reached for accuracy near 0.
MAX_ARCLEN_DEPTH = 12
MAX_WINDING_DEPTH = 48


def solve_quadratic(a: float, b: float, c: float) -> list[float]:
    """Real roots of ``a*t**2 + b*t + c``.

    Uses the numerically stable form that avoids cancellation. Degenerates
    to the linear case when ``a`` is zero.

    Returns:
        Zero, one or two roots (unsorted)
    """
    if a == 0.0:
        if b == 0.0:
            return []
        return [-c / b]

    disc = b * b - 4.0 * a * c
    if disc < 0.0:
        return []

    q = -0.5 * (b + math.copysign(math.sqrt(disc), b))
    if q == 0.0:
        return [0.0]
    return [q / a, c / q]


def _unit_roots(roots: list[float]) -> list[float]:
    return [t for t in roots if 0.0 < t < 1.0]


def _polyline_length(points: tuple[Point, ...]) -> float:
    return sum(points[i].distance(points[i + 1]) for i in range(len(points) - 1))


def _gravesen_arclen(curve: "QuadBez | CubicBez", accuracy: float, depth: int) -> float:
    """Adaptive arc length of a Bezier curve.

    The true length lies between the chord and the control polygon length;
    a weighted mean of the two is accurate to well within their gap. Halves
    are refined until the gap is below the accuracy share of each half.
    """
    points = curve.control_points()
    degree = len(points) - 1
    chord = points[0].distance(points[-1])
    poly = _polyline_length(points)
    estimate = (2.0 * chord + (degree - 1) * poly) / (degree + 1)

    if poly - chord <= accuracy or depth >= MAX_ARCLEN_DEPTH:
        return estimate

    left, right = curve.subdivide()
    return (
        _gravesen_arclen(left, accuracy / 2, depth + 1)
        + _gravesen_arclen(right, accuracy / 2, depth + 1)
    )


def _curve_winding(curve: "QuadBez | CubicBez", pt: Point, depth: int) -> int:
    """Winding contribution of a curve by recursive subdivision.

    The control polygon's hull bounds the curve, so a curve whose hull lies
    entirely to the right of the point crosses the ray exactly as often as
    its endpoints say, and one entirely to the left never crosses it.
    """
    points = curve.control_points()
    ys = [p.y for p in points]
    if pt.y < min(ys) or pt.y > max(ys):
        return 0

    xs = [p.x for p in points]
    if pt.x >= max(xs):
        return 0
    if pt.x < min(xs):
        return direction_crossing(curve.start().y, curve.end().y, pt.y)

    if depth >= MAX_WINDING_DEPTH:
        return Line(curve.start(), curve.end()).winding_contribution(pt)

    left, right = curve.subdivide()
    return _curve_winding(left, pt, depth + 1) + _curve_winding(right, pt, depth + 1)


@dataclass(frozen=True, slots=True)
class QuadBez(Shape):
    """A quadratic Bezier segment.

    Attributes:
        p0: Start point
        p1: Control point
        p2: End point
    """

    p0: Point
    p1: Point
    p2: Point

    def start(self) -> Point:
        """Start point."""
        return self.p0

    def end(self) -> Point:
        """End point."""
        return self.p2

    def control_points(self) -> tuple[Point, ...]:
        return (self.p0, self.p1, self.p2)

    def eval(self, t: float) -> Point:
        """Point at parameter ``t`` in [0, 1]."""
        mt = 1.0 - t
        x = mt * mt * self.p0.x + 2 * mt * t * self.p1.x + t * t * self.p2.x
        y = mt * mt * self.p0.y + 2 * mt * t * self.p1.y + t * t * self.p2.y
        return Point(x, y)

    def subdivide(self) -> tuple["QuadBez", "QuadBez"]:
        """Split at t=0.5 using de Casteljau's algorithm."""
        q1 = self.p0.midpoint(self.p1)
        r1 = self.p1.midpoint(self.p2)
        mid = q1.midpoint(r1)
        return QuadBez(self.p0, q1, mid), QuadBez(mid, r1, self.p2)

    def extrema(self) -> list[float]:
        """Parameters in (0, 1) where x or y reaches a local extremum."""
        result = []
        for a0, a1, a2 in (
            (self.p0.x, self.p1.x, self.p2.x),
            (self.p0.y, self.p1.y, self.p2.y),
        ):
            denom = a0 - 2 * a1 + a2
            if denom != 0.0:
                result.append((a0 - a1) / denom)
        return sorted(_unit_roots(result))

    def signed_area(self) -> float:
        """Area between the curve and the origin (Green's theorem term)."""
        p0, p1, p2 = self.p0, self.p1, self.p2
        return (
            p0.x * (2.0 * p1.y + p2.y)
            + 2.0 * p1.x * (p2.y - p0.y)
            - p2.x * (p0.y + 2.0 * p1.y)
        ) / 6.0

    def arclen(self, accuracy: float) -> float:
        check_tolerance(accuracy, "accuracy")
        return _gravesen_arclen(self, accuracy, 0)

    def winding_contribution(self, pt: Point) -> int:
        """Signed crossings of the ray from ``pt`` towards +x."""
        return _curve_winding(self, pt, 0)

    def path_elements(self, tolerance: float) -> Iterator[PathEl]:
        check_tolerance(tolerance)
        return iter((MoveTo(self.p0), QuadTo(self.p1, self.p2)))

    def area(self) -> float:
        return 0.0

    def perimeter(self, accuracy: float) -> float:
        return self.arclen(accuracy)

    def winding(self, pt: Point) -> int:
        return 0

    def bounding_box(self) -> Rect:
        bbox = Rect.from_points(self.p0, self.p2)
        for t in self.extrema():
            bbox = bbox.union_pt(self.eval(t))
        return bbox


@dataclass(frozen=True, slots=True)
class CubicBez(Shape):
    """A cubic Bezier segment.

    Attributes:
        p0: Start point
        p1: First control point
        p2: Second control point
        p3: End point
    """

    p0: Point
    p1: Point
    p2: Point
    p3: Point

    def start(self) -> Point:
        """Start point."""
        return self.p0

    def end(self) -> Point:
        """End point."""
        return self.p3

    def control_points(self) -> tuple[Point, ...]:
        return (self.p0, self.p1, self.p2, self.p3)

    def eval(self, t: float) -> Point:
        """Point at parameter ``t`` in [0, 1]."""
        mt = 1.0 - t
        a = mt * mt * mt
        b = 3 * mt * mt * t
        c = 3 * mt * t * t
        d = t * t * t
        return Point(
            a * self.p0.x + b * self.p1.x + c * self.p2.x + d * self.p3.x,
            a * self.p0.y + b * self.p1.y + c * self.p2.y + d * self.p3.y,
        )

    def subdivide(self) -> tuple["CubicBez", "CubicBez"]:
        """Split at t=0.5 using de Casteljau's algorithm."""
        q1 = self.p0.midpoint(self.p1)
        q2 = self.p1.midpoint(self.p2)
        q3 = self.p2.midpoint(self.p3)
        r1 = q1.midpoint(q2)
        r2 = q2.midpoint(q3)
        mid = r1.midpoint(r2)
        return CubicBez(self.p0, q1, r1, mid), CubicBez(mid, r2, q3, self.p3)

    def extrema(self) -> list[float]:
        """Parameters in (0, 1) where x or y reaches a local extremum."""
        result = []
        for a0, a1, a2, a3 in (
            (self.p0.x, self.p1.x, self.p2.x, self.p3.x),
            (self.p0.y, self.p1.y, self.p2.y, self.p3.y),
        ):
            # Derivative is 3 * (d0 (1-t)^2 + 2 d1 t (1-t) + d2 t^2)
            d0 = a1 - a0
            d1 = a2 - a1
            d2 = a3 - a2
            result.extend(solve_quadratic(d0 - 2 * d1 + d2, 2 * (d1 - d0), d0))
        return sorted(_unit_roots(result))

    def signed_area(self) -> float:
        """Area between the curve and the origin (Green's theorem term)."""
        p0, p1, p2, p3 = self.p0, self.p1, self.p2, self.p3
        return (
            p0.x * (6.0 * p1.y + 3.0 * p2.y + p3.y)
            + 3.0 * (
                p1.x * (-2.0 * p0.y + p2.y + p3.y)
                - p2.x * (p0.y + p1.y - 2.0 * p3.y)
            )
            - p3.x * (p0.y + 3.0 * p1.y + 6.0 * p2.y)
        ) / 20.0

    def arclen(self, accuracy: float) -> float:
        check_tolerance(accuracy, "accuracy")
        return _gravesen_arclen(self, accuracy, 0)

    def winding_contribution(self, pt: Point) -> int:
        """Signed crossings of the ray from ``pt`` towards +x."""
        return _curve_winding(self, pt, 0)

    def path_elements(self, tolerance: float) -> Iterator[PathEl]:
        check_tolerance(tolerance)
        return iter((MoveTo(self.p0), CurveTo(self.p1, self.p2, self.p3)))

    def area(self) -> float:
        return 0.0

    def perimeter(self, accuracy: float) -> float:
        return self.arclen(accuracy)

    def winding(self, pt: Point) -> int:
        return 0

    def bounding_box(self) -> Rect:
        bbox = Rect.from_points(self.p0, self.p3)
        for t in self.extrema():
            bbox = bbox.union_pt(self.eval(t))
        return bbox
