"""Circles."""

import math
from collections.abc import Iterator
from dataclasses import dataclass

from bezshape.domain import ClosePath, MoveTo, PathEl, Point
from bezshape.shapes._arc import arc_cubics, arc_segment_count
from bezshape.shapes.base import Shape, check_tolerance
from bezshape.shapes.rect import Rect


@dataclass(frozen=True, slots=True)
class Circle(Shape):
    """A circle.

    The outline starts at angle 0 and sweeps in the positive direction, so
    the area is positive. The number of cubic segments is always a multiple
    of four, which keeps the four axis extremes on the curve.

    Attributes:
        center: Center point
        radius: Radius
    """

    center: Point
    radius: float

    def path_elements(self, tolerance: float) -> Iterator[PathEl]:
        check_tolerance(tolerance)
        return self._iter_elements(tolerance)

    def _iter_elements(self, tolerance: float) -> Iterator[PathEl]:
        c = self.center
        r = self.radius
        quarter = math.pi / 2
        n = 4 * arc_segment_count(r, quarter, tolerance)
        start = Point(c.x + r, c.y)

        yield MoveTo(start)
        yield from arc_cubics(c, r, 0.0, 2 * math.pi, n, end=start)
        yield ClosePath()

    def area(self) -> float:
        return math.pi * self.radius * self.radius

    def perimeter(self, accuracy: float) -> float:
        check_tolerance(accuracy, "accuracy")
        return abs(2.0 * math.pi * self.radius)

    def winding(self, pt: Point) -> int:
        dx = pt.x - self.center.x
        dy = pt.y - self.center.y
        return 1 if dx * dx + dy * dy < self.radius * self.radius else 0

    def bounding_box(self) -> Rect:
        r = abs(self.radius)
        c = self.center
        return Rect(c.x - r, c.y - r, c.x + r, c.y + r)

    def as_circle(self) -> "Circle | None":
        return self
