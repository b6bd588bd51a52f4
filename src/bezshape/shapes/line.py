"""Straight line segments."""

from collections.abc import Iterator
from dataclasses import dataclass

from bezshape.domain import LineTo, MoveTo, PathEl, Point
from bezshape.shapes.base import Shape, check_tolerance
from bezshape.shapes.rect import Rect


def direction_crossing(y0: float, y1: float, y: float) -> int:
    """Signed crossing of the level ``y`` by a span from ``y0`` to ``y1``.

    Uses half-open intervals so that joined spans never count a shared
    endpoint twice.

    Returns:
        +1 if the span rises through y, -1 if it falls through y, else 0
    """
    if y0 <= y < y1:
        return 1
    if y1 <= y < y0:
        return -1
    return 0


@dataclass(frozen=True, slots=True)
class Line(Shape):
    """A straight line from ``p0`` to ``p1``.

    Line is both an open Shape and the straight kind of path segment.

    Attributes:
        p0: Start point
        p1: End point
    """

    p0: Point
    p1: Point

    def start(self) -> Point:
        """Start point."""
        return self.p0

    def end(self) -> Point:
        """End point."""
        return self.p1

    def eval(self, t: float) -> Point:
        """Point at parameter ``t`` in [0, 1]."""
        return self.p0.lerp(self.p1, t)

    def subdivide(self) -> tuple["Line", "Line"]:
        """Split at the midpoint."""
        mid = self.p0.midpoint(self.p1)
        return Line(self.p0, mid), Line(mid, self.p1)

    def length(self) -> float:
        return self.p0.distance(self.p1)

    def arclen(self, accuracy: float) -> float:
        """Arc length; exact for a line."""
        check_tolerance(accuracy, "accuracy")
        return self.length()

    def signed_area(self) -> float:
        """Area between the segment and the origin (Green's theorem term)."""
        return self.p0.cross(self.p1) * 0.5

    def winding_contribution(self, pt: Point) -> int:
        """Signed crossings of the ray from ``pt`` towards +x.

        Summing this over every segment of a closed outline gives the
        outline's winding number at ``pt``.
        """
        direction = direction_crossing(self.p0.y, self.p1.y, pt.y)
        if direction == 0:
            return 0
        t = (pt.y - self.p0.y) / (self.p1.y - self.p0.y)
        x = self.p0.x + (self.p1.x - self.p0.x) * t
        return direction if x > pt.x else 0

    def path_elements(self, tolerance: float) -> Iterator[PathEl]:
        check_tolerance(tolerance)
        return iter((MoveTo(self.p0), LineTo(self.p1)))

    def area(self) -> float:
        return 0.0

    def perimeter(self, accuracy: float) -> float:
        return self.arclen(accuracy)

    def winding(self, pt: Point) -> int:
        return 0

    def bounding_box(self) -> Rect:
        return Rect.from_points(self.p0, self.p1)

    def as_line(self) -> "Line | None":
        return self
