"""Axis-aligned rectangles."""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from bezshape.domain import ClosePath, LineTo, MoveTo, PathEl, Point
from bezshape.shapes.base import Shape, check_tolerance

if TYPE_CHECKING:
    from bezshape.shapes.rounded_rect import RoundedRect, RoundedRectRadii


@dataclass(frozen=True, slots=True)
class Rect(Shape):
    """An axis-aligned rectangle given by two corners.

    The corners are kept as given, so a rectangle with ``x1 < x0`` or
    ``y1 < y0`` has negative area and traces in the negative direction. Use
    ``abs()`` to normalize.

    Attributes:
        x0: X of the first corner
        y0: Y of the first corner
        x1: X of the opposite corner
        y1: Y of the opposite corner
    """

    x0: float
    y0: float
    x1: float
    y1: float

    @classmethod
    def from_points(cls, p0: Point, p1: Point) -> "Rect":
        """Normalized rectangle spanning two points."""
        return cls(min(p0.x, p1.x), min(p0.y, p1.y), max(p0.x, p1.x), max(p0.y, p1.y))

    @classmethod
    def from_origin_size(cls, origin: Point, width: float, height: float) -> "Rect":
        """Rectangle with a corner at ``origin`` and the given size."""
        return cls(origin.x, origin.y, origin.x + width, origin.y + height).abs()

    @classmethod
    def from_center_size(cls, center: Point, width: float, height: float) -> "Rect":
        """Rectangle centered on ``center`` with the given size."""
        half_w = abs(width) / 2
        half_h = abs(height) / 2
        return cls(center.x - half_w, center.y - half_h, center.x + half_w, center.y + half_h)

    @property
    def width(self) -> float:
        """Signed width, ``x1 - x0``."""
        return self.x1 - self.x0

    @property
    def height(self) -> float:
        """Signed height, ``y1 - y0``."""
        return self.y1 - self.y0

    def center(self) -> Point:
        return Point((self.x0 + self.x1) / 2, (self.y0 + self.y1) / 2)

    def origin(self) -> Point:
        return Point(self.x0, self.y0)

    def abs(self) -> "Rect":
        """Same rectangle with ``x0 <= x1`` and ``y0 <= y1``."""
        return Rect(
            min(self.x0, self.x1),
            min(self.y0, self.y1),
            max(self.x0, self.x1),
            max(self.y0, self.y1),
        )

    def union(self, other: "Rect") -> "Rect":
        """Smallest rectangle enclosing both (assumes normalized inputs)."""
        return Rect(
            min(self.x0, other.x0),
            min(self.y0, other.y0),
            max(self.x1, other.x1),
            max(self.y1, other.y1),
        )

    def union_pt(self, pt: Point) -> "Rect":
        """Smallest rectangle enclosing this one and ``pt``."""
        return Rect(
            min(self.x0, pt.x),
            min(self.y0, pt.y),
            max(self.x1, pt.x),
            max(self.y1, pt.y),
        )

    def inset(self, amount: float) -> "Rect":
        """Grow a normalized rectangle by ``amount`` on every side.

        Negative amounts shrink it.
        """
        r = self.abs()
        return Rect(r.x0 - amount, r.y0 - amount, r.x1 + amount, r.y1 + amount)

    def contains_point(self, pt: Point, epsilon: float = 0.0) -> bool:
        """Closed containment test with an optional slack."""
        r = self.abs()
        return (
            r.x0 - epsilon <= pt.x <= r.x1 + epsilon
            and r.y0 - epsilon <= pt.y <= r.y1 + epsilon
        )

    def to_rounded_rect(self, radii: "float | RoundedRectRadii") -> "RoundedRect":
        """Round the corners of this rectangle."""
        from bezshape.shapes.rounded_rect import RoundedRect

        return RoundedRect.from_rect(self, radii)

    def path_elements(self, tolerance: float) -> Iterator[PathEl]:
        check_tolerance(tolerance)
        return iter((
            MoveTo(Point(self.x0, self.y0)),
            LineTo(Point(self.x1, self.y0)),
            LineTo(Point(self.x1, self.y1)),
            LineTo(Point(self.x0, self.y1)),
            ClosePath(),
        ))

    def area(self) -> float:
        return self.width * self.height

    def perimeter(self, accuracy: float) -> float:
        check_tolerance(accuracy, "accuracy")
        return 2.0 * (abs(self.width) + abs(self.height))

    def winding(self, pt: Point) -> int:
        """Winding number, using half-open ``[min, max)`` intervals.

        Note: the sign is -1 when exactly one axis is flipped, matching the
        sign of ``area``.
        """
        xmin, xmax = min(self.x0, self.x1), max(self.x0, self.x1)
        ymin, ymax = min(self.y0, self.y1), max(self.y0, self.y1)
        if xmin <= pt.x < xmax and ymin <= pt.y < ymax:
            if (self.x1 > self.x0) != (self.y1 > self.y0):
                return -1
            return 1
        return 0

    def bounding_box(self) -> "Rect":
        return self.abs()

    def as_rect(self) -> "Rect | None":
        return self


ZERO = Rect(0.0, 0.0, 0.0, 0.0)
