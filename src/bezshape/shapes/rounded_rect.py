"""Rectangles with circular corners."""

import math
from collections.abc import Iterator
from dataclasses import dataclass

from bezshape.domain import ClosePath, LineTo, MoveTo, PathEl, Point
from bezshape.shapes._arc import arc_cubics, arc_segment_count
from bezshape.shapes.base import Shape, check_tolerance
from bezshape.shapes.rect import Rect


@dataclass(frozen=True, slots=True)
class RoundedRectRadii:
    """Corner radii of a rounded rectangle.

    Corner names assume y pointing down: the top-left corner is the one at
    the minimum x and minimum y.

    Attributes:
        top_left: Radius at (min x, min y)
        top_right: Radius at (max x, min y)
        bottom_right: Radius at (max x, max y)
        bottom_left: Radius at (min x, max y)
    """

    top_left: float
    top_right: float
    bottom_right: float
    bottom_left: float

    @classmethod
    def uniform(cls, radius: float) -> "RoundedRectRadii":
        """Same radius at every corner."""
        return cls(radius, radius, radius, radius)

    def to_tuple(self) -> tuple[float, float, float, float]:
        return (self.top_left, self.top_right, self.bottom_right, self.bottom_left)

    def clamped(self, max_radius: float) -> "RoundedRectRadii":
        """Absolute radii, each limited to ``max_radius``."""
        return RoundedRectRadii(*(min(abs(r), max_radius) for r in self.to_tuple()))

    def as_single_radius(self) -> float | None:
        """The common radius, if every corner has the same one."""
        if len(set(self.to_tuple())) == 1:
            return self.top_left
        return None


@dataclass(frozen=True, slots=True)
class RoundedRect(Shape):
    """A rectangle with quarter-circle corners.

    The rectangle is normalized and the radii are clamped to half the
    shorter side on construction, so every instance is well formed.

    Attributes:
        rect: The bounding rectangle
        radii: Corner radii
    """

    rect: Rect
    radii: RoundedRectRadii

    def __post_init__(self) -> None:
        rect = self.rect.abs()
        shortest = min(rect.width, rect.height)
        object.__setattr__(self, "rect", rect)
        object.__setattr__(self, "radii", self.radii.clamped(shortest / 2))

    @classmethod
    def from_rect(cls, rect: Rect, radii: "float | RoundedRectRadii") -> "RoundedRect":
        """Build from a rectangle and either one radius or per-corner radii."""
        if not isinstance(radii, RoundedRectRadii):
            radii = RoundedRectRadii.uniform(radii)
        return cls(rect, radii)

    @classmethod
    def from_coords(
        cls, x0: float, y0: float, x1: float, y1: float, radius: float
    ) -> "RoundedRect":
        """Build from corner coordinates and a uniform radius."""
        return cls.from_rect(Rect(x0, y0, x1, y1), radius)

    @property
    def width(self) -> float:
        return self.rect.width

    @property
    def height(self) -> float:
        return self.rect.height

    def center(self) -> Point:
        return self.rect.center()

    def path_elements(self, tolerance: float) -> Iterator[PathEl]:
        check_tolerance(tolerance)
        return self._iter_elements(tolerance)

    def _iter_elements(self, tolerance: float) -> Iterator[PathEl]:
        r = self.rect
        tl, tr, br, bl = self.radii.to_tuple()
        quarter = math.pi / 2

        # Each corner: (arc center, start angle, radius, point the arc ends at)
        corners = (
            (Point(r.x1 - tr, r.y0 + tr), -quarter, tr, Point(r.x1, r.y0 + tr)),
            (Point(r.x1 - br, r.y1 - br), 0.0, br, Point(r.x1 - br, r.y1)),
            (Point(r.x0 + bl, r.y1 - bl), quarter, bl, Point(r.x0, r.y1 - bl)),
            (Point(r.x0 + tl, r.y0 + tl), math.pi, tl, Point(r.x0 + tl, r.y0)),
        )
        # Straight edge end points, one before each corner
        edge_ends = (
            Point(r.x1 - tr, r.y0),
            Point(r.x1, r.y1 - br),
            Point(r.x0 + bl, r.y1),
            Point(r.x0, r.y0 + tl),
        )

        yield MoveTo(Point(r.x0 + tl, r.y0))
        for edge_end, (center, start_angle, radius, arc_end) in zip(edge_ends, corners):
            yield LineTo(edge_end)
            if radius > 0.0:
                n = arc_segment_count(radius, quarter, tolerance)
                yield from arc_cubics(center, radius, start_angle, quarter, n, end=arc_end)
        yield ClosePath()

    def area(self) -> float:
        # Each corner removes its r x r square and adds back a quarter circle.
        corner_terms = sum((math.pi / 4 - 1.0) * r * r for r in self.radii.to_tuple())
        return self.rect.area() + corner_terms

    def perimeter(self, accuracy: float) -> float:
        check_tolerance(accuracy, "accuracy")
        corner_terms = sum((math.pi / 2 - 2.0) * r for r in self.radii.to_tuple())
        return self.rect.perimeter(accuracy) + corner_terms

    def winding(self, pt: Point) -> int:
        center = self.center()
        half_w = self.width / 2
        half_h = self.height / 2
        dx = pt.x - center.x
        dy = pt.y - center.y

        if dy < 0.0:
            radius = self.radii.top_left if dx < 0.0 else self.radii.top_right
        else:
            radius = self.radii.bottom_left if dx < 0.0 else self.radii.bottom_right

        # Distance past the inner rectangle whose corners are the arc centers
        px = max(abs(dx) - (half_w - radius), 0.0)
        py = max(abs(dy) - (half_h - radius), 0.0)
        return 1 if px * px + py * py <= radius * radius else 0

    def bounding_box(self) -> Rect:
        return self.rect

    def as_rounded_rect(self) -> "RoundedRect | None":
        return self
