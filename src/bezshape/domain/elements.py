"""Path elements: the drawing instructions an outline is made of.

An outline is an ordered sequence of elements. Each element is one of:
- MoveTo: start a new subpath at a point
- LineTo: straight line to a point
- QuadTo: quadratic Bezier curve (one control point)
- CurveTo: cubic Bezier curve (two control points)
- ClosePath: close the current subpath back to its start
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from bezshape.domain.point import Point


@dataclass(frozen=True, slots=True)
class MoveTo:
    """Start a new subpath at ``p``."""

    p: Point

    def end_point(self) -> Point | None:
        return self.p

    def points(self) -> tuple[Point, ...]:
        return (self.p,)


@dataclass(frozen=True, slots=True)
class LineTo:
    """Draw a straight line to ``p``."""

    p: Point

    def end_point(self) -> Point | None:
        return self.p

    def points(self) -> tuple[Point, ...]:
        return (self.p,)


@dataclass(frozen=True, slots=True)
class QuadTo:
    """Draw a quadratic Bezier curve with control ``p1`` ending at ``p2``."""

    p1: Point
    p2: Point

    def end_point(self) -> Point | None:
        return self.p2

    def points(self) -> tuple[Point, ...]:
        return (self.p1, self.p2)


@dataclass(frozen=True, slots=True)
class CurveTo:
    """Draw a cubic Bezier curve with controls ``p1``, ``p2`` ending at ``p3``."""

    p1: Point
    p2: Point
    p3: Point

    def end_point(self) -> Point | None:
        return self.p3

    def points(self) -> tuple[Point, ...]:
        return (self.p1, self.p2, self.p3)


@dataclass(frozen=True, slots=True)
class ClosePath:
    """Close the current subpath with a line back to its start."""

    def end_point(self) -> Point | None:
        return None

    def points(self) -> tuple[Point, ...]:
        return ()


PathEl = MoveTo | LineTo | QuadTo | CurveTo | ClosePath


def subpaths(elements: Iterable[PathEl]) -> Iterator[list[PathEl]]:
    """Group elements into maximal runs between subpath boundaries.

    A run starts at a MoveTo (or at the first element, if the sequence does
    not open with one) and ends at a ClosePath or right before the next
    MoveTo. The grouping is lazy: each run is yielded as soon as it ends.

    Args:
        elements: Element sequence to group

    Yields:
        Lists of elements, one per subpath
    """
    current: list[PathEl] = []
    for el in elements:
        if isinstance(el, MoveTo) and current:
            yield current
            current = []
        current.append(el)
        if isinstance(el, ClosePath):
            yield current
            current = []
    if current:
        yield current
