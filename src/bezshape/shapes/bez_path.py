"""Retained Bezier paths."""

from collections.abc import Iterable, Iterator, Sequence
from typing import overload

from bezshape.domain import ClosePath, CurveTo, LineTo, MoveTo, PathEl, Point, QuadTo
from bezshape.shapes.base import Shape, check_tolerance
from bezshape.shapes.rect import ZERO, Rect
from bezshape.shapes.segments import PathSeg, segments


class PathSlice(Sequence[PathEl]):
    """Read-only view of a path's element storage.

    Wraps the underlying list without copying it. The view reflects later
    changes to the path it was taken from.
    """

    __slots__ = ("_items",)

    def __init__(self, items: list[PathEl]) -> None:
        self._items = items

    @overload
    def __getitem__(self, index: int) -> PathEl: ...

    @overload
    def __getitem__(self, index: slice) -> list[PathEl]: ...

    def __getitem__(self, index: int | slice) -> PathEl | list[PathEl]:
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[PathEl]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PathSlice):
            return self._items == other._items
        if isinstance(other, Sequence):
            return list(self._items) == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"PathSlice({self._items!r})"


class BezPath(Shape):
    """A Bezier path stored as a list of path elements.

    BezPath is the retained outline type: ``to_path`` on any shape produces
    one, and ``into_path`` on a BezPath returns the path itself. Paths are
    built incrementally with ``move_to``, ``line_to``, ``quad_to``,
    ``curve_to`` and ``close_path``; no Shape operation modifies them.

    Example:
        path = BezPath()
        path.move_to(Point(0, 0))
        path.line_to(Point(4, 0))
        path.line_to(Point(4, 2))
        path.close_path()
    """

    __slots__ = ("_elements", "_slice")

    def __init__(self, elements: Iterable[PathEl] = ()) -> None:
        """Initialize the path.

        Args:
            elements: Initial elements, copied into the path's own storage
        """
        self._elements: list[PathEl] = list(elements)
        self._slice = PathSlice(self._elements)

    def move_to(self, p: Point) -> None:
        """Start a new subpath at ``p``."""
        self._elements.append(MoveTo(p))

    def line_to(self, p: Point) -> None:
        """Add a straight line to ``p``."""
        self._elements.append(LineTo(p))

    def quad_to(self, p1: Point, p2: Point) -> None:
        """Add a quadratic curve with control ``p1`` ending at ``p2``."""
        self._elements.append(QuadTo(p1, p2))

    def curve_to(self, p1: Point, p2: Point, p3: Point) -> None:
        """Add a cubic curve with controls ``p1``, ``p2`` ending at ``p3``."""
        self._elements.append(CurveTo(p1, p2, p3))

    def close_path(self) -> None:
        """Close the current subpath."""
        self._elements.append(ClosePath())

    def push(self, el: PathEl) -> None:
        """Append one element."""
        self._elements.append(el)

    def extend(self, elements: Iterable[PathEl]) -> None:
        """Append several elements."""
        self._elements.extend(elements)

    def elements(self) -> PathSlice:
        """The elements of the path, as a read-only view."""
        return self._slice

    def segments(self) -> Iterator[PathSeg]:
        """Iterate over the path's segments."""
        return segments(self._elements)

    def is_empty(self) -> bool:
        """Check whether the path has no drawing elements."""
        return not any(not isinstance(el, MoveTo) for el in self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[PathEl]:
        return iter(self._elements)

    def __getitem__(self, index: int) -> PathEl:
        return self._elements[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BezPath):
            return NotImplemented
        return self._elements == other._elements

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"BezPath({self._elements!r})"

    def path_elements(self, tolerance: float) -> Iterator[PathEl]:
        check_tolerance(tolerance)
        return iter(self._elements)

    def into_path(self, tolerance: float) -> "BezPath":
        check_tolerance(tolerance)
        return self

    def area(self) -> float:
        return sum(seg.signed_area() for seg in self.segments())

    def perimeter(self, accuracy: float) -> float:
        check_tolerance(accuracy, "accuracy")
        segs = list(self.segments())
        if not segs:
            return 0.0
        # Share the error budget so the total stays within accuracy
        share = accuracy / len(segs)
        return sum(seg.arclen(share) for seg in segs)

    def winding(self, pt: Point) -> int:
        return sum(seg.winding_contribution(pt) for seg in self.segments())

    def bounding_box(self) -> Rect:
        bbox: Rect | None = None
        for seg in self.segments():
            seg_bbox = seg.bounding_box()
            bbox = seg_bbox if bbox is None else bbox.union(seg_bbox)
        if bbox is not None:
            return bbox

        # Only lone MoveTo elements, if anything
        for el in self._elements:
            if not isinstance(el, MoveTo):
                continue
            if bbox is None:
                bbox = Rect(el.p.x, el.p.y, el.p.x, el.p.y)
            else:
                bbox = bbox.union_pt(el.p)
        return bbox if bbox is not None else ZERO

    def as_path_slice(self) -> Sequence[PathEl] | None:
        return self._slice
