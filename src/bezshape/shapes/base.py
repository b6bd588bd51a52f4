"""The Shape protocol and its borrowed-view wrapper.

Every geometric type in bezshape derives from Shape. Algorithms that accept
a Shape should:

1. Probe the identity-recovery methods (``as_line``, ``as_rect``,
   ``as_rounded_rect``, ``as_circle``, ``as_path_slice``) first. These
   answer in O(1) and never compute or approximate anything.
2. Fall back to ``path_elements`` / ``path_segments`` (lazy) or
   ``to_path`` / ``into_path`` (eager) only when no probe applies.

Skipping the probes never changes a result, only its cost.

Sign convention: positive area means that y increases while x is positive.
That is clockwise when y points down (the usual graphics convention) and
counter-clockwise when y points up (the usual math convention). Winding
numbers share this sign.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator, Sequence
from typing import TYPE_CHECKING

from bezshape.domain import PathEl, Point, subpaths
from bezshape.exceptions import ToleranceError

if TYPE_CHECKING:
    from bezshape.shapes.bez_path import BezPath
    from bezshape.shapes.circle import Circle
    from bezshape.shapes.line import Line
    from bezshape.shapes.rect import Rect
    from bezshape.shapes.rounded_rect import RoundedRect
    from bezshape.shapes.segments import PathSeg


def check_tolerance(value: float, name: str = "tolerance") -> float:
    """Validate a tolerance or accuracy argument.

    Args:
        value: The value to check
        name: Argument name used in the error message

    Returns:
        The value, unchanged

    Raises:
        ToleranceError: If value is negative or NaN
    """
    if not value >= 0.0:
        raise ToleranceError(name, value)
    return value


class Shape(ABC):
    """A generic open or closed shape.

    Subclasses implement ``path_elements``, ``area``, ``perimeter``,
    ``winding`` and ``bounding_box``. Everything else has a default built on
    top of those, and the ``as_*`` probes default to None.
    """

    __slots__ = ()

    @abstractmethod
    def path_elements(self, tolerance: float) -> Iterator[PathEl]:
        """Return an iterator over this shape as Bezier path elements.

        Each call returns a fresh, single-pass iterator. Shapes that can
        compute their elements on the fly do so without building a list.

        The ``tolerance`` controls how closely curved primitives such as
        circles are approximated by cubic Beziers. For drawing UI elements
        0.1 is appropriate; scientific uses may want smaller values. The
        number of cubic segments scales as ``tolerance ** (-1/6)``. A
        tolerance of 0 is accepted and yields the finest subdivision the
        shape supports.

        Raises:
            ToleranceError: If tolerance is negative (raised at call time)
        """

    def path_segments(self, tolerance: float) -> Iterator["PathSeg"]:
        """Return an iterator over this shape as Bezier path segments.

        Segments are derived one per drawing element from
        ``path_elements``, with a closing line for each ClosePath that does
        not already end at the subpath start.
        """
        from bezshape.shapes.segments import segments

        return segments(self.path_elements(tolerance))

    def path_subpaths(self, tolerance: float) -> Iterator[list[PathEl]]:
        """Return an iterator over the maximal element runs of this shape.

        Each run begins with a MoveTo and ends at a ClosePath or right
        before the next MoveTo.
        """
        return subpaths(self.path_elements(tolerance))

    def to_path(self, tolerance: float) -> "BezPath":
        """Convert to a Bezier path.

        This always allocates a new path, even when the shape already is
        one. It is appropriate when both the source shape and the resulting
        path are to be retained.
        """
        from bezshape.shapes.bez_path import BezPath

        return BezPath(self.path_elements(tolerance))

    def into_path(self, tolerance: float) -> "BezPath":
        """Convert into a Bezier path, giving up the source shape.

        This allocates in the general case, but returns the shape itself
        when it already is a BezPath. Callers must not keep using the
        source after handing it over.
        """
        return self.to_path(tolerance)

    @abstractmethod
    def area(self) -> float:
        """Signed area.

        Only meaningful for closed shapes. Positive when y increases while
        x is positive.
        """

    @abstractmethod
    def perimeter(self, accuracy: float) -> float:
        """Total length of the boundary, within ``accuracy``.

        Raises:
            ToleranceError: If accuracy is negative
        """

    @abstractmethod
    def winding(self, pt: Point) -> int:
        """Winding number of ``pt``.

        Only meaningful for closed shapes. The sign matches ``area``: +1
        inside a positive-area shape, -1 inside a negative-area one, and
        larger magnitudes for self-overlapping outlines.
        """

    @abstractmethod
    def bounding_box(self) -> "Rect":
        """The smallest axis-aligned rectangle enclosing the shape."""

    def contains(self, pt: Point) -> bool:
        """Check whether ``pt`` is inside the shape under the nonzero rule."""
        return self.winding(pt) != 0

    def as_line(self) -> "Line | None":
        """If the shape is a line, make it available."""
        return None

    def as_rect(self) -> "Rect | None":
        """If the shape is a rectangle, make it available."""
        return None

    def as_rounded_rect(self) -> "RoundedRect | None":
        """If the shape is a rounded rectangle, make it available."""
        return None

    def as_circle(self) -> "Circle | None":
        """If the shape is a circle, make it available."""
        return None

    def as_path_slice(self) -> Sequence[PathEl] | None:
        """If the shape stores its elements contiguously, expose them.

        The returned sequence is a read-only view, not a copy.
        """
        return None


class ShapeRef(Shape):
    """A non-owning view of another shape.

    Forwards every Shape operation to the referenced shape unchanged, so
    code written against Shape accepts either a shape or a view of one with
    identical results. The view never hands the referenced shape out
    through ``into_path``; it copies instead.

    Example:
        view = ShapeRef(path)
        assert view.area() == path.area()
    """

    __slots__ = ("_shape",)

    def __init__(self, shape: Shape) -> None:
        """Initialize the view.

        Args:
            shape: The shape to forward to
        """
        self._shape = shape

    @property
    def target(self) -> Shape:
        """The referenced shape."""
        return self._shape

    def path_elements(self, tolerance: float) -> Iterator[PathEl]:
        return self._shape.path_elements(tolerance)

    def path_segments(self, tolerance: float) -> Iterator["PathSeg"]:
        return self._shape.path_segments(tolerance)

    def path_subpaths(self, tolerance: float) -> Iterator[list[PathEl]]:
        return self._shape.path_subpaths(tolerance)

    def to_path(self, tolerance: float) -> "BezPath":
        return self._shape.to_path(tolerance)

    def area(self) -> float:
        return self._shape.area()

    def perimeter(self, accuracy: float) -> float:
        return self._shape.perimeter(accuracy)

    def winding(self, pt: Point) -> int:
        return self._shape.winding(pt)

    def bounding_box(self) -> "Rect":
        return self._shape.bounding_box()

    def contains(self, pt: Point) -> bool:
        return self._shape.contains(pt)

    def as_line(self) -> "Line | None":
        return self._shape.as_line()

    def as_rect(self) -> "Rect | None":
        return self._shape.as_rect()

    def as_rounded_rect(self) -> "RoundedRect | None":
        return self._shape.as_rounded_rect()

    def as_circle(self) -> "Circle | None":
        return self._shape.as_circle()

    def as_path_slice(self) -> Sequence[PathEl] | None:
        return self._shape.as_path_slice()

    def __repr__(self) -> str:
        return f"ShapeRef({self._shape!r})"

