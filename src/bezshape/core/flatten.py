"""Flattening shapes into polylines.

Flattening replaces every curve with straight line runs that stay within a
tolerance of the true curve. It is the usual last step before handing a
shape to a scanline rasterizer or a polygon library.

Before converting, flatten probes the shape for exact primitives so that
lines and rectangles never go through the general path machinery, and for
stored element slices so that paths are walked without being copied.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from bezshape.config import GeometryConfig
from bezshape.core._bezier import flatten_cubic, flatten_quadratic
from bezshape.domain import ORIGIN, ClosePath, CurveTo, LineTo, MoveTo, PathEl, Point, QuadTo
from bezshape.shapes import Shape, check_tolerance

logger = logging.getLogger(__name__)


@dataclass
class Polyline:
    """A run of connected points.

    Attributes:
        points: Vertices in drawing order
        closed: True if the run ends with an implied edge back to its start
    """

    points: list[Point] = field(default_factory=list)
    closed: bool = False

    def __len__(self) -> int:
        return len(self.points)


def flatten(
    shape: Shape,
    tolerance: float | None = None,
    config: GeometryConfig | None = None,
) -> list[Polyline]:
    """Flatten a shape into polylines, one per subpath.

    Args:
        shape: The shape to flatten
        tolerance: Maximum distance between curves and their polylines
            (defaults to ``config.flatten_tolerance``)
        config: Geometry settings (defaults are used if None)

    Returns:
        List of polylines

    Raises:
        ToleranceError: If tolerance is negative
    """
    config = config or GeometryConfig()
    if tolerance is None:
        tolerance = config.flatten_tolerance
    check_tolerance(tolerance)

    line = shape.as_line()
    if line is not None:
        logger.debug("Flattening line via fast path")
        return [Polyline([line.p0, line.p1], closed=False)]

    rect = shape.as_rect()
    if rect is not None:
        logger.debug("Flattening rect via fast path")
        corners = [
            Point(rect.x0, rect.y0),
            Point(rect.x1, rect.y0),
            Point(rect.x1, rect.y1),
            Point(rect.x0, rect.y1),
        ]
        return [Polyline(corners, closed=True)]

    elements: Iterable[PathEl]
    stored = shape.as_path_slice()
    if stored is not None:
        logger.debug("Flattening stored path slice (%d elements)", len(stored))
        elements = stored
    else:
        logger.debug("Flattening %s via path conversion", type(shape).__name__)
        elements = shape.path_elements(tolerance)

    return flatten_elements(elements, tolerance, config.max_flatten_depth)


def flatten_elements(
    elements: Iterable[PathEl], tolerance: float, max_depth: int = 16
) -> list[Polyline]:
    """Flatten a path element sequence into polylines.

    Args:
        elements: Elements to flatten
        tolerance: Maximum distance between curves and their polylines
        max_depth: Subdivision limit per curve

    Returns:
        List of polylines, one per subpath
    """
    polylines: list[Polyline] = []
    current: list[Point] = []
    start = ORIGIN

    for el in elements:
        if isinstance(el, MoveTo):
            if current:
                polylines.append(Polyline(current, closed=False))
            current = [el.p]
            start = el.p
            continue

        if isinstance(el, ClosePath):
            if current:
                polylines.append(Polyline(current, closed=True))
            current = []
            continue

        if not current:
            # Drawing without a MoveTo continues from the last subpath start
            current = [start]
        last = current[-1]

        if isinstance(el, LineTo):
            current.append(el.p)
        elif isinstance(el, QuadTo):
            current.extend(flatten_quadratic([last, el.p1, el.p2], tolerance, max_depth)[1:])
        elif isinstance(el, CurveTo):
            current.extend(
                flatten_cubic([last, el.p1, el.p2, el.p3], tolerance, max_depth)[1:]
            )

    if current:
        polylines.append(Polyline(current, closed=False))

    return polylines


def polyline_area(polyline: Polyline) -> float:
    """Signed area of a polyline using the shoelace formula.

    Uses the same sign convention as Shape.area. Returns 0.0 for runs with
    fewer than three points. The closing edge is always implied.
    """
    points = polyline.points
    n = len(points)
    if n < 3:
        return 0.0

    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += points[i].x * points[j].y
        area -= points[j].x * points[i].y

    return area / 2.0
