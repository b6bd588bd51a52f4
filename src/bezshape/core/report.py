"""Shape inspection reports.

Collects everything the Shape protocol can say about a shape into one
record: which identity probe (if any) recognizes it, its measurements, and
the shape of its element sequence.
"""

import logging
from dataclasses import dataclass, field

from bezshape.config import GeometryConfig
from bezshape.domain import ClosePath, PathEl, Point
from bezshape.shapes import Rect, Shape, ShapeRef

logger = logging.getLogger(__name__)


@dataclass
class ShapeReport:
    """Summary of one shape.

    Attributes:
        kind: Concrete type name (the referenced type for a ShapeRef)
        identity: Name of the identity probe that matched, if any
        area: Signed area
        perimeter: Perimeter at the configured accuracy
        bounding_box: Exact bounding box
        element_count: Number of path elements at the configured tolerance
        segment_count: Number of path segments at the configured tolerance
        subpath_count: Number of subpaths
        closed: True if every subpath ends with a ClosePath
        winding: Winding number at the probe point, if one was given
        elements: The element sequence, if requested
    """

    kind: str
    identity: str | None
    area: float
    perimeter: float
    bounding_box: Rect
    element_count: int
    segment_count: int
    subpath_count: int
    closed: bool
    winding: int | None = None
    elements: list[PathEl] = field(default_factory=list)


def identify(shape: Shape) -> str | None:
    """Name of the identity probe a shape answers, if any.

    Probes are tried in order: line, rect, rounded_rect, circle,
    path_slice. At most one of the primitive probes ever matches.
    """
    if shape.as_line() is not None:
        return "line"
    if shape.as_rect() is not None:
        return "rect"
    if shape.as_rounded_rect() is not None:
        return "rounded_rect"
    if shape.as_circle() is not None:
        return "circle"
    if shape.as_path_slice() is not None:
        return "path_slice"
    return None


def inspect_shape(
    shape: Shape,
    config: GeometryConfig | None = None,
    point: Point | None = None,
    include_elements: bool = False,
) -> ShapeReport:
    """Build a report for a shape.

    Args:
        shape: The shape to inspect
        config: Tolerance and accuracy to use (defaults if None)
        point: Optional point to compute the winding number at
        include_elements: Keep the element sequence in the report

    Returns:
        ShapeReport for the shape
    """
    config = config or GeometryConfig()
    target = shape.target if isinstance(shape, ShapeRef) else shape

    subpaths = list(shape.path_subpaths(config.tolerance))
    element_count = sum(len(run) for run in subpaths)
    segment_count = sum(1 for _ in shape.path_segments(config.tolerance))
    closed = bool(subpaths) and all(isinstance(run[-1], ClosePath) for run in subpaths)

    report = ShapeReport(
        kind=type(target).__name__,
        identity=identify(shape),
        area=shape.area(),
        perimeter=shape.perimeter(config.accuracy),
        bounding_box=shape.bounding_box(),
        element_count=element_count,
        segment_count=segment_count,
        subpath_count=len(subpaths),
        closed=closed,
        winding=shape.winding(point) if point is not None else None,
        elements=[el for run in subpaths for el in run] if include_elements else [],
    )
    logger.debug(
        "Inspected %s: %d elements, %d segments, identity=%s",
        report.kind, report.element_count, report.segment_count, report.identity,
    )
    return report
