"""bezshape - A uniform shape abstraction for 2D Bezier geometry.

bezshape lets geometric algorithms (rendering, hit-testing, measurement,
flattening) be written once against a single Shape protocol instead of once
per concrete shape type. Lines, rectangles, rounded rectangles, circles and
arbitrary Bezier paths all expose the same capability set.

Example:
    >>> from bezshape import Circle, Point
    >>> circle = Circle(Point(0.0, 0.0), 1.0)
    >>> circle.bounding_box()
    Rect(x0=-1.0, y0=-1.0, x1=1.0, y1=1.0)
"""

from bezshape.domain import (
    ClosePath,
    CurveTo,
    LineTo,
    MoveTo,
    PathEl,
    Point,
    QuadTo,
)
from bezshape.shapes import (
    BezPath,
    Circle,
    CubicBez,
    Line,
    PathSeg,
    QuadBez,
    Rect,
    RoundedRect,
    RoundedRectRadii,
    Shape,
    ShapeRef,
)

__version__ = "0.1.0"

__all__ = [
    "BezPath",
    "Circle",
    "ClosePath",
    "CubicBez",
    "CurveTo",
    "Line",
    "LineTo",
    "MoveTo",
    "PathEl",
    "PathSeg",
    "Point",
    "QuadBez",
    "QuadTo",
    "Rect",
    "RoundedRect",
    "RoundedRectRadii",
    "Shape",
    "ShapeRef",
    "__version__",
]
