"""Shape protocol and concrete shapes.

Key classes:
- Shape: Abstract capability set every shape implements
- ShapeRef: Borrowed view forwarding every Shape operation
- Line, Rect, RoundedRect, Circle: Primitive shapes
- QuadBez, CubicBez: Curve segments (also open shapes)
- BezPath: Retained outline made of path elements

Key functions:
- segments: Derive drawable segments from path elements
- check_tolerance: Validate tolerance/accuracy arguments
"""

from bezshape.shapes.base import Shape, ShapeRef, check_tolerance
from bezshape.shapes.bez_path import BezPath, PathSlice
from bezshape.shapes.circle import Circle
from bezshape.shapes.curves import CubicBez, QuadBez
from bezshape.shapes.line import Line
from bezshape.shapes.rect import Rect
from bezshape.shapes.rounded_rect import RoundedRect, RoundedRectRadii
from bezshape.shapes.segments import PathSeg, segments

__all__ = [
    # Protocol
    "Shape",
    "ShapeRef",
    "check_tolerance",
    # Primitives
    "Circle",
    "Line",
    "Rect",
    "RoundedRect",
    "RoundedRectRadii",
    # Curves and paths
    "BezPath",
    "CubicBez",
    "PathSeg",
    "PathSlice",
    "QuadBez",
    "segments",
]
