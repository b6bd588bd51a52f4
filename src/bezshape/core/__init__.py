"""Generic algorithms written against the Shape protocol.

Every algorithm here follows the same discipline: probe the identity
methods first, then fall back to path conversion.

Key functions:
- flatten: Convert a shape into polylines within a tolerance
- flatten_elements: Flatten a raw element sequence
- polyline_area: Shoelace area of a flattened run
- contains: Point hit-test with a fill rule
- identify: Name the identity probe a shape answers
- inspect_shape: Collect a shape's measurements into a report

Key classes:
- Polyline: One flattened subpath
- FillRule: Nonzero or even-odd inside test
- ShapeReport: Result of inspect_shape
"""

from bezshape.core.flatten import Polyline, flatten, flatten_elements, polyline_area
from bezshape.core.hit_test import FillRule, contains
from bezshape.core.report import ShapeReport, identify, inspect_shape

__all__ = [
    # Flattening
    "Polyline",
    "flatten",
    "flatten_elements",
    "polyline_area",
    # Hit-testing
    "FillRule",
    "contains",
    # Reports
    "ShapeReport",
    "identify",
    "inspect_shape",
]
