"""Domain models for bezshape.

This module contains the vocabulary every shape is expressed in: points and
the path elements an outline is made of. All models are:

- Immutable (frozen dataclasses with slots)
- Independent of any concrete shape type

Key classes:
- Point: A 2D point, also used as a vector
- MoveTo, LineTo, QuadTo, CurveTo, ClosePath: Path elements
- PathEl: Union of all path element types
"""

from bezshape.domain.elements import (
    ClosePath,
    CurveTo,
    LineTo,
    MoveTo,
    PathEl,
    QuadTo,
    subpaths,
)
from bezshape.domain.point import ORIGIN, Point

__all__: list[str] = [
    # Core types
    "ORIGIN",
    "Point",
    # Path elements
    "ClosePath",
    "CurveTo",
    "LineTo",
    "MoveTo",
    "PathEl",
    "QuadTo",
    "subpaths",
]
