"""Pen I/O layer for bezshape.

This module connects shapes to fontTools pens. It provides a thin
abstraction layer between fontTools drawing commands and the path element
model.

Key responsibilities:
- Draw any Shape into a fontTools pen
- Build a BezPath from pen drawing calls or a RecordingPen recording

Key classes:
- BezPathPen: fontTools pen producing a BezPath

Key functions:
- draw_shape: Replay a shape's elements onto a pen
- recording_to_path: Convert a RecordingPen value into a BezPath
"""

from bezshape.io.pens import BezPathPen, draw_shape, recording_to_path

__all__ = [
    "BezPathPen",
    "draw_shape",
    "recording_to_path",
]
