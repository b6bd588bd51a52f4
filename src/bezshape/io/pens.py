"""Bridges between shapes and fontTools pens.

fontTools pens are the common drawing interface of the font tooling
ecosystem: bounds and area calculators, recorders, glyph builders and
rasterizer front-ends all accept one. This module lets any Shape be drawn
into a pen, and lets a pen build a BezPath.
"""

from collections.abc import Iterable
from typing import Any

from fontTools.pens.basePen import AbstractPen, BasePen

from bezshape.domain import ORIGIN, ClosePath, CurveTo, LineTo, MoveTo, PathEl, Point, QuadTo
from bezshape.exceptions import PathConversionError
from bezshape.shapes import BezPath, Shape, check_tolerance

# Drawing commands a BezPathPen can replay
_SUPPORTED_COMMANDS = frozenset(
    {"moveTo", "lineTo", "curveTo", "qCurveTo", "closePath", "endPath"}
)


def _point(pt: tuple[float, float]) -> Point:
    return Point(float(pt[0]), float(pt[1]))


class BezPathPen(BasePen):
    """A fontTools pen that records what it is drawn as a BezPath.

    TrueType quadratic runs with implied on-curve points and cubic
    super-Bezier runs are split into single segments by BasePen.

    Example:
        pen = BezPathPen()
        glyph.draw(pen)
        path = pen.path
    """

    def __init__(self, glyphSet: Any = None) -> None:  # noqa: N803
        super().__init__(glyphSet)
        self.path = BezPath()

    def _moveTo(self, pt: tuple[float, float]) -> None:
        self.path.move_to(_point(pt))

    def _lineTo(self, pt: tuple[float, float]) -> None:
        self.path.line_to(_point(pt))

    def _curveToOne(
        self,
        pt1: tuple[float, float],
        pt2: tuple[float, float],
        pt3: tuple[float, float],
    ) -> None:
        self.path.curve_to(_point(pt1), _point(pt2), _point(pt3))

    def _qCurveToOne(self, pt1: tuple[float, float], pt2: tuple[float, float]) -> None:
        self.path.quad_to(_point(pt1), _point(pt2))

    def _closePath(self) -> None:
        self.path.close_path()


def draw_shape(shape: Shape, pen: AbstractPen, tolerance: float = 0.1) -> None:
    """Draw a shape into a fontTools pen.

    Open subpaths are finished with ``endPath``, closed ones with
    ``closePath``. A stored element slice is replayed directly when the
    shape has one.

    Args:
        shape: The shape to draw
        pen: Any fontTools pen
        tolerance: Curve approximation tolerance for the conversion

    Raises:
        ToleranceError: If tolerance is negative
    """
    check_tolerance(tolerance)
    stored = shape.as_path_slice()
    elements: Iterable[PathEl] = stored if stored is not None else shape.path_elements(tolerance)

    open_subpath = False
    start = ORIGIN

    for el in elements:
        if isinstance(el, MoveTo):
            if open_subpath:
                pen.endPath()
            pen.moveTo(el.p.to_tuple())
            start = el.p
            open_subpath = True
            continue

        if isinstance(el, ClosePath):
            if open_subpath:
                pen.closePath()
            open_subpath = False
            continue

        if not open_subpath:
            # Pens require an explicit move before drawing
            pen.moveTo(start.to_tuple())
            open_subpath = True

        if isinstance(el, LineTo):
            pen.lineTo(el.p.to_tuple())
        elif isinstance(el, QuadTo):
            pen.qCurveTo(el.p1.to_tuple(), el.p2.to_tuple())
        elif isinstance(el, CurveTo):
            pen.curveTo(el.p1.to_tuple(), el.p2.to_tuple(), el.p3.to_tuple())

    if open_subpath:
        pen.endPath()


def recording_to_path(recording: Iterable[tuple[str, tuple[Any, ...]]]) -> BezPath:
    """Convert a RecordingPen recording into a BezPath.

    The recording holds drawing commands like:
    - ('moveTo', ((x, y),))
    - ('lineTo', ((x, y),))
    - ('qCurveTo', ((x1, y1), (x2, y2), ...))  # Quadratic, possibly implied
    - ('curveTo', ((x1, y1), (x2, y2), (x3, y3)))  # Cubic
    - ('closePath', ()) or ('endPath', ())

    Args:
        recording: The ``value`` of a fontTools RecordingPen

    Returns:
        A new BezPath

    Raises:
        PathConversionError: If the recording contains a command that is
            not a plain drawing command (components, for example)
    """
    pen = BezPathPen()
    for command, args in recording:
        if command not in _SUPPORTED_COMMANDS:
            raise PathConversionError(command, "unsupported drawing command")
        try:
            getattr(pen, command)(*args)
        except (TypeError, ValueError, AssertionError) as e:
            raise PathConversionError(command, str(e)) from e
    return pen.path
