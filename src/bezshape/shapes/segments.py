"""Derivation of path segments from path elements."""

from collections.abc import Iterable, Iterator

from bezshape.domain import ORIGIN, ClosePath, CurveTo, LineTo, MoveTo, PathEl, QuadTo
from bezshape.shapes.curves import CubicBez, QuadBez
from bezshape.shapes.line import Line

PathSeg = Line | QuadBez | CubicBez


def segments(elements: Iterable[PathEl]) -> Iterator[PathSeg]:
    """Turn a path element sequence into drawable segments, lazily.

    Each LineTo, QuadTo and CurveTo yields one segment starting at the
    current point. A ClosePath yields a closing line when the current point
    is not already the subpath start. Drawing before any MoveTo starts at
    the origin.

    Args:
        elements: Path elements to convert

    Yields:
        Line, QuadBez or CubicBez segments
    """
    start = ORIGIN
    last = ORIGIN
    for el in elements:
        if isinstance(el, MoveTo):
            start = el.p
            last = el.p
            continue
        if isinstance(el, ClosePath):
            if last != start:
                yield Line(last, start)
            last = start
            continue

        if isinstance(el, LineTo):
            seg: PathSeg = Line(last, el.p)
        elif isinstance(el, QuadTo):
            seg = QuadBez(last, el.p1, el.p2)
        elif isinstance(el, CurveTo):
            seg = CubicBez(last, el.p1, el.p2, el.p3)
        else:
            continue
        yield seg
        last = seg.end()
