"""Internal circular-arc to cubic Bezier approximation.

This is an internal module shared by Circle and RoundedRect.
Not intended for public use.
"""

import math
from collections.abc import Iterator

from bezshape.domain import CurveTo, Point

# Upper bound on cubic segments per quarter turn. Reached only for
# tolerances far below double precision (including tolerance 0).
MAX_SEGMENTS_PER_QUARTER = 256


def arc_segment_count(radius: float, sweep: float, tolerance: float) -> int:
    """Number of cubic segments needed to approximate an arc.

    The approximation error of one cubic over an angle ``a`` is roughly
    ``radius * a**6 / 1.1163`` (after scaling), which gives a count that
    scales as ``tolerance ** (-1/6)``. The count never decreases when the
    tolerance shrinks.

    Args:
        radius: Arc radius
        sweep: Swept angle in radians (sign ignored)
        tolerance: Maximum deviation from the true arc

    Returns:
        Segment count, at least 1
    """
    radius = abs(radius)
    if radius == 0.0:
        scaled_err = 0.0
    elif tolerance > 0.0:
        scaled_err = radius / tolerance
    else:
        scaled_err = math.inf

    n_err = max((1.1163 * scaled_err) ** (1.0 / 6.0), 3.999_999)
    quarters = abs(sweep) / (math.pi / 2)
    cap = max(1, math.ceil(MAX_SEGMENTS_PER_QUARTER * quarters))
    if math.isinf(n_err):
        return cap

    n = math.ceil(n_err * abs(sweep) / (2 * math.pi))
    return max(1, min(n, cap))


def arc_cubics(
    center: Point,
    radius: float,
    start_angle: float,
    sweep: float,
    n: int,
    end: Point | None = None,
) -> Iterator[CurveTo]:
    """Yield cubic elements approximating a circular arc.

    Angles are measured from the +x axis towards +y, so a positive sweep
    runs in the positive-area direction. The arc starts at
    ``center + radius * (cos(start_angle), sin(start_angle))``; the caller
    is expected to already be there.

    Args:
        center: Arc center
        radius: Arc radius
        start_angle: Starting angle in radians
        sweep: Swept angle in radians
        n: Number of cubic segments
        end: Exact final point, to avoid rounding drift at the joint

    Yields:
        CurveTo elements, ``n`` of them
    """
    step = sweep / n
    arm = (4.0 / 3.0) * math.tan(abs(step) / 4.0) * math.copysign(1.0, step) * radius

    angle = start_angle
    cos0, sin0 = math.cos(angle), math.sin(angle)
    p0 = Point(center.x + radius * cos0, center.y + radius * sin0)

    for i in range(1, n + 1):
        angle = start_angle + step * i
        cos1, sin1 = math.cos(angle), math.sin(angle)
        if i == n and end is not None:
            p3 = end
        else:
            p3 = Point(center.x + radius * cos1, center.y + radius * sin1)

        p1 = Point(p0.x - arm * sin0, p0.y + arm * cos0)
        p2 = Point(p3.x + arm * sin1, p3.y - arm * cos1)
        yield CurveTo(p1, p2, p3)

        p0, cos0, sin0 = p3, cos1, sin1
