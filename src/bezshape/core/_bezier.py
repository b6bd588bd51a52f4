"""Internal Bezier curve flattening algorithms.

This is an internal module containing helper functions for flatten.
Not intended for public use.
"""

import math

from bezshape.domain import Point


def flatten_quadratic(
    points: list[Point], tolerance: float, max_depth: int, depth: int = 0
) -> list[Point]:
    """Flatten a quadratic Bezier curve using recursive subdivision.

    Args:
        points: List of 3 control points [p0, p1, p2]
        tolerance: Maximum distance from true curve
        max_depth: Subdivision limit
        depth: Current recursion depth

    Returns:
        List of points approximating the curve, endpoints included
    """
    p0, p1, p2 = points

    # Deviation from the chord peaks at t=0.5 and is |2*p1 - p0 - p2| / 4
    distance = math.hypot(2 * p1.x - p0.x - p2.x, 2 * p1.y - p0.y - p2.y) / 4

    if distance <= tolerance or depth >= max_depth:
        return [p0, p2]

    # Subdivide at t=0.5
    q1 = p0.midpoint(p1)
    r1 = p1.midpoint(p2)
    mid = q1.midpoint(r1)

    left = flatten_quadratic([p0, q1, mid], tolerance, max_depth, depth + 1)
    right = flatten_quadratic([mid, r1, p2], tolerance, max_depth, depth + 1)

    # Combine, avoiding duplicate midpoint
    return left[:-1] + right


def flatten_cubic(
    points: list[Point], tolerance: float, max_depth: int, depth: int = 0
) -> list[Point]:
    """Flatten a cubic Bezier curve using recursive subdivision.

    Uses De Casteljau's algorithm for subdivision and the control-point
    flatness bound: the curve stays within ``sqrt(ux + uy) / 4`` of its chord.

    Args:
        points: List of 4 control points [p0, p1, p2, p3]
        tolerance: Maximum distance from true curve
        max_depth: Subdivision limit
        depth: Current recursion depth

    Returns:
        List of points approximating the curve, endpoints included
    """
    p0, p1, p2, p3 = points

    ux = max((3 * p1.x - 2 * p0.x - p3.x) ** 2, (3 * p2.x - p0.x - 2 * p3.x) ** 2)
    uy = max((3 * p1.y - 2 * p0.y - p3.y) ** 2, (3 * p2.y - p0.y - 2 * p3.y) ** 2)

    if ux + uy <= 16 * tolerance * tolerance or depth >= max_depth:
        return [p0, p3]

    # First level
    q1 = p0.midpoint(p1)
    q2 = p1.midpoint(p2)
    q3 = p2.midpoint(p3)

    # Second level
    r1 = q1.midpoint(q2)
    r2 = q2.midpoint(q3)

    # Third level (midpoint)
    mid = r1.midpoint(r2)

    left = flatten_cubic([p0, q1, r1, mid], tolerance, max_depth, depth + 1)
    right = flatten_cubic([mid, r2, q3, p3], tolerance, max_depth, depth + 1)

    # Combine, avoiding duplicate midpoint
    return left[:-1] + right
