"""Two-dimensional point type."""

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable. Differences between points are also expressed
    as points, so the arithmetic helpers double as vector operations.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    @classmethod
    def from_tuple(cls, xy: tuple[float, float]) -> "Point":
        """Build a point from an (x, y) pair."""
        x, y = xy
        return cls(float(x), float(y))

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> "Point":
        return Point(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __neg__(self) -> "Point":
        return Point(-self.x, -self.y)

    def lerp(self, other: "Point", t: float) -> "Point":
        """Linearly interpolate towards ``other``.

        Args:
            other: Target point (reached at t=1)
            t: Interpolation parameter

        Returns:
            Interpolated point
        """
        return Point(self.x + (other.x - self.x) * t, self.y + (other.y - self.y) * t)

    def midpoint(self, other: "Point") -> "Point":
        """Point halfway between this point and ``other``."""
        return Point((self.x + other.x) / 2, (self.y + other.y) / 2)

    def hypot(self) -> float:
        """Length of the vector from the origin to this point."""
        return math.hypot(self.x, self.y)

    def distance(self, other: "Point") -> float:
        """Euclidean distance to ``other``."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def cross(self, other: "Point") -> float:
        """Z component of the cross product, treating both as vectors."""
        return self.x * other.y - self.y * other.x

    def is_finite(self) -> bool:
        """Check that both coordinates are finite."""
        return math.isfinite(self.x) and math.isfinite(self.y)


ORIGIN = Point(0.0, 0.0)
