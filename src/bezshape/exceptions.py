"""Exception hierarchy for bezshape."""


class BezshapeError(Exception):
    """Base exception for all bezshape errors."""

    pass


class GeometryError(BezshapeError):
    """Errors in geometric calculations."""

    pass


class ToleranceError(GeometryError, ValueError):
    """A tolerance or accuracy argument outside its domain.

    Raised eagerly by every conversion and measurement entry point. This
    signals caller misuse, not a runtime condition, so callers should fix
    the argument rather than catch it.
    """

    def __init__(self, name: str, value: float) -> None:
        self.name = name
        self.value = value
        super().__init__(f"{name} must be a non-negative number, got {value!r}")


class PathConversionError(GeometryError):
    """Error converting foreign drawing commands into a path."""

    def __init__(self, command: str, reason: str) -> None:
        self.command = command
        self.reason = reason
        super().__init__(f"Cannot convert '{command}': {reason}")


class ShapeSpecError(BezshapeError):
    """Invalid description of a shape to build."""

    def __init__(self, value: str, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid shape argument '{value}': {reason}")
