"""CLI application entry point for bezshape.

This module provides the main CLI interface using Typer. Each command
builds one primitive from its arguments and prints what the Shape protocol
reports about it.
"""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from bezshape import __version__
from bezshape.cli.output import (
    console,
    print_elements,
    print_error,
    print_header,
    print_report,
    print_step,
)
from bezshape.config import BezshapeSettings, GeometryConfig, LoggingConfig
from bezshape.core import inspect_shape
from bezshape.domain import Point
from bezshape.exceptions import BezshapeError, ShapeSpecError
from bezshape.shapes import Circle, Line, Rect, RoundedRect, Shape
from bezshape.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="bezshape",
    help="Inspect 2D shapes through the bezshape Shape protocol.",
    add_completion=False,
    no_args_is_help=True,
)

ToleranceOption = Annotated[
    float,
    typer.Option(
        "--tolerance",
        "-t",
        help="Curve approximation tolerance",
        min=0.0,
        max=100.0,
    ),
]
AccuracyOption = Annotated[
    float,
    typer.Option(
        "--accuracy",
        "-a",
        help="Perimeter accuracy",
        min=0.0,
        max=1.0,
    ),
]
PointOption = Annotated[
    str | None,
    typer.Option(
        "--point",
        "-p",
        help="Point to compute the winding number at, as 'x,y'",
    ),
]
AsPathOption = Annotated[
    bool,
    typer.Option(
        "--as-path",
        help="Inspect the shape converted into a BezPath instead",
    ),
]
ElementsOption = Annotated[
    bool,
    typer.Option(
        "--elements",
        "-e",
        help="List the path elements",
    ),
]
LogLevelOption = Annotated[
    str,
    typer.Option(
        "--log-level",
        help="Logging level (DEBUG|INFO|WARNING|ERROR)",
    ),
]
LogFileOption = Annotated[
    Path | None,
    typer.Option(
        "--log-file",
        help="Write detailed logs to file",
    ),
]
QuietOption = Annotated[
    bool,
    typer.Option(
        "--quiet",
        "-q",
        help="Only print the report",
    ),
]

_DEFAULTS = GeometryConfig()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]bezshape[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Inspect 2D shapes through the bezshape Shape protocol.

    Coordinates that start with a minus sign must follow a '--' separator,
    for example: bezshape circle -- -1 0 2
    """


def parse_point(value: str) -> Point:
    """Parse an 'x,y' string into a Point.

    Args:
        value: Text such as "1.5,-2"

    Returns:
        The parsed point

    Raises:
        ShapeSpecError: If the text is not two comma-separated numbers
    """
    parts = value.split(",")
    if len(parts) != 2:
        raise ShapeSpecError(value, "expected two comma-separated numbers")
    try:
        return Point(float(parts[0]), float(parts[1]))
    except ValueError as e:
        raise ShapeSpecError(value, "coordinates must be numbers") from e


def _inspect(
    shape: Shape,
    tolerance: float,
    accuracy: float,
    point: str | None,
    as_path: bool,
    elements: bool,
    log_level: str,
    log_file: Path | None,
    quiet: bool,
) -> None:
    """Build settings, inspect a shape and print the report."""
    try:
        settings = BezshapeSettings(
            geometry=GeometryConfig(tolerance=tolerance, accuracy=accuracy),
            logging=LoggingConfig(log_file=log_file, log_level=log_level),
        )
    except ValidationError as e:
        print_error("Invalid settings", details=str(e))
        raise typer.Exit(code=1)

    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
    )

    try:
        probe = parse_point(point) if point is not None else None

        target = shape
        if as_path:
            target = shape.into_path(settings.geometry.tolerance)

        if not quiet:
            print_header(__version__)
            print_step(f"Inspecting {type(target).__name__}")

        report = inspect_shape(
            target,
            settings.geometry,
            point=probe,
            include_elements=elements,
        )
        logger.info(
            "Shape inspected",
            kind=report.kind,
            identity=report.identity,
            elements=report.element_count,
        )
    except BezshapeError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    print_report(report)
    if elements:
        print_elements(report.elements)


@app.command()
def line(
    x0: Annotated[float, typer.Argument(help="Start X")],
    y0: Annotated[float, typer.Argument(help="Start Y")],
    x1: Annotated[float, typer.Argument(help="End X")],
    y1: Annotated[float, typer.Argument(help="End Y")],
    tolerance: ToleranceOption = _DEFAULTS.tolerance,
    accuracy: AccuracyOption = _DEFAULTS.accuracy,
    point: PointOption = None,
    as_path: AsPathOption = False,
    elements: ElementsOption = False,
    log_level: LogLevelOption = "WARNING",
    log_file: LogFileOption = None,
    quiet: QuietOption = False,
) -> None:
    """Inspect a line from (X0, Y0) to (X1, Y1)."""
    shape = Line(Point(x0, y0), Point(x1, y1))
    _inspect(shape, tolerance, accuracy, point, as_path, elements, log_level, log_file, quiet)


@app.command()
def rect(
    x0: Annotated[float, typer.Argument(help="First corner X")],
    y0: Annotated[float, typer.Argument(help="First corner Y")],
    x1: Annotated[float, typer.Argument(help="Opposite corner X")],
    y1: Annotated[float, typer.Argument(help="Opposite corner Y")],
    tolerance: ToleranceOption = _DEFAULTS.tolerance,
    accuracy: AccuracyOption = _DEFAULTS.accuracy,
    point: PointOption = None,
    as_path: AsPathOption = False,
    elements: ElementsOption = False,
    log_level: LogLevelOption = "WARNING",
    log_file: LogFileOption = None,
    quiet: QuietOption = False,
) -> None:
    """Inspect the rectangle with corners (X0, Y0) and (X1, Y1)."""
    shape = Rect(x0, y0, x1, y1)
    _inspect(shape, tolerance, accuracy, point, as_path, elements, log_level, log_file, quiet)


@app.command("rounded-rect")
def rounded_rect(
    x0: Annotated[float, typer.Argument(help="First corner X")],
    y0: Annotated[float, typer.Argument(help="First corner Y")],
    x1: Annotated[float, typer.Argument(help="Opposite corner X")],
    y1: Annotated[float, typer.Argument(help="Opposite corner Y")],
    radius: Annotated[float, typer.Argument(help="Corner radius", min=0.0)],
    tolerance: ToleranceOption = _DEFAULTS.tolerance,
    accuracy: AccuracyOption = _DEFAULTS.accuracy,
    point: PointOption = None,
    as_path: AsPathOption = False,
    elements: ElementsOption = False,
    log_level: LogLevelOption = "WARNING",
    log_file: LogFileOption = None,
    quiet: QuietOption = False,
) -> None:
    """Inspect a rounded rectangle with a uniform corner RADIUS."""
    shape = RoundedRect.from_coords(x0, y0, x1, y1, radius)
    _inspect(shape, tolerance, accuracy, point, as_path, elements, log_level, log_file, quiet)


@app.command()
def circle(
    cx: Annotated[float, typer.Argument(help="Center X")],
    cy: Annotated[float, typer.Argument(help="Center Y")],
    radius: Annotated[float, typer.Argument(help="Radius", min=0.0)],
    tolerance: ToleranceOption = _DEFAULTS.tolerance,
    accuracy: AccuracyOption = _DEFAULTS.accuracy,
    point: PointOption = None,
    as_path: AsPathOption = False,
    elements: ElementsOption = False,
    log_level: LogLevelOption = "WARNING",
    log_file: LogFileOption = None,
    quiet: QuietOption = False,
) -> None:
    """Inspect the circle centered at (CX, CY) with the given RADIUS."""
    shape = Circle(Point(cx, cy), radius)
    _inspect(shape, tolerance, accuracy, point, as_path, elements, log_level, log_file, quiet)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
