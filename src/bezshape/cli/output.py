"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from bezshape.core import ShapeReport
from bezshape.domain import PathEl, Point
from bezshape.shapes import Rect

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def _fmt(value: float) -> str:
    return f"{value:.6g}"


def _fmt_point(pt: Point) -> str:
    return f"({_fmt(pt.x)}, {_fmt(pt.y)})"


def _fmt_rect(rect: Rect) -> str:
    return f"({_fmt(rect.x0)}, {_fmt(rect.y0)}) – ({_fmt(rect.x1)}, {_fmt(rect.y1)})"


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]bezshape[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_report(report: ShapeReport) -> None:
    """Print a shape report as a table.

    Args:
        report: The report to print
    """
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Property", style="bold")
    table.add_column("Value")

    identity = report.identity if report.identity is not None else "none"
    table.add_row("Kind", Text(report.kind))
    table.add_row("Identity", identity)
    table.add_row("Area", _fmt(report.area))
    table.add_row("Perimeter", _fmt(report.perimeter))
    table.add_row("Bounding box", _fmt_rect(report.bounding_box))
    table.add_row(
        "Elements",
        f"{report.element_count} {SYM_DOT} {report.segment_count} segments "
        f"{SYM_DOT} {report.subpath_count} subpaths",
    )
    table.add_row("Closed", "yes" if report.closed else "no")
    if report.winding is not None:
        table.add_row("Winding", str(report.winding))

    console.print(table)


def print_elements(elements: list[PathEl]) -> None:
    """Print a numbered list of path elements.

    Args:
        elements: Elements to print
    """
    table = Table(box=None, padding=(0, 2))
    table.add_column("#", justify="right", style="dim")
    table.add_column("Element", style="bold")
    table.add_column("Points")

    for idx, el in enumerate(elements):
        points = " ".join(_fmt_point(p) for p in el.points())
        table.add_row(str(idx), type(el).__name__, points)

    console.print(table)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {escape(message)}")
    if details:
        console.print(f"  {escape(details)}")
