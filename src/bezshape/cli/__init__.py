"""Command-line interface for bezshape.

This module provides the CLI using Typer with rich output for
readable reports.

Key features:
- One command per primitive (line, rect, rounded-rect, circle)
- Winding number probe at a chosen point
- Optional conversion to a BezPath before inspecting
- Element listing
"""

from bezshape.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
