"""Utility functions for bezshape.

This module provides utility functions including:

- Logging setup and configuration
"""

from bezshape.utils.logging import configure_logging

__all__ = [
    "configure_logging",
]
