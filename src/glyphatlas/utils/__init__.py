"""Utility functions for glyphatlas.

This module provides utility functions including:

- Logging setup and configuration
"""

from glyphatlas.utils.logging import configure_logging

__all__ = [
    "configure_logging",
]
