"""Command-line interface for glyphatlas.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Atlas summary and glyph metric tables
- Text layout preview
- Image format conversion
"""

from glyphatlas.cli.app import cli, main

__all__ = ["cli", "main"]
