"""Core algorithms for glyphatlas.

The layout engine turns text into draw positions using a font's advances,
pixel offsets and kerning. It is pure: no I/O, no state kept between calls.

Key classes:
- LayoutEngine: Single-pass text layout

Key functions:
- positions_for: Lay out text with a shared engine
- text_bounds: Width and final baseline of laid-out text
"""

from glyphatlas.core.layout import LayoutEngine, positions_for, text_bounds

__all__ = [
    "LayoutEngine",
    "positions_for",
    "text_bounds",
]
