"""glyphatlas - Pre-rendered bitmap fonts and text layout.

A glyph atlas is a single image containing rasterized glyphs plus a JSON
metadata sidecar describing per-glyph advances, pixel offsets and pairwise
kerning. glyphatlas loads and saves such atlases and lays out text into
per-character draw positions.

Example:
    $ glyphatlas layout sans16.png "Hello"

This prints the draw position of every character of "Hello", using the
metrics in sans16.json.
"""

__version__ = "0.1.0"
__author__ = "glyphatlas contributors"

__all__ = ["__author__", "__version__"]
