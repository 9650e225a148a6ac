"""Domain models for glyphatlas.

This module contains the value types describing a pre-rendered bitmap font
and the output of laying text out with it. All models are frozen
dataclasses and independent of the image library used to decode atlases.

Key classes:
- CharInfo: Advance and pixel offset of one character
- FontModel: Atlas image plus metrics, glyph table and kerning table
- OutputPosition: A character with its computed draw position
"""

from glyphatlas.domain.font import CharInfo, FontModel, KerningTable
from glyphatlas.domain.position import OutputPosition

__all__: list[str] = [
    "CharInfo",
    "FontModel",
    "KerningTable",
    "OutputPosition",
]
