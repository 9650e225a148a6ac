"""Positioned glyphs produced by text layout."""

from dataclasses import dataclass


@dataclass(frozen=True)
class OutputPosition:
    """A character placed on screen.

    Attributes:
        c: The character drawn
        pos: Top-left draw position in pixels; signed because kerning can
            push it left of or above the origin
        size: The character's advance, reused as its drawn footprint
    """

    c: str
    pos: tuple[int, int]
    size: tuple[int, int]

    @property
    def x(self) -> int:
        return self.pos[0]

    @property
    def y(self) -> int:
        return self.pos[1]
