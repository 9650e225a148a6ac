"""Font model for pre-rendered glyph atlases.

This module defines the in-memory representation of a bitmap font: the
atlas image, global metrics, per-character placement info and pairwise
kerning. The model is generic over the image payload so the same metadata
can carry a decoded bitmap or a ``None`` placeholder.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from glyphatlas.domain.position import OutputPosition

ImageT = TypeVar("ImageT")
NewImageT = TypeVar("NewImageT")

KerningTable = Mapping[tuple[str, str], tuple[int, int]]

NO_KERNING: tuple[int, int] = (0, 0)


@dataclass(frozen=True)
class CharInfo:
    """Placement metrics for a single character in the atlas.

    Attributes:
        advance: Pixel delta (dx, dy) to move the pen after drawing
        pixel_offset: Pixel offset (x, y) applied before drawing; the
            vertical component moves the glyph up from the baseline
    """

    advance: tuple[int, int]
    pixel_offset: tuple[int, int] = (0, 0)


@dataclass(frozen=True)
class FontModel(Generic[ImageT]):
    """A bitmap font: atlas image plus layout metadata.

    Instances are immutable once built. The lookup tables are shared by
    reference between a model and anything derived from it with
    :meth:`map_image`, so they must not be mutated after construction.

    Attributes:
        name: Font name
        font_size: Nominal font size the atlas was rendered at
        image: Atlas bitmap (opaque to the model)
        line_height: Vertical pixel distance between baselines
        max_width: Upper bound on any single character's width (advisory)
        glyphs: Placement info keyed by character
        kerning_pairs: Signed adjustment keyed by ordered character pair
    """

    name: str
    font_size: int
    image: ImageT
    line_height: int
    max_width: int
    glyphs: Mapping[str, CharInfo] = field(default_factory=dict)
    kerning_pairs: KerningTable = field(default_factory=dict)

    @property
    def size(self) -> int:
        """Nominal font size (alias of ``font_size``)."""
        return self.font_size

    @property
    def characters(self) -> list[str]:
        """Characters present in the atlas, sorted by code point."""
        return sorted(self.glyphs)

    def __contains__(self, c: object) -> bool:
        return c in self.glyphs

    def kerning(self, a: str, b: str) -> tuple[int, int]:
        """Get the kerning adjustment for the ordered pair (a, b).

        Most pairs carry no special kerning, so absence is not an error.

        Args:
            a: First character of the pair
            b: Character following ``a``

        Returns:
            (dx, dy) adjustment, or (0, 0) if the pair has no entry
        """
        return self.kerning_pairs.get((a, b), NO_KERNING)

    def char_info(self, c: str) -> CharInfo | None:
        """Get placement info for a character.

        Args:
            c: Character to look up

        Returns:
            CharInfo, or None if the character is not in the atlas
        """
        return self.glyphs.get(c)

    def map_image(self, transform: Callable[[ImageT], NewImageT]) -> "FontModel[NewImageT]":
        """Build a new model whose image is ``transform(self.image)``.

        Every other field is carried over as-is; the lookup tables are the
        same objects, not copies.

        Args:
            transform: Function from the current image to the new one

        Returns:
            New FontModel with identical metadata and the transformed image
        """
        return FontModel(
            name=self.name,
            font_size=self.font_size,
            image=transform(self.image),
            line_height=self.line_height,
            max_width=self.max_width,
            glyphs=self.glyphs,
            kerning_pairs=self.kerning_pairs,
        )

    def with_image(self, image: NewImageT) -> "FontModel[NewImageT]":
        """Attach ``image`` in place of the current one."""
        return self.map_image(lambda _: image)

    def split_image(self) -> "tuple[FontModel[None], ImageT]":
        """Detach the image from the metadata.

        Returns:
            Tuple of (placeholder model with ``image=None``, extracted image)
        """
        return self.with_image(None), self.image

    def positions_for(self, text: str) -> "list[OutputPosition]":
        """Lay out ``text`` with this font.

        See :func:`glyphatlas.core.layout.positions_for`.
        """
        from glyphatlas.core.layout import positions_for

        return positions_for(self, text)
