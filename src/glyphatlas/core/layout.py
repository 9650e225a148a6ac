"""Text layout over a glyph atlas.

Converts a string into per-character draw positions in a single pass,
applying pixel offsets, advances and pairwise kerning. The pen starts one
line height below the origin and text grows downward.

Characters without a glyph in the atlas are skipped: nothing is emitted and
the pen does not move. They still count as the previous character for the
next kerning lookup.
"""

from typing import Any

from glyphatlas.domain import FontModel, OutputPosition

NEWLINE = "\n"


class LayoutEngine:
    """Lays out text with a font.

    Stateless: every call starts from a fresh pen, so one engine may be
    shared between threads.

    Example:
        engine = LayoutEngine()
        for glyph in engine.positions_for(font, "Hello"):
            draw(glyph.c, glyph.pos)
    """

    def positions_for(self, font: FontModel[Any], text: str) -> list[OutputPosition]:
        """Compute draw positions for every renderable character of ``text``.

        Args:
            font: Font providing metrics and kerning
            text: Text to lay out; ``\\n`` starts a new line

        Returns:
            Positioned glyphs in input order (newlines and characters
            missing from the atlas are not included)
        """
        out: list[OutputPosition] = []
        self._run(font, text, out)
        return out

    def bounds(self, font: FontModel[Any], text: str) -> tuple[int, int]:
        """Compute the extent of ``text`` laid out with ``font``.

        Args:
            font: Font providing metrics and kerning
            text: Text to measure

        Returns:
            (width, height): the rightmost edge reached by a drawn glyph
            (0 if none) and the final baseline of the pen
        """
        out: list[OutputPosition] = []
        _, y = self._run(font, text, out)
        width = max((p.pos[0] + p.size[0] for p in out), default=0)
        return max(width, 0), y

    @staticmethod
    def _run(
        font: FontModel[Any], text: str, out: list[OutputPosition]
    ) -> tuple[int, int]:
        """Scan ``text``, appending positions to ``out``; return the final pen."""
        line_height = font.line_height
        x = 0
        y = line_height
        previous: str | None = None

        for current in text:
            if current == NEWLINE:
                x = 0
                y += line_height
                previous = None
                continue

            if previous is not None:
                dx, dy = font.kerning(previous, current)
                x += dx
                y += dy

            info = font.char_info(current)
            if info is not None:
                ox, oy = info.pixel_offset
                out.append(OutputPosition(c=current, pos=(x + ox, y - oy), size=info.advance))
                dx, dy = info.advance
                x += dx
                y += dy

            previous = current

        return x, y


_default_engine = LayoutEngine()


def positions_for(font: FontModel[Any], text: str) -> list[OutputPosition]:
    """Lay out ``text`` with ``font`` using a shared :class:`LayoutEngine`."""
    return _default_engine.positions_for(font, text)


def text_bounds(font: FontModel[Any], text: str) -> tuple[int, int]:
    """Measure ``text`` laid out with ``font``; see :meth:`LayoutEngine.bounds`."""
    return _default_engine.bounds(font, text)
