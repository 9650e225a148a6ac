"""Atlas metadata codec.

Serializes the non-image fields of a font model to JSON and back. The
document layout is::

    {
      "name": "Sans",
      "font_size": 16,
      "line_height": 20,
      "max_width": 12,
      "char_info": {"A": {"advance": [10, 0], "pixel_offset": [0, 2]}},
      "kerning": [{"first": "A", "second": "V", "offset": [-2, 0]}]
    }

Kerning is a list because JSON object keys cannot be character pairs.
Documents are validated with pydantic before a model is built from them.
"""

from typing import Annotated, Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StringConstraints,
    ValidationError,
    model_validator,
)

from glyphatlas.domain import CharInfo, FontModel
from glyphatlas.exceptions import MetadataDecodeError, MetadataEncodeError

U32_MAX = 2**32 - 1
I32_MIN = -(2**31)
I32_MAX = 2**31 - 1

U32 = Annotated[int, Field(ge=0, le=U32_MAX)]
I32 = Annotated[int, Field(ge=I32_MIN, le=I32_MAX)]
Char = Annotated[str, StringConstraints(min_length=1, max_length=1)]


class CharInfoModel(BaseModel):
    """Placement metrics of one character."""

    model_config = ConfigDict(extra="forbid", strict=True)

    advance: tuple[U32, U32]
    pixel_offset: tuple[U32, U32]


class KerningEntry(BaseModel):
    """Adjustment applied between ``first`` and the ``second`` that follows it."""

    model_config = ConfigDict(extra="forbid", strict=True)

    first: Char
    second: Char
    offset: tuple[I32, I32]


class AtlasMetadata(BaseModel):
    """Metadata document for one atlas."""

    model_config = ConfigDict(extra="forbid", strict=True)

    name: str
    font_size: U32
    line_height: U32
    max_width: U32
    char_info: dict[Char, CharInfoModel] = Field(default_factory=dict)
    kerning: list[KerningEntry] = Field(default_factory=list)

    @model_validator(mode="after")
    def _unique_kerning_pairs(self) -> "AtlasMetadata":
        seen: set[tuple[str, str]] = set()
        for entry in self.kerning:
            pair = (entry.first, entry.second)
            if pair in seen:
                raise ValueError(f"duplicate kerning pair {entry.first!r}{entry.second!r}")
            seen.add(pair)
        return self

    def to_font(self) -> FontModel[None]:
        """Build a font model with a ``None`` image placeholder."""
        return FontModel(
            name=self.name,
            font_size=self.font_size,
            image=None,
            line_height=self.line_height,
            max_width=self.max_width,
            glyphs={
                c: CharInfo(advance=info.advance, pixel_offset=info.pixel_offset)
                for c, info in self.char_info.items()
            },
            kerning_pairs={(e.first, e.second): e.offset for e in self.kerning},
        )

    @classmethod
    def from_font(cls, font: FontModel[Any]) -> "AtlasMetadata":
        """Describe a font model's metadata, ignoring its image.

        Characters and kerning pairs are sorted so equal fonts always
        produce identical documents.

        Raises:
            ValidationError: If a field is out of range or a key is not a
                single character
        """
        return cls.model_validate(
            {
                "name": font.name,
                "font_size": font.font_size,
                "line_height": font.line_height,
                "max_width": font.max_width,
                "char_info": {
                    c: {
                        "advance": tuple(font.glyphs[c].advance),
                        "pixel_offset": tuple(font.glyphs[c].pixel_offset),
                    }
                    for c in sorted(font.glyphs)
                },
                "kerning": [
                    {"first": a, "second": b, "offset": tuple(font.kerning_pairs[(a, b)])}
                    for a, b in sorted(font.kerning_pairs)
                ],
            }
        )


def _describe(error: ValidationError) -> str:
    """Condense pydantic errors into a single line."""
    parts = []
    for detail in error.errors():
        loc = ".".join(str(part) for part in detail["loc"])
        parts.append(f"{loc}: {detail['msg']}" if loc else detail["msg"])
    return "; ".join(parts)


def decode_metadata(text: str | bytes) -> FontModel[None]:
    """Parse a metadata document.

    Args:
        text: JSON metadata document

    Returns:
        FontModel whose image is the ``None`` placeholder; attach a decoded
        image with :meth:`FontModel.with_image`

    Raises:
        MetadataDecodeError: If the text is not valid JSON or does not
            match the schema
    """
    try:
        document = AtlasMetadata.model_validate_json(text)
    except ValidationError as e:
        raise MetadataDecodeError(_describe(e)) from e

    return document.to_font()


def encode_metadata(font: FontModel[Any], indent: int | None = 2) -> str:
    """Serialize a font model's metadata.

    The image slot is never written; strip it with
    :meth:`FontModel.split_image` first if the caller needs it separately.

    Args:
        font: Font to describe
        indent: JSON indentation, or None for a compact document

    Returns:
        JSON metadata document

    Raises:
        MetadataEncodeError: If a metric is negative or out of range, or a
            table key is not a single character
    """
    try:
        document = AtlasMetadata.from_font(font)
    except ValidationError as e:
        raise MetadataEncodeError(_describe(e)) from e
    except (TypeError, ValueError) as e:
        raise MetadataEncodeError(str(e)) from e

    return document.model_dump_json(indent=indent)
