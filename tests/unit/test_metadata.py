"""Unit tests for the metadata codec."""

import json

import pytest

from glyphatlas.domain import CharInfo, FontModel
from glyphatlas.exceptions import MetadataDecodeError, MetadataEncodeError
from glyphatlas.io.metadata import AtlasMetadata, decode_metadata, encode_metadata

SAMPLE_DOCUMENT = {
    "name": "Sans",
    "font_size": 16,
    "line_height": 20,
    "max_width": 12,
    "char_info": {
        "A": {"advance": [10, 0], "pixel_offset": [0, 0]},
        "g": {"advance": [8, 0], "pixel_offset": [1, 4]},
    },
    "kerning": [{"first": "A", "second": "g", "offset": [-1, 0]}],
}


def make_font() -> FontModel[None]:
    return FontModel(
        name="Sans",
        font_size=16,
        image=None,
        line_height=20,
        max_width=12,
        glyphs={
            "g": CharInfo(advance=(8, 0), pixel_offset=(1, 4)),
            "A": CharInfo(advance=(10, 0), pixel_offset=(0, 0)),
            "é": CharInfo(advance=(9, 0), pixel_offset=(0, 0)),
        },
        kerning_pairs={("A", "g"): (-1, 0), ("A", "A"): (0, -2)},
    )


class TestDecodeMetadata:
    """Tests for decode_metadata."""

    def test_decode_sample(self):
        """Test a well-formed document becomes a placeholder font."""
        font = decode_metadata(json.dumps(SAMPLE_DOCUMENT))

        assert font.image is None
        assert font.name == "Sans"
        assert font.font_size == 16
        assert font.line_height == 20
        assert font.max_width == 12
        assert font.char_info("g") == CharInfo(advance=(8, 0), pixel_offset=(1, 4))
        assert font.kerning("A", "g") == (-1, 0)
        assert font.kerning("g", "A") == (0, 0)

    def test_decode_bytes(self):
        """Test UTF-8 bytes are accepted."""
        font = decode_metadata(json.dumps(SAMPLE_DOCUMENT).encode("utf-8"))
        assert font.name == "Sans"

    def test_tables_default_to_empty(self):
        """Test char_info and kerning may be omitted."""
        document = {k: v for k, v in SAMPLE_DOCUMENT.items() if k not in ("char_info", "kerning")}
        font = decode_metadata(json.dumps(document))
        assert font.glyphs == {}
        assert font.kerning_pairs == {}

    def test_decoded_values_are_tuples(self):
        """Test JSON arrays become tuples in the model."""
        font = decode_metadata(json.dumps(SAMPLE_DOCUMENT))
        assert isinstance(font.glyphs["A"].advance, tuple)
        assert isinstance(font.kerning_pairs[("A", "g")], tuple)

    def test_invalid_json(self):
        """Test malformed JSON raises MetadataDecodeError."""
        with pytest.raises(MetadataDecodeError):
            decode_metadata("{not json")

    def test_empty_text(self):
        """Test an empty document raises MetadataDecodeError."""
        with pytest.raises(MetadataDecodeError):
            decode_metadata("")

    def test_missing_field(self):
        """Test a missing required field is reported by name."""
        document = dict(SAMPLE_DOCUMENT)
        del document["line_height"]
        with pytest.raises(MetadataDecodeError, match="line_height"):
            decode_metadata(json.dumps(document))

    def test_negative_advance(self):
        """Test advances must be unsigned."""
        document = json.loads(json.dumps(SAMPLE_DOCUMENT))
        document["char_info"]["A"]["advance"] = [-1, 0]
        with pytest.raises(MetadataDecodeError, match="advance"):
            decode_metadata(json.dumps(document))

    def test_negative_offset(self):
        """Test pixel offsets must be unsigned."""
        document = json.loads(json.dumps(SAMPLE_DOCUMENT))
        document["char_info"]["g"]["pixel_offset"] = [0, -4]
        with pytest.raises(MetadataDecodeError):
            decode_metadata(json.dumps(document))

    def test_u32_overflow(self):
        """Test metrics above the u32 range are rejected."""
        document = dict(SAMPLE_DOCUMENT, line_height=2**32)
        with pytest.raises(MetadataDecodeError):
            decode_metadata(json.dumps(document))

    def test_i32_kerning_range(self):
        """Test kerning offsets must fit in i32."""
        document = json.loads(json.dumps(SAMPLE_DOCUMENT))
        document["kerning"][0]["offset"] = [-(2**31) - 1, 0]
        with pytest.raises(MetadataDecodeError):
            decode_metadata(json.dumps(document))

    def test_multi_character_key(self):
        """Test char_info keys must be single characters."""
        document = json.loads(json.dumps(SAMPLE_DOCUMENT))
        document["char_info"]["AB"] = {"advance": [1, 0], "pixel_offset": [0, 0]}
        with pytest.raises(MetadataDecodeError):
            decode_metadata(json.dumps(document))

    def test_string_number_rejected(self):
        """Test numbers given as strings are not coerced."""
        document = dict(SAMPLE_DOCUMENT, font_size="16")
        with pytest.raises(MetadataDecodeError):
            decode_metadata(json.dumps(document))

    def test_wrong_tuple_length(self):
        """Test advances must have exactly two components."""
        document = json.loads(json.dumps(SAMPLE_DOCUMENT))
        document["char_info"]["A"]["advance"] = [10, 0, 0]
        with pytest.raises(MetadataDecodeError):
            decode_metadata(json.dumps(document))

    def test_duplicate_kerning_pair(self):
        """Test a pair may only be kerned once."""
        document = json.loads(json.dumps(SAMPLE_DOCUMENT))
        document["kerning"].append({"first": "A", "second": "g", "offset": [2, 0]})
        with pytest.raises(MetadataDecodeError, match="duplicate kerning pair"):
            decode_metadata(json.dumps(document))

    def test_unknown_field(self):
        """Test unexpected fields are rejected."""
        document = dict(SAMPLE_DOCUMENT, colour="red")
        with pytest.raises(MetadataDecodeError, match="colour"):
            decode_metadata(json.dumps(document))

    def test_error_chains_validation_error(self):
        """Test the pydantic error is kept as the cause."""
        with pytest.raises(MetadataDecodeError) as exc_info:
            decode_metadata("[]")
        assert exc_info.value.__cause__ is not None


class TestEncodeMetadata:
    """Tests for encode_metadata."""

    def test_round_trip(self):
        """Test decoding an encoded font gives the same font."""
        font = make_font()
        assert decode_metadata(encode_metadata(font)) == font

    def test_round_trip_compact(self):
        """Test compact output decodes identically."""
        font = make_font()
        text = encode_metadata(font, indent=None)
        assert "\n" not in text
        assert decode_metadata(text) == font

    def test_image_not_serialized(self):
        """Test the image slot never reaches the document."""
        font = make_font().with_image("secret-bitmap")
        document = json.loads(encode_metadata(font))
        assert "image" not in document
        assert "secret-bitmap" not in encode_metadata(font)

    def test_sorted_output(self):
        """Test characters and kerning pairs are written in sorted order."""
        document = json.loads(encode_metadata(make_font()))
        assert list(document["char_info"]) == ["A", "g", "é"]
        assert [(e["first"], e["second"]) for e in document["kerning"]] == [("A", "A"), ("A", "g")]

    def test_deterministic(self):
        """Test equal fonts encode to identical text."""
        assert encode_metadata(make_font()) == encode_metadata(make_font())

    def test_negative_advance_rejected(self):
        """Test metrics that cannot be stored raise MetadataEncodeError."""
        font = FontModel(
            name="Bad",
            font_size=8,
            image=None,
            line_height=10,
            max_width=4,
            glyphs={"A": CharInfo(advance=(-1, 0))},
        )
        with pytest.raises(MetadataEncodeError):
            encode_metadata(font)

    def test_multi_character_kerning_key(self):
        """Test kerning pairs must be made of single characters."""
        font = FontModel(
            name="Bad",
            font_size=8,
            image=None,
            line_height=10,
            max_width=4,
            kerning_pairs={("AB", "C"): (1, 0)},
        )
        with pytest.raises(MetadataEncodeError):
            encode_metadata(font)


class TestAtlasMetadata:
    """Tests for the schema model itself."""

    def test_from_font_matches_fields(self):
        """Test the schema mirrors the font's metadata."""
        document = AtlasMetadata.from_font(make_font())
        assert document.name == "Sans"
        assert document.char_info["g"].pixel_offset == (1, 4)
        assert len(document.kerning) == 2

    def test_to_font_has_placeholder_image(self):
        """Test the built font has no image."""
        assert AtlasMetadata.model_validate_json(json.dumps(SAMPLE_DOCUMENT)).to_font().image is None
