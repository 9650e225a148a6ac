"""Exception hierarchy for glyphatlas."""


class GlyphAtlasError(Exception):
    """Base exception for all glyphatlas errors."""

    pass


class AtlasDecodeError(GlyphAtlasError):
    """Errors turning stored atlas artifacts back into a font model."""

    pass


class ImageDecodeError(AtlasDecodeError):
    """Atlas image bytes could not be decoded."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Failed to decode atlas image: {reason}")


class MetadataDecodeError(AtlasDecodeError):
    """Atlas metadata text is malformed or violates the schema."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Failed to decode atlas metadata: {reason}")


class AtlasEncodeError(GlyphAtlasError):
    """Errors turning a font model into storable artifacts."""

    pass


class ImageEncodeError(AtlasEncodeError):
    """Atlas image could not be encoded in the requested format."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Failed to encode atlas image: {reason}")


class MetadataEncodeError(AtlasEncodeError):
    """Font model metadata could not be serialized."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Failed to encode atlas metadata: {reason}")


class AtlasIOError(GlyphAtlasError):
    """Reading or writing an atlas stream or file failed."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"I/O error on '{path}': {reason}")
