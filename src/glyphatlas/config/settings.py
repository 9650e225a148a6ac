"""Configuration settings for glyphatlas."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class ImageFormat(str, Enum):
    """Image container formats supported for atlas bitmaps.

    Values are the format names Pillow understands.
    """

    PNG = "PNG"
    BMP = "BMP"
    GIF = "GIF"
    TIFF = "TIFF"
    WEBP = "WEBP"
    JPEG = "JPEG"
    PPM = "PPM"
    TGA = "TGA"

    @classmethod
    def parse(cls, value: "ImageFormat | str") -> "ImageFormat":
        """Parse a format name case-insensitively (``jpg`` is accepted).

        Raises:
            ValueError: If the name is not a supported format
        """
        if isinstance(value, ImageFormat):
            return value
        name = value.strip().upper().lstrip(".")
        name = _FORMAT_ALIASES.get(name, name)
        return cls(name)

    @classmethod
    def from_path(cls, path: Path | str) -> "ImageFormat":
        """Guess the format from a file extension.

        Raises:
            ValueError: If the extension is missing or unsupported
        """
        suffix = Path(path).suffix
        if not suffix:
            raise ValueError(f"Cannot infer image format from '{path}'")
        return cls.parse(suffix)

    @property
    def is_lossy(self) -> bool:
        """Whether a save/load round trip may change pixel values.

        GIF is included: it quantizes to a 256-colour palette with 1-bit
        transparency.
        """
        return self in (ImageFormat.JPEG, ImageFormat.WEBP, ImageFormat.GIF)


_FORMAT_ALIASES = {
    "JPG": "JPEG",
    "TIF": "TIFF",
    "PBM": "PPM",
    "PGM": "PPM",
}


class AtlasConfig(BaseModel):
    """Configuration for atlas storage."""

    image_format: ImageFormat = Field(
        default=ImageFormat.PNG,
        description="Default image format when saving atlases",
    )
    metadata_indent: int | None = Field(
        default=2,
        ge=0,
        le=8,
        description="JSON indentation for metadata (None = compact)",
    )
    metadata_suffix: str = Field(
        default=".json",
        description="Extension of the metadata sidecar next to the image",
    )

    def metadata_path_for(self, image_path: Path) -> Path:
        """Derive the metadata sidecar path for an atlas image.

        Converts: sans16.png -> sans16.json

        Args:
            image_path: Path of the atlas image

        Returns:
            Path of the metadata file beside it
        """
        return image_path.with_suffix(self.metadata_suffix)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file (None = no file logging)",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class GlyphAtlasSettings(BaseModel):
    """Main application settings."""

    atlas: AtlasConfig = Field(default_factory=AtlasConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> GlyphAtlasSettings:
    """Get default application settings."""
    return GlyphAtlasSettings()
