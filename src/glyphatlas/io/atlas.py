"""Loading and saving complete atlases.

An atlas is stored as two independently encoded artifacts: the image file
and a JSON metadata sidecar. The functions here compose the image and
metadata codecs with stream and file plumbing:

- load_atlas / dump_atlas: bytes and text in memory
- read_atlas / write_atlas: binary and text streams
- open_atlas / save_atlas: file paths
"""

from pathlib import Path
from typing import IO, Any

import structlog
from PIL import Image

from glyphatlas.config import ImageFormat, get_default_settings
from glyphatlas.domain import FontModel
from glyphatlas.exceptions import AtlasIOError, ImageEncodeError
from glyphatlas.io.image_codec import decode_image, encode_image
from glyphatlas.io.metadata import decode_metadata, encode_metadata

logger = structlog.get_logger(__name__)

AtlasFont = FontModel[Image.Image]


def _stream_name(stream: IO[Any]) -> str:
    return str(getattr(stream, "name", "<stream>"))


def load_atlas(image: bytes, metadata: str | bytes) -> AtlasFont:
    """Build a font from encoded image bytes and a metadata document.

    Args:
        image: Encoded atlas image
        metadata: JSON metadata document

    Returns:
        Font carrying the decoded image

    Raises:
        MetadataDecodeError: If the metadata is invalid
        ImageDecodeError: If the image cannot be decoded
    """
    placeholder = decode_metadata(metadata)
    bitmap = decode_image(image)
    logger.debug(
        "Atlas loaded",
        font=placeholder.name,
        glyphs=len(placeholder.glyphs),
        kerning_pairs=len(placeholder.kerning_pairs),
        image_size=bitmap.size,
    )
    return placeholder.with_image(bitmap)


def dump_atlas(
    font: AtlasFont,
    format: ImageFormat | str = ImageFormat.PNG,
    indent: int | None = 2,
) -> tuple[bytes, str]:
    """Encode a font into image bytes and a metadata document.

    Args:
        font: Font to encode
        format: Image container format
        indent: JSON indentation for the metadata

    Returns:
        Tuple of (image bytes, metadata text)

    Raises:
        ImageEncodeError: If the image cannot be encoded in ``format``
        MetadataEncodeError: If the metadata cannot be serialized
    """
    placeholder, bitmap = font.split_image()
    image_bytes = encode_image(bitmap, format)
    metadata = encode_metadata(placeholder, indent=indent)
    return image_bytes, metadata


def read_atlas(image: IO[bytes], metadata: IO[str] | IO[bytes]) -> AtlasFont:
    """Read a font from an image stream and a metadata stream.

    Args:
        image: Binary stream holding the encoded image
        metadata: Text (or UTF-8 binary) stream holding the metadata

    Returns:
        Font carrying the decoded image

    Raises:
        AtlasIOError: If either stream cannot be read
        MetadataDecodeError: If the metadata is invalid
        ImageDecodeError: If the image cannot be decoded
    """
    # Closed streams raise ValueError, as does undecodable text
    try:
        image_bytes = image.read()
    except (OSError, ValueError) as e:
        raise AtlasIOError(_stream_name(image), str(e)) from e

    try:
        metadata_text = metadata.read()
    except (OSError, ValueError) as e:
        raise AtlasIOError(_stream_name(metadata), str(e)) from e

    return load_atlas(image_bytes, metadata_text)


def write_atlas(
    font: AtlasFont,
    format: ImageFormat | str,
    image: IO[bytes],
    metadata: IO[str],
    indent: int | None = 2,
) -> None:
    """Write a font to an image stream and a metadata stream.

    Both artifacts are encoded before anything is written.

    Args:
        font: Font to write
        format: Image container format
        image: Binary stream receiving the image
        metadata: Text stream receiving the metadata
        indent: JSON indentation for the metadata

    Raises:
        ImageEncodeError: If the image cannot be encoded in ``format``
        MetadataEncodeError: If the metadata cannot be serialized
        AtlasIOError: If either stream cannot be written
    """
    image_bytes, metadata_text = dump_atlas(font, format, indent=indent)

    try:
        image.write(image_bytes)
    except (OSError, ValueError) as e:
        raise AtlasIOError(_stream_name(image), str(e)) from e

    try:
        metadata.write(metadata_text)
    except (OSError, ValueError) as e:
        raise AtlasIOError(_stream_name(metadata), str(e)) from e


def open_atlas(image_path: Path | str, metadata_path: Path | str | None = None) -> AtlasFont:
    """Load a font from an image file and its metadata file.

    Args:
        image_path: Path of the atlas image
        metadata_path: Path of the metadata document (default: the image
            path with a ``.json`` suffix)

    Returns:
        Font carrying the decoded image

    Raises:
        AtlasIOError: If either file cannot be opened or read
        MetadataDecodeError: If the metadata is invalid
        ImageDecodeError: If the image cannot be decoded
    """
    image_path = Path(image_path)
    if metadata_path is None:
        metadata_path = get_default_settings().atlas.metadata_path_for(image_path)
    metadata_path = Path(metadata_path)

    logger.debug("Opening atlas", image=str(image_path), metadata=str(metadata_path))

    try:
        image_file = image_path.open("rb")
    except OSError as e:
        raise AtlasIOError(str(image_path), e.strerror or str(e)) from e

    with image_file:
        try:
            metadata_file = metadata_path.open("r", encoding="utf-8")
        except OSError as e:
            raise AtlasIOError(str(metadata_path), e.strerror or str(e)) from e

        with metadata_file:
            return read_atlas(image_file, metadata_file)


def save_atlas(
    font: AtlasFont,
    image_path: Path | str,
    metadata_path: Path | str | None = None,
    format: ImageFormat | str | None = None,
    indent: int | None = 2,
) -> None:
    """Save a font as an image file plus a metadata file.

    Both artifacts are encoded before either file is opened, so an encode
    failure leaves the filesystem untouched. A write failure after that
    may leave a partially written file behind.

    Args:
        font: Font to save
        image_path: Destination of the atlas image
        metadata_path: Destination of the metadata (default: the image
            path with a ``.json`` suffix)
        format: Image format (default: inferred from ``image_path``,
            falling back to PNG)
        indent: JSON indentation for the metadata

    Raises:
        ImageEncodeError: If the image cannot be encoded in ``format``
        MetadataEncodeError: If the metadata cannot be serialized
        AtlasIOError: If either file cannot be written, or both paths
            name the same file
    """
    settings = get_default_settings().atlas
    image_path = Path(image_path)
    if metadata_path is None:
        metadata_path = settings.metadata_path_for(image_path)
    metadata_path = Path(metadata_path)

    if image_path.resolve() == metadata_path.resolve():
        raise AtlasIOError(str(image_path), "image and metadata would be written to the same file")

    if format is None:
        try:
            format = ImageFormat.from_path(image_path)
        except ValueError:
            format = settings.image_format

    try:
        image_format = ImageFormat.parse(format)
    except ValueError as e:
        raise ImageEncodeError(f"unsupported image format '{format}'") from e

    if image_format.is_lossy:
        logger.warning(
            "Lossy image format, atlas pixels may change",
            image=str(image_path),
            format=image_format.value,
        )

    image_bytes, metadata_text = dump_atlas(font, image_format, indent=indent)

    try:
        image_path.write_bytes(image_bytes)
    except OSError as e:
        raise AtlasIOError(str(image_path), e.strerror or str(e)) from e

    try:
        metadata_path.write_text(metadata_text, encoding="utf-8")
    except OSError as e:
        raise AtlasIOError(str(metadata_path), e.strerror or str(e)) from e

    logger.debug(
        "Atlas saved",
        font=font.name,
        image=str(image_path),
        metadata=str(metadata_path),
        format=image_format.value,
        image_bytes=len(image_bytes),
    )
