"""Atlas image codec.

Thin adapter over Pillow turning raw image bytes into a decoded bitmap and
back. The font model treats the result as an opaque payload.
"""

from io import BytesIO

from PIL import Image, UnidentifiedImageError

from glyphatlas.config import ImageFormat
from glyphatlas.exceptions import ImageDecodeError, ImageEncodeError


def decode_image(data: bytes) -> Image.Image:
    """Decode atlas image bytes.

    The image is fully loaded so decode errors surface here.

    Args:
        data: Encoded image in any format Pillow can read

    Returns:
        Decoded Pillow image

    Raises:
        ImageDecodeError: If the bytes are empty or not a readable image
    """
    if not data:
        raise ImageDecodeError("no image data")

    try:
        image = Image.open(BytesIO(data))
        image.load()
    except UnidentifiedImageError as e:
        raise ImageDecodeError("unrecognized image format") from e
    except (OSError, EOFError, ValueError, SyntaxError, Image.DecompressionBombError) as e:
        raise ImageDecodeError(str(e)) from e

    return image


def _same_pixels(original: Image.Image, decoded: Image.Image) -> bool:
    """Compare two images pixel for pixel, tolerating palette or mode changes."""
    if original.size != decoded.size:
        return False
    if original.mode == decoded.mode and original.mode != "P":
        return original.tobytes() == decoded.tobytes()
    try:
        return original.convert("RGBA").tobytes() == decoded.convert("RGBA").tobytes()
    except ValueError:
        return False


def encode_image(image: Image.Image, format: ImageFormat | str) -> bytes:
    """Encode an atlas image.

    The encoded bytes are decoded again before returning. Glyph metrics
    address atlas pixels directly, so a format that resizes the image is
    always rejected, and a lossless format must reproduce every pixel.

    Args:
        image: Pillow image to encode
        format: Target container format

    Returns:
        Encoded image bytes

    Raises:
        ImageEncodeError: If the format is unsupported, cannot store the
            image's mode (e.g. RGBA as JPEG), or does not reproduce the
            image exactly when it is not lossy
    """
    try:
        image_format = ImageFormat.parse(format)
    except ValueError as e:
        raise ImageEncodeError(f"unsupported image format '{format}'") from e

    buffer = BytesIO()
    try:
        image.save(buffer, format=image_format.value)
    except (OSError, ValueError, KeyError) as e:
        raise ImageEncodeError(f"cannot write {image.mode} image as {image_format.value}: {e}") from e

    data = buffer.getvalue()

    try:
        decoded = decode_image(data)
    except ImageDecodeError as e:
        raise ImageEncodeError(f"{image_format.value} output is unreadable: {e.reason}") from e

    if decoded.size != image.size:
        raise ImageEncodeError(
            f"{image_format.value} stored a {image.size[0]}x{image.size[1]} image "
            f"as {decoded.size[0]}x{decoded.size[1]}"
        )
    if not image_format.is_lossy and not _same_pixels(image, decoded):
        raise ImageEncodeError(
            f"{image_format.value} cannot store {image.mode} pixels exactly"
        )

    return data
