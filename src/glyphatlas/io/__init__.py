"""Atlas I/O layer for glyphatlas.

This module handles reading and writing atlases: the image through Pillow,
the metadata as pydantic-validated JSON. It keeps the domain models free of
any codec details.

Key responsibilities:
- Decode/encode atlas images
- Decode/encode metadata documents
- Compose both into load/save over bytes, streams and files

Key functions:
- load_atlas / dump_atlas: In-memory bytes and text
- read_atlas / write_atlas: Streams
- open_atlas / save_atlas: File paths
"""

from glyphatlas.io.atlas import (
    dump_atlas,
    load_atlas,
    open_atlas,
    read_atlas,
    save_atlas,
    write_atlas,
)
from glyphatlas.io.image_codec import decode_image, encode_image
from glyphatlas.io.metadata import AtlasMetadata, decode_metadata, encode_metadata

__all__ = [
    "AtlasMetadata",
    "decode_image",
    "decode_metadata",
    "dump_atlas",
    "encode_image",
    "encode_metadata",
    "load_atlas",
    "open_atlas",
    "read_atlas",
    "save_atlas",
    "write_atlas",
]
