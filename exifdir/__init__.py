# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
exifdir - A Pure Python Exif/TIFF Directory Reader

Locates the Exif block in an image file and decodes its TIFF Image File
Directory entries directly from the binary structure, with no external
dependencies.

Copyright 2025 DNAi inc.
"""

__version__ = "0.1.0"
__author__ = "DNAi inc."

from exifdir.byte_search import EXIF_MARKER, find_bytes
from exifdir.config import ReaderConfig
from exifdir.endian import ByteOrder, decode, decode_n, decode_signed
from exifdir.exceptions import (
    ExifDirError,
    MetadataReadError,
    MarkerNotFoundError,
    InvalidByteOrderMarkerError,
    InvalidMagicNumberError,
    InvalidIfdOffsetError,
    TruncatedBufferError,
    ConfigurationError,
)
from exifdir.exif_parser import ExifDirectory, ExifParser, read_exif
from exifdir.exif_tags import (
    ExifTag,
    ExifType,
    UnrecognizedTag,
    UnrecognizedType,
    resolve_tag,
    resolve_type,
)
from exifdir.ifd import (
    IfdEntry,
    ImageFileDirectory,
    InlineValue,
    OffsetValue,
    decode_entry,
    read_ifd,
    walk_ifds,
)
from exifdir.tiff_header import TiffHeader, read_tiff_header

__all__ = [
    "EXIF_MARKER",
    "find_bytes",
    "ReaderConfig",
    "ByteOrder",
    "decode",
    "decode_n",
    "decode_signed",
    "ExifDirError",
    "MetadataReadError",
    "MarkerNotFoundError",
    "InvalidByteOrderMarkerError",
    "InvalidMagicNumberError",
    "InvalidIfdOffsetError",
    "TruncatedBufferError",
    "ConfigurationError",
    "ExifDirectory",
    "ExifParser",
    "read_exif",
    "ExifTag",
    "ExifType",
    "UnrecognizedTag",
    "UnrecognizedType",
    "resolve_tag",
    "resolve_type",
    "IfdEntry",
    "ImageFileDirectory",
    "InlineValue",
    "OffsetValue",
    "decode_entry",
    "read_ifd",
    "walk_ifds",
    "TiffHeader",
    "read_tiff_header",
]
