# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Builders for synthetic Exif/TIFF buffers.

Every test controls the exact bytes it decodes; the builders only pack
header, IFD and entry structures with struct.
"""

import struct
from typing import List, Union

from exifdir.endian import ByteOrder


JPEG_PREFIX = b'\xff\xd8\xff\xe1\x00\x40'
EXIF_MARKER = b'Exif\x00\x00'


def pack_entry(order: ByteOrder, tag: int, type_code: int, count: int, value: Union[int, bytes]) -> bytes:
    """Pack one 12-byte IFD entry. Integer values fill the whole 4-byte field."""
    if isinstance(value, int):
        value_bytes = struct.pack(f'{order.value}I', value)
    else:
        value_bytes = value.ljust(4, b'\x00')
    return struct.pack(f'{order.value}HHI', tag, type_code, count) + value_bytes


def build_ifd(order: ByteOrder, entries: List[bytes], next_ifd: int = 0) -> bytes:
    """Entry count, entries and next-IFD pointer."""
    return (
        struct.pack(f'{order.value}H', len(entries))
        + b''.join(entries)
        + struct.pack(f'{order.value}I', next_ifd)
    )


def build_header(order: ByteOrder, first_ifd_offset: int = 8, magic: int = 42) -> bytes:
    return order.marker + struct.pack(f'{order.value}HI', magic, first_ifd_offset)


def build_tiff(order: ByteOrder, entries: List[bytes], next_ifd: int = 0) -> bytes:
    """TIFF section with a single IFD right after the header."""
    return build_header(order) + build_ifd(order, entries, next_ifd)


def wrap_exif(tiff: bytes, prefix: bytes = JPEG_PREFIX) -> bytes:
    """Embed a TIFF section in a file-like buffer behind the Exif marker."""
    return prefix + EXIF_MARKER + tiff
