# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Pytest configuration and shared fixtures for the exifdir test suite.
"""

import logging

import pytest

from exifdir.endian import ByteOrder
from tests.fixtures.tiff_factory import build_header, build_ifd, build_tiff, pack_entry, wrap_exif


@pytest.fixture
def orientation_tiff_le() -> bytes:
    """Little-endian TIFF section with one Orientation=3 SHORT entry."""
    order = ByteOrder.LITTLE_ENDIAN
    return build_tiff(order, [pack_entry(order, 274, 3, 1, 3)])


@pytest.fixture
def orientation_tiff_be() -> bytes:
    """Big-endian TIFF section with one Orientation=3 SHORT entry."""
    order = ByteOrder.BIG_ENDIAN
    return build_tiff(order, [pack_entry(order, 274, 3, 1, b'\x00\x03')])


@pytest.fixture
def exif_file(tmp_path, orientation_tiff_le):
    """JPEG-like file on disk carrying the little-endian Orientation block."""
    path = tmp_path / 'photo.jpg'
    path.write_bytes(wrap_exif(orientation_tiff_le) + b'\xff\xd9')
    return path


@pytest.fixture
def nested_tiff_le() -> bytes:
    """
    IFD0 (Orientation, ExifIFDPointer) -> next IFD1 (Compression),
    with an Exif sub-IFD (ColorSpace) between them.

    Layout: header 0-7, IFD0 8-37, ExifIFD 38-55, IFD1 56-73.
    """
    order = ByteOrder.LITTLE_ENDIAN
    ifd0 = build_ifd(order, [
        pack_entry(order, 0x0112, 3, 1, b'\x01\x00'),
        pack_entry(order, 0x8769, 4, 1, 38),
    ], next_ifd=56)
    exif_ifd = build_ifd(order, [pack_entry(order, 0xA001, 3, 1, b'\x01\x00')])
    ifd1 = build_ifd(order, [pack_entry(order, 0x0103, 3, 1, b'\x06\x00')])
    return build_header(order) + ifd0 + exif_ifd + ifd1


@pytest.fixture
def restore_root_logger():
    """Undo handler changes made by setup_logger."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
