# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
TIFF header reader

The first 8 bytes of a TIFF section hold the byte order marker, the
magic number 42 and the offset of the first IFD (relative to the start
of the TIFF section).

Copyright 2025 DNAi inc.
"""

import logging
from dataclasses import dataclass

from exifdir.endian import ByteOrder, decode
from exifdir.exceptions import InvalidIfdOffsetError, InvalidMagicNumberError, TruncatedBufferError


logger = logging.getLogger(__name__)

TIFF_MAGIC = 42
TIFF_HEADER_SIZE = 8


@dataclass(frozen=True)
class TiffHeader:
    """Decoded TIFF header"""
    byte_order: ByteOrder
    magic: int
    first_ifd_offset: int


def read_tiff_header(tiff: bytes) -> TiffHeader:
    """
    Parse the TIFF header at the start of ``tiff``.

    Args:
        tiff: TIFF section, starting right after the Exif marker

    Returns:
        TiffHeader with the byte order and first IFD offset

    Raises:
        TruncatedBufferError: If fewer than 8 bytes are available
        InvalidByteOrderMarkerError: If bytes 0-1 are not b'II' or b'MM'
        InvalidMagicNumberError: If bytes 2-3 do not decode to 42
        InvalidIfdOffsetError: If the first IFD offset points inside the header
    """
    if len(tiff) < TIFF_HEADER_SIZE:
        raise TruncatedBufferError("TIFF header", 0, TIFF_HEADER_SIZE, len(tiff))

    # Determine byte order
    byte_order = ByteOrder.from_marker(tiff[0:2], offset=0)

    # Check magic number
    magic = decode(tiff[2:4], byte_order)
    if magic != TIFF_MAGIC:
        raise InvalidMagicNumberError(magic, offset=2, expected=TIFF_MAGIC)

    first_ifd_offset = decode(tiff[4:8], byte_order)
    if first_ifd_offset < TIFF_HEADER_SIZE:
        raise InvalidIfdOffsetError(first_ifd_offset, offset=4, minimum=TIFF_HEADER_SIZE)
    logger.debug("TIFF header: %s, first IFD at offset %d", byte_order.describe(), first_ifd_offset)

    return TiffHeader(byte_order=byte_order, magic=magic, first_ifd_offset=first_ifd_offset)
