# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Byte order handling

TIFF data declares its byte order once, in the first two bytes of the
header ("II" for Intel/little-endian, "MM" for Motorola/big-endian).
Every multi-byte integer that follows is decoded under that order.

Copyright 2025 DNAi inc.
"""

import struct
from enum import Enum

from exifdir.exceptions import InvalidByteOrderMarkerError


# struct format codes for the standard integer widths
_UNSIGNED_CODES = {1: 'B', 2: 'H', 4: 'I', 8: 'Q'}
_SIGNED_CODES = {1: 'b', 2: 'h', 4: 'i', 8: 'q'}

MAX_WIDTH = 8


class ByteOrder(Enum):
    """TIFF byte order. Values are the matching struct prefixes."""
    LITTLE_ENDIAN = '<'
    BIG_ENDIAN = '>'

    @classmethod
    def from_marker(cls, marker: bytes, offset: int = 0) -> 'ByteOrder':
        """
        Map a 2-byte TIFF byte order marker to a ByteOrder.

        Raises:
            InvalidByteOrderMarkerError: If the marker is not b'II' or b'MM'
        """
        marker = bytes(marker)
        if marker == b'II':
            return cls.LITTLE_ENDIAN
        if marker == b'MM':
            return cls.BIG_ENDIAN
        raise InvalidByteOrderMarkerError(marker, offset)

    @property
    def marker(self) -> bytes:
        return b'II' if self is ByteOrder.LITTLE_ENDIAN else b'MM'

    @property
    def byteorder(self) -> str:
        """Name accepted by int.from_bytes / int.to_bytes."""
        return 'little' if self is ByteOrder.LITTLE_ENDIAN else 'big'

    def describe(self) -> str:
        if self is ByteOrder.LITTLE_ENDIAN:
            return 'Little-endian (Intel, II)'
        return 'Big-endian (Motorola, MM)'


def _check_width(data: bytes) -> None:
    if not 0 < len(data) <= MAX_WIDTH:
        raise ValueError(f"Cannot decode {len(data)} bytes as an integer (1-{MAX_WIDTH} supported)")


def decode(data: bytes, order: ByteOrder) -> int:
    """
    Decode a byte slice as an unsigned integer.

    Little-endian: byte i from the start contributes ``byte << 8*i``.
    Big-endian: byte i counted from the end contributes ``byte << 8*i``.

    Args:
        data: 1 to 8 bytes
        order: Byte order to decode under

    Returns:
        Unsigned integer value
    """
    _check_width(data)
    code = _UNSIGNED_CODES.get(len(data))
    if code is not None:
        return struct.unpack(f'{order.value}{code}', data)[0]
    return int.from_bytes(data, order.byteorder, signed=False)


def decode_n(data: bytes, order: ByteOrder, n: int) -> int:
    """
    Decode only ``n`` bytes of ``data``.

    The first ``n`` bytes are used for little-endian data and the last
    ``n`` bytes for big-endian data, i.e. the ``n`` least significant
    bytes of the full slice.
    """
    if n <= 0:
        raise ValueError(f"n must be positive, got {n}")
    if order is ByteOrder.LITTLE_ENDIAN:
        return decode(data[:n], order)
    return decode(data[-n:], order)


def decode_signed(data: bytes, order: ByteOrder) -> int:
    """Decode a byte slice as a two's-complement signed integer."""
    _check_width(data)
    code = _SIGNED_CODES.get(len(data))
    if code is not None:
        return struct.unpack(f'{order.value}{code}', data)[0]
    return int.from_bytes(data, order.byteorder, signed=True)
