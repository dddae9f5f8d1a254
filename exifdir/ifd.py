# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
IFD (Image File Directory) decoding

An IFD is a 2-byte entry count followed by that many 12-byte entries
and a 4-byte offset of the next IFD. Each entry is laid out as:

    bytes 0-1   tag code
    bytes 2-3   field type code
    bytes 4-7   count of values
    bytes 8-11  the value itself when it fits in 4 bytes, otherwise the
                offset of the value from the start of the TIFF section

All offsets handled here are relative to the start of the TIFF section.

Copyright 2025 DNAi inc.
"""

import logging
import struct
from collections import deque
from dataclasses import dataclass
from typing import Any, Deque, List, Optional, Tuple, Union

from exifdir.endian import ByteOrder, decode, decode_signed
from exifdir.exceptions import TruncatedBufferError
from exifdir.exif_tags import (
    POINTER_TAGS,
    EntryType,
    ExifTag,
    ExifType,
    Tag,
    resolve_tag,
    resolve_type,
)


logger = logging.getLogger(__name__)

ENTRY_SIZE = 12
ENTRY_COUNT_SIZE = 2
NEXT_IFD_SIZE = 4
INLINE_CAPACITY = 4


@dataclass(frozen=True)
class InlineValue:
    """Value stored directly in the entry, truncated to its encoded size"""
    data: bytes


@dataclass(frozen=True)
class OffsetValue:
    """Value stored elsewhere in the TIFF section. Not dereferenced."""
    offset: int


ValueField = Union[InlineValue, OffsetValue]


@dataclass(frozen=True)
class IfdEntry:
    """
    One decoded 12-byte directory entry.

    ``value_or_offset`` is the raw 4-byte value field decoded as a 32-bit
    integer under the directory's byte order, whatever the entry's type
    and count. Use ``value_field`` to tell an inline value from an offset.
    """
    tag: Tag
    field_type: EntryType
    count: int
    value_or_offset: int
    raw_value: bytes
    byte_order: ByteOrder
    offset: int = 0

    @property
    def byte_size(self) -> Optional[int]:
        """Total encoded size of the value, or None for unknown types."""
        if isinstance(self.field_type, ExifType):
            return self.field_type.size * self.count
        return None

    @property
    def value_field(self) -> ValueField:
        size = self.byte_size
        if size is None:
            # Unknown type: the size cannot be computed, keep the raw field
            return InlineValue(self.raw_value)
        if size <= INLINE_CAPACITY:
            # TIFF left-justifies inline values in both byte orders
            return InlineValue(self.raw_value[:size])
        return OffsetValue(self.value_or_offset)

    @property
    def is_inline(self) -> bool:
        return isinstance(self.value_field, InlineValue)

    def values(self) -> Any:
        """
        Decode an inline value.

        Returns:
            str for ASCII, bytes for UNDEFINED, a list of numbers for the
            numeric types, or None when the value is stored at an offset
            or the field type is unknown
        """
        field = self.value_field
        if not isinstance(field, InlineValue) or not isinstance(self.field_type, ExifType):
            return None
        return decode_inline(field.data, self.field_type, self.byte_order)


def decode_inline(data: bytes, field_type: ExifType, order: ByteOrder) -> Any:
    """Decode the packed values of an inline value field."""
    if field_type == ExifType.ASCII:
        null_pos = data.find(b'\x00')
        if null_pos >= 0:
            data = data[:null_pos]
        return data.decode('ascii', errors='replace')

    if field_type == ExifType.UNDEFINED:
        return bytes(data)

    size = field_type.size
    units = [data[i:i + size] for i in range(0, len(data), size)]

    if field_type in (ExifType.SBYTE, ExifType.SSHORT, ExifType.SLONG):
        return [decode_signed(unit, order) for unit in units]
    if field_type == ExifType.FLOAT:
        return [struct.unpack(f'{order.value}f', unit)[0] for unit in units]
    return [decode(unit, order) for unit in units]


def decode_entry(data: bytes, order: ByteOrder, offset: int = 0) -> IfdEntry:
    """
    Decode the 12-byte IFD entry starting at ``offset`` in ``data``.

    Args:
        data: Buffer holding the entry (usually the whole TIFF section)
        order: Byte order of the TIFF section
        offset: Start of the entry within ``data``

    Returns:
        The decoded IfdEntry

    Raises:
        TruncatedBufferError: If fewer than 12 bytes remain at ``offset``
    """
    if offset < 0 or offset + ENTRY_SIZE > len(data):
        raise TruncatedBufferError("IFD entry", offset, ENTRY_SIZE, len(data) - offset)

    tag_code = decode(data[offset:offset + 2], order)
    type_code = decode(data[offset + 2:offset + 4], order)
    count = decode(data[offset + 4:offset + 8], order)
    raw_value = bytes(data[offset + 8:offset + 12])

    return IfdEntry(
        tag=resolve_tag(tag_code),
        field_type=resolve_type(type_code),
        count=count,
        value_or_offset=decode(raw_value, order),
        raw_value=raw_value,
        byte_order=order,
        offset=offset,
    )


@dataclass(frozen=True)
class ImageFileDirectory:
    """A decoded IFD; entries keep their on-disk order."""
    offset: int
    entries: Tuple[IfdEntry, ...]
    next_ifd_offset: int
    name: str = 'IFD0'

    def __len__(self) -> int:
        return len(self.entries)

    def find(self, tag: Union[Tag, int]) -> Optional[IfdEntry]:
        """Return the first entry with the given tag (or raw code), if any."""
        code = tag if isinstance(tag, int) else tag.code
        for entry in self.entries:
            if entry.tag.code == code:
                return entry
        return None


def read_ifd(
    tiff: bytes,
    offset: int,
    order: ByteOrder,
    name: str = 'IFD0',
    max_entries: Optional[int] = None,
) -> ImageFileDirectory:
    """
    Decode the IFD starting at ``offset`` of the TIFF section.

    Args:
        tiff: TIFF section bytes
        offset: Offset of the IFD's entry count
        order: Byte order of the TIFF section
        name: Label for the directory (IFD0, ExifIFD, GPS, ...)
        max_entries: Entry counts above this are logged as suspicious

    Returns:
        ImageFileDirectory with the entries in on-disk order

    Raises:
        TruncatedBufferError: If the entry count or the entry table runs
            past the end of the buffer
    """
    if offset < 0 or offset + ENTRY_COUNT_SIZE > len(tiff):
        raise TruncatedBufferError(f"{name} entry count", offset, ENTRY_COUNT_SIZE, len(tiff) - offset)

    num_entries = decode(tiff[offset:offset + ENTRY_COUNT_SIZE], order)
    first_entry_offset = offset + ENTRY_COUNT_SIZE
    table_size = ENTRY_SIZE * num_entries

    if first_entry_offset + table_size > len(tiff):
        raise TruncatedBufferError(
            f"{name} entries ({num_entries})", first_entry_offset, table_size, len(tiff) - first_entry_offset
        )

    if max_entries is not None and num_entries > max_entries:
        logger.warning("%s at offset %d declares %d entries (more than %d)", name, offset, num_entries, max_entries)

    entries = tuple(
        decode_entry(tiff, order, first_entry_offset + ENTRY_SIZE * index)
        for index in range(num_entries)
    )

    # Read next IFD offset (at end of IFD entries)
    next_ifd_offset = 0
    next_field = first_entry_offset + table_size
    if next_field + NEXT_IFD_SIZE <= len(tiff):
        next_ifd_offset = decode(tiff[next_field:next_field + NEXT_IFD_SIZE], order)

    logger.debug("%s at offset %d: %d entries, next IFD at %d", name, offset, num_entries, next_ifd_offset)
    return ImageFileDirectory(offset=offset, entries=entries, next_ifd_offset=next_ifd_offset, name=name)


_POINTER_NAMES = {
    ExifTag.ExifIFDPointer: 'ExifIFD',
    ExifTag.GPSInfo: 'GPS',
    ExifTag.InteroperabilityIFD: 'InteropIFD',
}


def _pointer_offset(entry: IfdEntry) -> Optional[int]:
    if entry.count == 1 and entry.field_type in (ExifType.LONG, ExifType.IFD):
        return entry.value_or_offset
    logger.warning(
        "Ignoring %s pointer with type %s and count %d", entry.tag.name, entry.field_type.name, entry.count
    )
    return None


def walk_ifds(
    tiff: bytes,
    order: ByteOrder,
    first_offset: int,
    follow_pointers: bool = False,
    max_directories: int = 16,
    max_entries: Optional[int] = None,
) -> List[ImageFileDirectory]:
    """
    Decode IFDs from a queue of pending offsets.

    The queue starts with ``first_offset``. Without ``follow_pointers``
    only that directory is decoded. With it, the next-IFD chain (IFD0 ->
    IFD1 -> ...) and the sub-IFDs referenced by pointer tags (Exif, GPS,
    Interoperability) are queued as they are found. A zero next-IFD or
    pointer offset ends that branch and is never queued; ``first_offset``
    is always decoded. Offsets already decoded are skipped.

    Returns:
        Directories in the order they were decoded; the first is IFD0
    """
    pending: Deque[Tuple[int, str]] = deque([(first_offset, 'IFD0')])
    visited = set()
    directories: List[ImageFileDirectory] = []

    while pending:
        offset, name = pending.popleft()
        if offset in visited:
            logger.warning("%s at offset %d was already decoded, skipping loop", name, offset)
            continue
        if len(directories) >= max_directories:
            logger.warning("Directory limit (%d) reached, %d IFDs left unread", max_directories, len(pending) + 1)
            break

        visited.add(offset)
        ifd = read_ifd(tiff, offset, order, name=name, max_entries=max_entries)
        directories.append(ifd)

        if not follow_pointers:
            break

        for entry in ifd.entries:
            if entry.tag in POINTER_TAGS:
                pointer = _pointer_offset(entry)
                if pointer:
                    pending.append((pointer, _POINTER_NAMES[entry.tag]))

        if name.startswith('IFD') and ifd.next_ifd_offset:
            pending.append((ifd.next_ifd_offset, f"IFD{int(name[3:]) + 1}"))

    return directories
