# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
EXIF metadata parser

This module locates the Exif block in a file's bytes and decodes its TIFF
directory structure. EXIF (Exchangeable Image File Format) stores metadata
as a small TIFF document introduced by the marker b'Exif\\x00\\x00'.

Copyright 2025 DNAi inc.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

from exifdir.byte_search import find_bytes
from exifdir.config import ReaderConfig
from exifdir.endian import ByteOrder
from exifdir.exceptions import MarkerNotFoundError, MetadataReadError
from exifdir.ifd import IfdEntry, ImageFileDirectory, walk_ifds
from exifdir.tiff_header import TiffHeader, read_tiff_header
from exifdir.value_formatter import entry_value


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExifDirectory:
    """Result of decoding one Exif block"""
    marker_offset: int
    tiff_offset: int
    header: TiffHeader
    directories: Tuple[ImageFileDirectory, ...]

    @property
    def byte_order(self) -> ByteOrder:
        return self.header.byte_order

    @property
    def ifd0(self) -> ImageFileDirectory:
        return self.directories[0]

    @property
    def entries(self) -> Tuple[IfdEntry, ...]:
        """Entries of the first IFD"""
        return self.ifd0.entries

    def to_dict(self) -> Dict[str, Any]:
        """
        Flatten the decoded directories into a JSON-friendly dictionary.

        Tags are keyed as ``<IFD name>:<tag name>``. When a directory repeats a
        tag, the last entry wins and a warning is logged.
        """
        metadata: Dict[str, Any] = {
            'File:ExifByteOrder': self.byte_order.describe(),
            'File:ExifOffset': self.marker_offset,
        }
        for ifd in self.directories:
            metadata[f'{ifd.name}:EntryCount'] = len(ifd)
            for entry in ifd.entries:
                key = f'{ifd.name}:{entry.tag.name}'
                if key in metadata:
                    logger.warning(
                        "Duplicate %s in %s at offset %d, keeping the last value", entry.tag.name, ifd.name, ifd.offset
                    )
                metadata[key] = entry_value(entry)
        return metadata


def read_exif(file_data: bytes, config: Optional[ReaderConfig] = None) -> ExifDirectory:
    """
    Decode the Exif block of an in-memory file.

    Args:
        file_data: Whole file contents
        config: Reader configuration (defaults to ReaderConfig())

    Returns:
        ExifDirectory with the header and decoded IFDs

    Raises:
        MarkerNotFoundError: If the Exif marker is absent
        MetadataReadError: For any other structural problem (see the
            subclasses in exifdir.exceptions)
    """
    config = config or ReaderConfig()

    marker_offset = find_bytes(file_data, config.marker)
    if marker_offset is None:
        raise MarkerNotFoundError(config.marker)

    tiff_offset = marker_offset + len(config.marker)
    tiff = memoryview(file_data)[tiff_offset:]
    logger.debug("Exif marker at offset %d, TIFF section is %d bytes", marker_offset, len(tiff))

    header = read_tiff_header(tiff)
    directories = walk_ifds(
        tiff,
        header.byte_order,
        header.first_ifd_offset,
        follow_pointers=config.follow_pointers,
        max_directories=config.max_directories,
        max_entries=config.max_entries,
    )

    return ExifDirectory(
        marker_offset=marker_offset,
        tiff_offset=tiff_offset,
        header=header,
        directories=tuple(directories),
    )


class ExifParser:
    """
    Parser for the Exif block of an image file.

    Either a file path or the raw file data is given. Reading the file is
    the only I/O; decoding works on the in-memory bytes.
    """

    def __init__(
        self,
        file_path: Optional[Union[str, Path]] = None,
        file_data: Optional[bytes] = None,
        config: Optional[ReaderConfig] = None,
    ):
        """
        Initialize the EXIF parser.

        Args:
            file_path: Path to the image file
            file_data: Raw file data (alternative to file_path)
            config: Reader configuration
        """
        self.file_path = file_path
        self.file_data = file_data
        self.config = config or ReaderConfig()

    def read(self) -> ExifDirectory:
        """
        Read and decode the Exif block.

        Returns:
            ExifDirectory with the header and decoded IFDs

        Raises:
            MetadataReadError: If the file cannot be read or parsed
        """
        if self.file_path:
            try:
                with open(self.file_path, 'rb') as f:
                    self.file_data = f.read()
            except OSError as e:
                raise MetadataReadError(f"Failed to read {self.file_path}: {e}") from e
        elif self.file_data is None:
            raise MetadataReadError("No file path or file data provided")

        logger.debug("Decoding %d bytes with %r", len(self.file_data), self.config)
        return read_exif(self.file_data, self.config)
