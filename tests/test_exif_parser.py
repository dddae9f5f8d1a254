# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""Tests for locating and decoding a whole Exif block."""

import logging

import pytest

from exifdir.config import ReaderConfig
from exifdir.endian import ByteOrder
from exifdir.exceptions import (
    ExifDirError,
    InvalidByteOrderMarkerError,
    InvalidIfdOffsetError,
    MarkerNotFoundError,
    MetadataReadError,
    TruncatedBufferError,
)
from exifdir.exif_parser import ExifParser, read_exif
from exifdir.exif_tags import ExifTag, ExifType
from tests.fixtures.tiff_factory import EXIF_MARKER, JPEG_PREFIX, build_header, build_ifd, build_tiff, pack_entry, wrap_exif


LE = ByteOrder.LITTLE_ENDIAN


class TestReadExif:

    def test_decodes_orientation_block(self, orientation_tiff_le):
        result = read_exif(wrap_exif(orientation_tiff_le))
        assert result.marker_offset == len(JPEG_PREFIX)
        assert result.tiff_offset == len(JPEG_PREFIX) + len(EXIF_MARKER)
        assert result.byte_order is ByteOrder.LITTLE_ENDIAN
        assert result.header.first_ifd_offset == 8
        assert len(result.entries) == 1

        entry = result.entries[0]
        assert entry.tag is ExifTag.Orientation
        assert entry.field_type is ExifType.SHORT
        assert entry.count == 1
        assert entry.value_or_offset == 3

    def test_big_endian_block(self, orientation_tiff_be):
        result = read_exif(wrap_exif(orientation_tiff_be))
        assert result.byte_order is ByteOrder.BIG_ENDIAN
        assert result.entries[0].values() == [3]

    def test_missing_marker(self):
        with pytest.raises(MarkerNotFoundError) as excinfo:
            read_exif(b'\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01')
        assert excinfo.value.marker == EXIF_MARKER
        assert isinstance(excinfo.value, MetadataReadError)

    def test_empty_buffer(self):
        with pytest.raises(MarkerNotFoundError):
            read_exif(b'')

    def test_bad_byte_order(self):
        with pytest.raises(InvalidByteOrderMarkerError) as excinfo:
            read_exif(wrap_exif(b'XX\x2a\x00\x08\x00\x00\x00'))
        assert excinfo.value.actual == b'XX'

    @pytest.mark.parametrize('first_ifd_offset', [0, 4, 7])
    def test_first_ifd_offset_inside_header(self, first_ifd_offset):
        tiff = build_header(LE, first_ifd_offset=first_ifd_offset) + build_ifd(LE, [pack_entry(LE, 274, 3, 1, 3)])
        with pytest.raises(InvalidIfdOffsetError) as excinfo:
            read_exif(wrap_exif(tiff))
        assert excinfo.value.offset == 4
        assert excinfo.value.actual == first_ifd_offset
        assert isinstance(excinfo.value, MetadataReadError)

    def test_marker_at_end_of_buffer(self):
        with pytest.raises(TruncatedBufferError):
            read_exif(wrap_exif(b''))

    def test_follow_pointers(self, nested_tiff_le):
        result = read_exif(wrap_exif(nested_tiff_le), ReaderConfig(follow_pointers=True))
        assert [ifd.name for ifd in result.directories] == ['IFD0', 'ExifIFD', 'IFD1']
        assert result.ifd0.find(ExifTag.ExifIFDPointer).value_or_offset == 38

    def test_custom_marker(self, orientation_tiff_le):
        data = b'\x00\x00TIFF' + orientation_tiff_le
        result = read_exif(data, ReaderConfig(marker=b'TIFF'))
        assert result.tiff_offset == 6
        assert result.entries[0].tag is ExifTag.Orientation

    def test_to_dict(self, nested_tiff_le):
        metadata = read_exif(wrap_exif(nested_tiff_le), ReaderConfig(follow_pointers=True)).to_dict()
        assert metadata['File:ExifByteOrder'] == 'Little-endian (Intel, II)'
        assert metadata['IFD0:EntryCount'] == 2
        assert metadata['IFD0:Orientation'] == 1
        assert metadata['IFD0:ExifIFDPointer'] == 38
        assert metadata['ExifIFD:ColorSpace'] == 1
        assert metadata['IFD1:Compression'] == 6

    def test_to_dict_duplicate_tag(self, caplog):
        tiff = build_tiff(LE, [pack_entry(LE, 274, 3, 1, 1), pack_entry(LE, 274, 3, 1, 6)])
        result = read_exif(wrap_exif(tiff))
        with caplog.at_level(logging.WARNING, logger='exifdir.exif_parser'):
            metadata = result.to_dict()
        assert metadata['IFD0:Orientation'] == 6
        assert metadata['IFD0:EntryCount'] == 2
        assert 'Duplicate Orientation in IFD0 at offset 8' in caplog.text


class TestExifParser:

    def test_reads_file(self, exif_file):
        result = ExifParser(file_path=exif_file).read()
        assert result.entries[0].tag is ExifTag.Orientation

    def test_reads_data(self, orientation_tiff_le):
        parser = ExifParser(file_data=wrap_exif(orientation_tiff_le))
        assert parser.read().entries[0].value_or_offset == 3

    def test_missing_file(self, tmp_path):
        with pytest.raises(MetadataReadError, match='Failed to read'):
            ExifParser(file_path=tmp_path / 'missing.jpg').read()

    def test_no_input(self):
        with pytest.raises(MetadataReadError, match='No file path or file data provided'):
            ExifParser().read()

    def test_empty_data_is_searched(self):
        with pytest.raises(MarkerNotFoundError):
            ExifParser(file_data=b'').read()

    def test_errors_share_base_class(self, tmp_path):
        path = tmp_path / 'plain.bin'
        path.write_bytes(b'no exif here')
        with pytest.raises(ExifDirError):
            ExifParser(file_path=str(path)).read()
