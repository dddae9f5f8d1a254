# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
EXIF tag and field type definitions

Closed sets of the tag and field type codes this library knows by name,
plus fallbacks that keep the raw 16-bit code for everything else.
Recognising a new code only requires adding a member to ExifTag or
ExifType.

Copyright 2025 DNAi inc.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Optional, Union


MAX_CODE = 0xFFFF


class ExifTag(IntEnum):
    """Known IFD0, Exif and GPS tags"""
    # ============================================================
    # IFD0 (Image) Tags
    # ============================================================
    SubfileType = 0x00FE
    ImageWidth = 0x0100
    ImageLength = 0x0101
    BitsPerSample = 0x0102
    Compression = 0x0103
    PhotometricInterpretation = 0x0106
    ImageDescription = 0x010E
    Make = 0x010F
    Model = 0x0110
    StripOffsets = 0x0111
    Orientation = 0x0112
    SamplesPerPixel = 0x0115
    RowsPerStrip = 0x0116
    StripByteCounts = 0x0117
    XResolution = 0x011A
    YResolution = 0x011B
    PlanarConfiguration = 0x011C
    ResolutionUnit = 0x0128
    Software = 0x0131
    DateTime = 0x0132
    Artist = 0x013B
    WhitePoint = 0x013E
    PrimaryChromaticities = 0x013F
    JPEGInterchangeFormat = 0x0201
    JPEGInterchangeFormatLength = 0x0202
    YCbCrCoefficients = 0x0211
    YCbCrPositioning = 0x0213
    ReferenceBlackWhite = 0x0214
    Copyright = 0x8298

    # ============================================================
    # Sub-IFD pointers
    # ============================================================
    ExifIFDPointer = 0x8769
    GPSInfo = 0x8825
    InteroperabilityIFD = 0xA005

    # ============================================================
    # Exif IFD Tags
    # ============================================================
    ExposureTime = 0x829A
    FNumber = 0x829D
    ExposureProgram = 0x8822
    ISOSpeedRatings = 0x8827
    ExifVersion = 0x9000
    DateTimeOriginal = 0x9003
    DateTimeDigitized = 0x9004
    ComponentsConfiguration = 0x9101
    ShutterSpeedValue = 0x9201
    ApertureValue = 0x9202
    ExposureBiasValue = 0x9204
    MeteringMode = 0x9207
    Flash = 0x9209
    FocalLength = 0x920A
    MakerNote = 0x927C
    UserComment = 0x9286
    FlashpixVersion = 0xA000
    ColorSpace = 0xA001
    PixelXDimension = 0xA002
    PixelYDimension = 0xA003
    ExposureMode = 0xA402
    WhiteBalance = 0xA403
    SceneCaptureType = 0xA406

    # ============================================================
    # GPS IFD Tags
    # ============================================================
    GPSVersionID = 0x0000
    GPSLatitudeRef = 0x0001
    GPSLatitude = 0x0002
    GPSLongitudeRef = 0x0003
    GPSLongitude = 0x0004
    GPSAltitudeRef = 0x0005
    GPSAltitude = 0x0006
    GPSTimeStamp = 0x0007

    @property
    def code(self) -> int:
        return int(self)


class ExifType(IntEnum):
    """TIFF field types (TIFF 6.0 plus the Exif IFD and BigTIFF additions)"""
    BYTE = 1
    ASCII = 2
    SHORT = 3
    LONG = 4
    RATIONAL = 5
    SBYTE = 6
    UNDEFINED = 7
    SSHORT = 8
    SLONG = 9
    SRATIONAL = 10
    FLOAT = 11
    DOUBLE = 12
    IFD = 13
    LONG8 = 16  # BigTIFF format code 16 (64-bit unsigned integer)
    SLONG8 = 17  # BigTIFF format code 17 (64-bit signed integer)
    IFD8 = 18  # BigTIFF format code 18 (64-bit IFD offset)

    @property
    def code(self) -> int:
        return int(self)

    @property
    def size(self) -> int:
        return TYPE_SIZES[self]


# Field type sizes in bytes
TYPE_SIZES: Dict[ExifType, int] = {
    ExifType.BYTE: 1,
    ExifType.ASCII: 1,
    ExifType.SHORT: 2,
    ExifType.LONG: 4,
    ExifType.RATIONAL: 8,
    ExifType.SBYTE: 1,
    ExifType.UNDEFINED: 1,
    ExifType.SSHORT: 2,
    ExifType.SLONG: 4,
    ExifType.SRATIONAL: 8,
    ExifType.FLOAT: 4,
    ExifType.DOUBLE: 8,
    ExifType.IFD: 4,
    ExifType.LONG8: 8,
    ExifType.SLONG8: 8,
    ExifType.IFD8: 8,
}


@dataclass(frozen=True)
class UnrecognizedTag:
    """A tag code with no ExifTag member. The raw code is kept."""
    code: int

    @property
    def name(self) -> str:
        return f"Unknown_{self.code:04X}"


@dataclass(frozen=True)
class UnrecognizedType:
    """A field type code with no ExifType member. The raw code is kept."""
    code: int

    @property
    def name(self) -> str:
        return f"Unknown_{self.code}"

    @property
    def size(self) -> Optional[int]:
        return None


Tag = Union[ExifTag, UnrecognizedTag]
EntryType = Union[ExifType, UnrecognizedType]

# Tags whose value is the offset of another IFD
POINTER_TAGS = frozenset({
    ExifTag.ExifIFDPointer,
    ExifTag.GPSInfo,
    ExifTag.InteroperabilityIFD,
})


def _check_code(code: int) -> None:
    if not 0 <= code <= MAX_CODE:
        raise ValueError(f"Code {code} is outside the 16-bit range")


def resolve_tag(code: int) -> Tag:
    """
    Resolve a raw 16-bit tag code.

    Args:
        code: Tag code read from an IFD entry

    Returns:
        The ExifTag member, or UnrecognizedTag(code) for unknown codes
    """
    _check_code(code)
    try:
        return ExifTag(code)
    except ValueError:
        return UnrecognizedTag(code)


def resolve_type(code: int) -> EntryType:
    """
    Resolve a raw 16-bit field type code.

    Args:
        code: Type code read from an IFD entry

    Returns:
        The ExifType member, or UnrecognizedType(code) for unknown codes
    """
    _check_code(code)
    try:
        return ExifType(code)
    except ValueError:
        return UnrecognizedType(code)
