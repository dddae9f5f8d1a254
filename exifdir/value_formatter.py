# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Value formatter for converting decoded IFD entries to human-readable strings.

Copyright 2025 DNAi inc.
"""

from typing import Any, Dict

from exifdir.exif_tags import ExifTag
from exifdir.ifd import IfdEntry, OffsetValue


ORIENTATION_NAMES: Dict[int, str] = {
    1: 'Horizontal (normal)',
    2: 'Mirror horizontal',
    3: 'Rotate 180',
    4: 'Mirror vertical',
    5: 'Mirror horizontal and rotate 270 CW',
    6: 'Rotate 90 CW',
    7: 'Mirror horizontal and rotate 90 CW',
    8: 'Rotate 270 CW',
}

RESOLUTION_UNIT_NAMES: Dict[int, str] = {
    1: 'None',
    2: 'inches',
    3: 'cm',
}

YCBCR_POSITIONING_NAMES: Dict[int, str] = {
    1: 'Centered',
    2: 'Co-sited',
}

_ENUMERATED_TAGS = {
    ExifTag.Orientation: ORIENTATION_NAMES,
    ExifTag.ResolutionUnit: RESOLUTION_UNIT_NAMES,
    ExifTag.YCbCrPositioning: YCBCR_POSITIONING_NAMES,
}


def entry_value(entry: IfdEntry) -> Any:
    """
    Plain value of an entry for structured (JSON) output.

    Single numbers are unwrapped, undefined bytes become hex and offset
    values become ``{"offset": N, "size": M}``.
    """
    field = entry.value_field
    if isinstance(field, OffsetValue):
        return {'offset': field.offset, 'size': entry.byte_size}

    value = entry.values()
    if value is None:
        return entry.raw_value.hex().upper()
    if isinstance(value, bytes):
        return value.hex().upper()
    if isinstance(value, list) and len(value) == 1:
        return value[0]
    return value


def format_entry_value(entry: IfdEntry) -> str:
    """
    Format an entry's value for display.

    Args:
        entry: Decoded IFD entry

    Returns:
        Formatted string value
    """
    field = entry.value_field
    if isinstance(field, OffsetValue):
        return f"<{entry.byte_size} bytes at offset 0x{field.offset:04X}>"

    value = entry_value(entry)

    names = _ENUMERATED_TAGS.get(entry.tag)
    if names is not None and isinstance(value, int):
        return names.get(value, str(value))

    if isinstance(value, list):
        return ' '.join(str(v) for v in value)
    return str(value)
