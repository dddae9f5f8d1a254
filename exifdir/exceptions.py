# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Exception classes for exifdir

This module defines the exceptions raised while decoding an Exif block.
Every structural problem in the input surfaces as a MetadataReadError
subclass carrying the byte offset and the expected/actual values.

Copyright 2025 DNAi inc.
"""

from typing import Any, Optional


class ExifDirError(Exception):
    """
    Base exception for all exifdir errors.

    All exifdir exceptions inherit from this class, allowing
    catch-all error handling for any decoding-related errors.
    """
    def __init__(self, message: str = ""):
        """
        Initialize the exception with an optional error message.

        Args:
            message: Descriptive error message explaining what went wrong
        """
        self.message = message
        super().__init__(message)


class MetadataReadError(ExifDirError):
    """
    Raised when metadata cannot be read from a file or buffer.

    This exception is raised when:
    - No file path or file data is provided
    - The file cannot be opened
    - The Exif/TIFF structure cannot be parsed
    """
    def __init__(
        self,
        message: str = "",
        offset: Optional[int] = None,
        expected: Any = None,
        actual: Any = None,
    ):
        self.offset = offset
        self.expected = expected
        self.actual = actual
        super().__init__(message)


class MarkerNotFoundError(MetadataReadError):
    """Raised when the Exif marker does not occur in the buffer."""
    def __init__(self, marker: bytes):
        self.marker = marker
        super().__init__(f"Exif marker {marker!r} not found", expected=marker)


class InvalidByteOrderMarkerError(MetadataReadError):
    """Raised when the TIFF byte order field is neither b'II' nor b'MM'."""
    def __init__(self, actual: bytes, offset: int = 0):
        super().__init__(
            f"Invalid byte order marker {actual!r} at offset {offset} (expected b'II' or b'MM')",
            offset=offset,
            expected=(b'II', b'MM'),
            actual=actual,
        )


class InvalidMagicNumberError(MetadataReadError):
    """Raised when the TIFF magic field does not decode to 42."""
    def __init__(self, actual: int, offset: int = 2, expected: int = 42):
        super().__init__(
            f"Invalid TIFF magic number {actual} at offset {offset} (expected {expected})",
            offset=offset,
            expected=expected,
            actual=actual,
        )


class TruncatedBufferError(MetadataReadError):
    """
    Raised when a read would run past the end of the buffer.

    ``expected`` is the number of bytes the read needs starting at
    ``offset`` and ``actual`` the number of bytes available there.
    """
    def __init__(self, what: str, offset: int, expected: int, actual: int):
        self.what = what
        super().__init__(
            f"Truncated buffer reading {what} at offset {offset}: "
            f"need {expected} bytes, {max(actual, 0)} available",
            offset=offset,
            expected=expected,
            actual=max(actual, 0),
        )


class InvalidIfdOffsetError(MetadataReadError):
    """Raised when the first IFD offset points inside the TIFF header."""
    def __init__(self, actual: int, offset: int = 4, minimum: int = 8):
        super().__init__(
            f"Invalid first IFD offset {actual} at offset {offset} (must be at least {minimum})",
            offset=offset,
            expected=minimum,
            actual=actual,
        )


class ConfigurationError(ExifDirError):
    """Raised when a configuration value cannot be parsed."""
    def __init__(self, name: str, value: str):
        self.name = name
        self.value = value
        super().__init__(f"Invalid value {value!r} for {name} (expected an integer)")
