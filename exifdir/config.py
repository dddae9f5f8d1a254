# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Reader configuration

Copyright 2025 DNAi inc.
"""

import os
from typing import Mapping, Optional

from exifdir.byte_search import EXIF_MARKER
from exifdir.exceptions import ConfigurationError


_TRUE_VALUES = {'1', 'true', 'yes', 'on'}


class ReaderConfig:
    """
    Configuration for decoding an Exif block.

    By default only IFD0 is decoded. Enabling ``follow_pointers`` also
    walks the IFD chain and the Exif/GPS/Interoperability sub-IFDs, up to
    ``max_directories`` directories.
    """

    def __init__(
        self,
        marker: bytes = EXIF_MARKER,
        follow_pointers: bool = False,
        max_directories: int = 16,
        max_entries: int = 1000,
    ):
        """
        Initialize the configuration.

        Args:
            marker: Signature that precedes the TIFF section
            follow_pointers: Walk IFD chains and pointer-tag sub-IFDs
            max_directories: Upper bound on decoded directories
            max_entries: Entry counts above this are logged as suspicious
        """
        if max_directories < 1:
            raise ValueError("max_directories must be at least 1")
        self.marker = marker
        self.follow_pointers = follow_pointers
        self.max_directories = max_directories
        self.max_entries = max_entries

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'ReaderConfig':
        """
        Build a configuration from EXIFDIR_* environment variables.

        Recognised variables: EXIFDIR_FOLLOW_POINTERS, EXIFDIR_MAX_DIRECTORIES
        and EXIFDIR_MAX_ENTRIES. Unset variables keep the defaults.

        Raises:
            ConfigurationError: If a numeric variable is not an integer
        """
        environ = os.environ if environ is None else environ
        config = cls()
        if 'EXIFDIR_FOLLOW_POINTERS' in environ:
            config.follow_pointers = environ['EXIFDIR_FOLLOW_POINTERS'].strip().lower() in _TRUE_VALUES
        if 'EXIFDIR_MAX_DIRECTORIES' in environ:
            config.max_directories = max(1, cls._int_from_env(environ, 'EXIFDIR_MAX_DIRECTORIES'))
        if 'EXIFDIR_MAX_ENTRIES' in environ:
            config.max_entries = cls._int_from_env(environ, 'EXIFDIR_MAX_ENTRIES')
        return config

    @staticmethod
    def _int_from_env(environ: Mapping[str, str], name: str) -> int:
        value = environ[name]
        try:
            return int(value)
        except ValueError:
            raise ConfigurationError(name, value) from None

    def __repr__(self) -> str:
        return (
            f"ReaderConfig(marker={self.marker!r}, follow_pointers={self.follow_pointers}, "
            f"max_directories={self.max_directories}, max_entries={self.max_entries})"
        )
