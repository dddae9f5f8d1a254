# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Byte sequence search

Locates fixed signatures (such as the Exif marker) inside raw file data.

Copyright 2025 DNAi inc.
"""

from typing import Optional


EXIF_MARKER = b'Exif\x00\x00'


def find_bytes(haystack: bytes, needle: bytes, start: int = 0) -> Optional[int]:
    """
    Find the first occurrence of ``needle`` in ``haystack``.

    The scan keeps a running match length. On a mismatch it resumes at the
    position right after the start of the failed candidate, so occurrences
    that overlap a partial match (e.g. b'aab' in b'aaab') are still found.

    Args:
        haystack: Buffer to search
        needle: Byte sequence to look for
        start: Offset at which the scan begins

    Returns:
        Offset of the first match, or None if there is none
    """
    if not needle:
        return start if start <= len(haystack) else None

    last_candidate = len(haystack) - len(needle)
    candidate = max(start, 0)
    matched = 0

    while candidate <= last_candidate:
        if haystack[candidate + matched] == needle[matched]:
            matched += 1
            if matched == len(needle):
                return candidate
        else:
            candidate += 1
            matched = 0

    return None
