# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Command-line interface for exifdir

Prints the byte order, the entry count and every decoded entry of the
Exif block found in a file.

Copyright 2025 DNAi inc.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from exifdir.config import ReaderConfig
from exifdir.exceptions import ExifDirError
from exifdir.exif_parser import ExifDirectory, ExifParser
from exifdir.log_helpers import setup_logger, shutdown_logger
from exifdir.value_formatter import format_entry_value


logger = logging.getLogger(__name__)


def format_output(result: ExifDirectory, format_type: str = "text") -> str:
    """
    Format a decoded Exif block.

    Args:
        result: Decoded Exif block
        format_type: Output format ('text' or 'json')

    Returns:
        Formatted output string
    """
    if format_type == "json":
        return json.dumps(result.to_dict(), indent=2, ensure_ascii=False)

    lines = [f"Byte order: {result.byte_order.describe()}"]
    for ifd in result.directories:
        lines.append(f"Number of entries in {ifd.name}: {len(ifd)}")
        for index, entry in enumerate(ifd.entries):
            lines.append(
                f"{ifd.name} entry {index}: {entry.tag.name} (0x{entry.tag.code:04X}) "
                f"{entry.field_type.name}[{entry.count}] = {format_entry_value(entry)}"
            )
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='exifdir',
        description='Decode the TIFF directory of the Exif block in an image file.',
    )
    parser.add_argument('file', help='Image file to read')
    parser.add_argument('--format', choices=('text', 'json'), default='text', help='Output format')
    parser.add_argument('--all-ifds', action='store_true',
                        help='Also decode the IFD chain and the Exif/GPS/Interoperability sub-IFDs')
    parser.add_argument('--max-directories', type=int, default=None,
                        help='Maximum number of IFDs to decode with --all-ifds')
    parser.add_argument('--log-file', help='Write a debug log to this file')
    parser.add_argument('-v', '--verbose', action='count', default=0,
                        help='Increase console log verbosity (-v info, -vv debug)')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    level = logging.WARNING - 10 * min(args.verbose, 2)
    root_logger = setup_logger(args.log_file, level=level)
    try:
        return _run(args)
    finally:
        shutdown_logger(root_logger)


def _run(args: argparse.Namespace) -> int:
    try:
        config = ReaderConfig.from_env()
        if args.all_ifds:
            config.follow_pointers = True
        if args.max_directories is not None:
            config.max_directories = max(1, args.max_directories)

        logger.info("Reading %s", args.file)
        result = ExifParser(file_path=args.file, config=config).read()
    except ExifDirError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(format_output(result, args.format))
    return 0


if __name__ == "__main__":
    sys.exit(main())
