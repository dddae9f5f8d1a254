# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Logging setup for the command-line interface.

Copyright 2025 DNAi inc.
"""

import logging
import os
import sys
from typing import Optional


def setup_logger(log_file: Optional[str] = None, level: int = logging.WARNING) -> logging.Logger:
    """
    Set up and configure the root logger.

    Console records go to stderr with the bare message so they do not mix
    with report output on stdout. The optional log file gets timestamps.

    Args:
        log_file: The full path to the log file
        level: The logging level

    Returns:
        The configured root logger instance
    """
    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG if log_file else level)

    shutdown_logger(logger)

    formatter = logging.Formatter('%(levelname)s: %(message)s')
    file_formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        file_handler = logging.FileHandler(log_file, mode='w')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

    return logger


def shutdown_logger(logger: Optional[logging.Logger] = None) -> None:
    """
    Remove and close every handler of ``logger`` (the root logger by default).

    Closing releases the log file opened by setup_logger.
    """
    if logger is None:
        logger = logging.getLogger()
    for handler in logger.handlers[:]:
        handler.flush()
        handler.close()
        logger.removeHandler(handler)
