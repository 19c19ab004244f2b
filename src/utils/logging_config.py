"""
Logging Configuration

Root logger setup shared by command-line entry points.
"""

import logging
import sys
from typing import Union

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: Union[int, str] = logging.INFO) -> None:
    """
    Configure the root logger to write to stderr.

    Diagnostics go to stderr so they interleave with, but never mix into,
    result lines printed on stdout.

    Args:
        level: Logging level name (e.g. "DEBUG") or numeric level
    """
    if isinstance(level, str):
        level = level.upper()

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        stream=sys.stderr,
        force=True,
    )
