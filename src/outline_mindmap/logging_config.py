"""Loguru setup shared by the CLI and scripts."""

import sys
from typing import TextIO

from loguru import logger


def configure_logging(*, verbose: bool = False, sink: TextIO | None = None) -> None:
    """Route loguru records to ``sink`` (stderr by default).

    Library modules only log at DEBUG, so they stay silent unless ``verbose``.
    """
    logger.remove()
    level = "DEBUG" if verbose else "INFO"
    logger.add(sink or sys.stderr, level=level, format="{level.icon} {message}")
