"""Central logging configuration for the shout server."""

import sys
from typing import TextIO

from loguru import logger


def configure_logging(level: str = "info", sink: TextIO | None = None) -> None:
    """Replace loguru's default sink with one that honours ``level``."""
    logger.remove()
    logger.add(sink or sys.stderr, level=level.upper())
