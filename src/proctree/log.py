"""Loguru logging setup for proctree."""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from proctree.config import get_settings

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> <level>{level: <8}</level> "
    "<cyan>{name}</cyan> {message}"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} {level: <8} {name}:{line} {message}"


def setup_logger(
    log_level: Optional[str] = None,
    log_file: Optional[str] = None,
) -> list[int]:
    """
    Route proctree's log output to stderr and optionally a file.

    Arguments left as None fall back to PROCTREE_LOG_LEVEL and
    PROCTREE_LOG_FILE. Existing handlers are replaced.

    Returns:
        The loguru handler ids that were added.
    """
    settings = get_settings()
    level = (log_level or settings.LOG_LEVEL).upper()
    path = log_file or settings.LOG_FILE

    logger.remove()
    handlers = [logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level)]

    if path:
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            logger.add(path, format=FILE_FORMAT, level=level, rotation="10 MB", retention=3)
        )

    logger.debug(f"proctree logging at {level}" + (f" to {path}" if path else ""))
    return handlers
