from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "textflowed"


def setup_logger(level: str = "WARNING") -> logging.Logger:
    level_name = level.upper()
    numeric_level = getattr(logging, level_name, logging.WARNING)
    console = Console(stderr=True, highlight=False)
    handler = RichHandler(console=console, show_time=False, show_path=False, rich_tracebacks=True)
    logger = logging.getLogger(LOGGER_NAME)
    # Replace any handler from an earlier call rather than stacking them.
    for old in list(logger.handlers):
        logger.removeHandler(old)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    logger.setLevel(numeric_level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    return logging.getLogger(name or LOGGER_NAME)
