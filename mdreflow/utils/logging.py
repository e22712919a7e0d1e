from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


LOGGER_NAME = "mdreflow"


def setup_logger(level: str = "WARNING") -> logging.Logger:
    """Route the ``mdreflow`` logger tree to stderr through rich.

    stdout is reserved for reflowed documents.
    """
    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    console = Console(stderr=True, highlight=False)
    handler = RichHandler(console=console, show_time=False, show_path=False, rich_tracebacks=True)
    logging.basicConfig(level=numeric_level, format="%(message)s", handlers=[handler])
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(numeric_level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger for ``name`` (usually ``__name__``) under the ``mdreflow`` tree."""
    if not name or name == LOGGER_NAME:
        return logging.getLogger(LOGGER_NAME)
    if not name.startswith(LOGGER_NAME + "."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)
