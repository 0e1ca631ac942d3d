"""Logging setup – routes the ``word_explorer`` loggers through rich."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "word_explorer"


def configure_logging(level: str | int = "WARNING", console: Console | None = None) -> logging.Logger:
    """Attach a single :class:`RichHandler` to the package logger.

    Safe to call more than once (Streamlit re-executes the page script on
    every interaction); later calls only update the level.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=console or Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
    return logger
