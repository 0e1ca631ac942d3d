"""Tests for word_explorer.logs."""

import io
import logging

from rich.console import Console
from rich.logging import RichHandler

from word_explorer.logs import LOGGER_NAME, configure_logging


def test_configure_logging_installs_one_handler() -> None:
    console = Console(file=io.StringIO(), width=120)
    logger = configure_logging("INFO", console=console)
    configure_logging("DEBUG", console=console)

    assert logger is logging.getLogger(LOGGER_NAME)
    assert logger.level == logging.DEBUG
    assert sum(isinstance(h, RichHandler) for h in logger.handlers) == 1


def test_module_loggers_reach_the_handler() -> None:
    logger = configure_logging("DEBUG")
    handler = next(h for h in logger.handlers if isinstance(h, RichHandler))
    buffer = io.StringIO()
    handler.console = Console(file=buffer, width=120)

    logging.getLogger("word_explorer.datamuse").debug("GET %s", "https://api.example.test/words")
    assert "GET https://api.example.test/words" in buffer.getvalue()
