"""Logging setup: Rich console handler on stderr, optional rotating file."""

from __future__ import annotations

import logging
from logging import Formatter
from logging.handlers import RotatingFileHandler

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "popup_core"
LOGFORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOGFORMAT_RICH = "%(message)s"


def setup_logging(level: str = "WARNING", log_file: str | None = None, console: bool = True) -> logging.Logger:
    log = logging.getLogger(LOGGER_NAME)
    log.setLevel(level.upper())

    if log.hasHandlers():
        log.handlers.clear()

    if console:
        rich_handler = RichHandler(console=Console(stderr=True), show_path=False)
        rich_handler.setFormatter(Formatter(LOGFORMAT_RICH))
        log.addHandler(rich_handler)

    if log_file:
        file_handler = RotatingFileHandler(log_file, maxBytes=1024 * 1024, backupCount=3, encoding="utf-8")
        file_handler.setFormatter(Formatter(LOGFORMAT))
        log.addHandler(file_handler)

    if not log.handlers:
        log.addHandler(logging.NullHandler())

    log.propagate = False
    return log
