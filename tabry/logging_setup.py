"""Logging setup.

Stdout carries the completion candidates, so every handler writes to
stderr or to a file.
"""

import logging

from .ansi import BOLD, DIM, RED, RESET, YELLOW, sgr, should_colorize

__all__ = ["LEVEL_STYLES", "LogObjects", "ScreenFormatter", "get_logger", "init_logger"]

LEVEL_STYLES = {
    logging.WARNING: (YELLOW, DIM),
    logging.ERROR: (RED, DIM),
    logging.CRITICAL: (RED, BOLD),
}

SCREEN_FORMAT = "tabry: %(message)s"
DEBUG_SCREEN_FORMAT = "%(name)20s - %(message)s // %(filename)s:%(lineno)d"
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s :: %(message)s :: %(filename)s:%(lineno)d"


class LogObjects:
    """Handlers shared by every tabry logger, and the default verbosity."""

    handlers: list[logging.Handler] = []
    debug: bool = False


class ScreenFormatter(logging.Formatter):
    """Formatter coloring warnings and errors."""

    def __init__(self, fmt: str, use_colors: bool) -> None:
        super().__init__(fmt)
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        codes = LEVEL_STYLES.get(record.levelno)
        if self.use_colors and codes:
            return f"{sgr(*codes)}{text}{RESET}"
        return text


def init_logger(filename: str | None = None, debug: bool = False) -> None:
    """(Re)initialize the shared handlers.

    Args:
        filename: Also log to this file
        debug: Create loggers at DEBUG level by default
    """
    LogObjects.debug = debug
    LogObjects.handlers.clear()
    if filename:
        file_handler = logging.FileHandler(filename)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        LogObjects.handlers.append(file_handler)
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(ScreenFormatter(DEBUG_SCREEN_FORMAT if debug else SCREEN_FORMAT, should_colorize()))
    LogObjects.handlers.append(stream_handler)


def get_logger(name: str = "tabry", level: int | None = None) -> logging.Logger:
    """Return a named logger wired to the shared handlers.

    Args:
        name (str): logger's name
        level (int): logger's level (from `init_logger`'s debug if not set)
    """
    logger = logging.getLogger(name)
    if level is None:
        level = logging.DEBUG if LogObjects.debug else logging.WARNING
    logger.setLevel(level)
    logger.propagate = False
    for handler in list(logger.handlers):
        if handler not in LogObjects.handlers:
            logger.removeHandler(handler)
    for handler in LogObjects.handlers:
        if handler not in logger.handlers:
            logger.addHandler(handler)
    return logger
