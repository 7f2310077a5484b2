"""Logging setup for Smart Paste."""

import logging

from smartpaste.config import LOG_FILE, LOG_LEVEL

logger = logging.getLogger("smartpaste")


def setup_logging(level: str | None = None, console: bool = True) -> logging.Logger:
    """Set up logging for Smart Paste.

    The log file always gets a handler. `console` adds a stderr handler; the
    CLI leaves it off unless asked, since it prints results itself.

    Safe to call more than once; handlers are only attached the first time.
    """
    level = getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO)
    logger.setLevel(level)

    if logger.handlers:
        for handler in logger.handlers:
            handler.setLevel(level)
        return logger

    file_error = None
    try:
        file_handler = logging.FileHandler(LOG_FILE)
    except OSError as e:
        file_handler = None
        file_error = e
    if file_handler is not None:
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(
            "%(asctime)s - %(levelname)s - %(message)s",
            datefmt="%H:%M:%S"
        ))
        logger.addHandler(file_handler)

    if console:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%H:%M:%S"
        ))
        logger.addHandler(console_handler)

    if file_error is not None:
        logger.warning("Log file %s unavailable: %s", LOG_FILE, file_error)
    return logger
