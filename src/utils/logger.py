import logging
import os

from rich.logging import RichHandler

_FORMAT = "[%(name)s]  %(message)s"


def _level_from_env() -> int:
    name = os.getenv("LOG_LEVEL")
    if name:
        level = logging.getLevelName(name.upper())
        if isinstance(level, int):
            return level
    return logging.DEBUG if os.getenv("DEBUG") else logging.INFO


def get_logger(name=None) -> logging.Logger:
    """
    Returns a named logger writing through a single RichHandler.

    Level is INFO, DEBUG when the DEBUG env var is set, or whatever LOG_LEVEL names.
    """
    if name is None:
        name = "store"
    logger = logging.getLogger(name)
    log_level = _level_from_env()
    logger.setLevel(log_level)

    if not logger.handlers:
        console_handler = RichHandler(
            show_time=True,
            show_level=True,
            show_path=False,
            rich_tracebacks=True,
            log_time_format="[%X]",
        )
        console_handler.setFormatter(logging.Formatter(_FORMAT))
        console_handler.setLevel(log_level)
        logger.addHandler(console_handler)

        logger.propagate = False
        logger.debug(f"Logger for '{name}' initialized.")

    return logger
