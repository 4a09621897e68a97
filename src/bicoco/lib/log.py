from typing import Any
import os
import logging

import rich.logging
from rich.console import Console

__all__ = 'debug', 'info', 'warning', 'error', 'logger', 'level_from_name'

color_log = os.environ.get("BICOCO_NO_COLOR_LOG", "") != "1"


def level_from_name(name: str) -> int | None:
    """
    Convert a log level name like "debug" to its logging level.

    :param name: Level name, case insensitive
    :return: The level, or None if the name is unknown
    """
    return logging.getLevelNamesMapping().get(name.strip().upper())


# Create logger
logger = logging.getLogger("bicoco")
# Remove existing handlers before adding new one
if logger.hasHandlers():
    logger.handlers.clear()

level_name = os.environ.get("BICOCO_LOG_LEVEL", "WARNING")
level = level_from_name(level_name)
logger.setLevel(logging.WARNING if level is None else level)
if color_log:
    handler = rich.logging.RichHandler(
        console=Console(stderr=True),
        show_time=True,
        show_level=True,
        omit_repeated_times=False,
        markup=False,
        show_path=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%Y-%m-%d %H:%M:%S]"))
else:
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(
        "%(asctime)s %(levelname)-7s %(message)s",
        datefmt="[%Y-%m-%d %H:%M:%S%z]")
    )
logger.addHandler(handler)

if level is None:
    logger.warning("Unknown BICOCO_LOG_LEVEL %r, using WARNING", level_name)


def debug(msg: str, *args: Any) -> None:
    """
    Log a debug message.

    :param msg: Message format string
    :param args: Arguments to format the message
    """
    logger.debug(msg, *args)


def info(msg: str, *args: Any) -> None:
    """
    Log an info message.

    :param msg: Message format string
    :param args: Arguments to format the message
    """
    logger.info(msg, *args)


def warning(msg: str, *args: Any) -> None:
    """
    Log a warning message.

    :param msg: Message format string
    :param args: Arguments to format the message
    """
    logger.warning(msg, *args)


def error(msg: str, *args: Any) -> None:
    """
    Log an error message.

    :param msg: Message format string
    :param args: Arguments to format the message
    """
    logger.error(msg, *args)
