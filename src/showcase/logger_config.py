"""Logging setup for Showcase.

Modules log through loguru's global ``logger``, usually via :func:`get_logger`.
A run gets one console sink and, when ``log_file`` is set, one plain-text file
sink appended to on every run.
"""

import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional

from loguru import logger

if TYPE_CHECKING:
    from loguru import Logger

from .config import VALID_LEVELS, normalize_log_level, settings

__all__ = ["VALID_LEVELS", "get_logger", "setup_logger"]

_TIME = "{time:HH:mm:ss.SSS}"
_LOCATION = "{name}:{line}"


def _console_format(show_location: bool) -> str:
    where = f" | <cyan>{_LOCATION}</cyan>" if show_location else ""
    return f"<green>{_TIME}</green> | <level>{{level: <8}}</level>{where} - <level>{{message}}</level>"


def _file_format(show_location: bool) -> str:
    where = f" | {_LOCATION}" if show_location else ""
    return f"{{time:YYYY-MM-DD}} {_TIME} | {{level: <8}}{where} - {{message}}"


def setup_logger(
    log_level: Optional[str] = None,
    log_file: Optional[str] = None,
    show_location: bool = True,
    stream: Any = None,
) -> None:
    """
    Replace every loguru sink with the ones for a Showcase run.

    Args:
        log_level: Minimum level; defaults to ``settings.log_level``
        log_file: Optional path that also receives every record, without colours
        show_location: Prefix messages with the emitting module and line
        stream: Console stream; defaults to the current ``sys.stdout``

    Raises:
        ValueError: If an invalid log level is provided
    """
    level = normalize_log_level(log_level or settings.log_level)

    logger.remove()
    logger.add(
        stream if stream is not None else sys.stdout,
        format=_console_format(show_location),
        level=level,
        colorize=True,
    )

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(log_file, format=_file_format(show_location), level=level, encoding="utf-8")


def get_logger(name: str) -> "Logger":
    """Return the shared logger tagged with ``name`` (typically ``__name__``)."""
    return logger.bind(name=name)


setup_logger()
