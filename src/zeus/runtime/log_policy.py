from __future__ import annotations

import logging
import sys
from typing import Final, TextIO

from zeus.runtime.env_policy import LOG_LEVEL_ENV, env_text

_LOGGER_NAME: Final[str] = "zeus"
_FORMAT: Final[str] = "%(levelname)s %(name)s: %(message)s"
_LEVELS: Final[dict[str, int]] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def _env_level() -> int:
    return _LEVELS.get(env_text(LOG_LEVEL_ENV).upper(), logging.WARNING)


def init_logging(*, verbose: bool = False, stream: TextIO | None = None) -> logging.Logger:
    """Configure the ``zeus`` logger with exactly one stderr handler.

    Logs never go to stdout; the checkstyle report owns it. Calling this
    again rebinds the handler instead of stacking a second one.
    """
    level = logging.DEBUG if verbose else _env_level()
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False
    for handler in list(logger.handlers):
        if isinstance(handler, logging.StreamHandler):
            logger.removeHandler(handler)
    handler = logging.StreamHandler(stream=stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))
    handler.setLevel(level)
    logger.addHandler(handler)
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    if not name or name == _LOGGER_NAME:
        return logging.getLogger(_LOGGER_NAME)
    if name.startswith(f"{_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_LOGGER_NAME}.{name}")
