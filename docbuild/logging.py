"""Logger hierarchy for the docbuild stage and its command line."""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_NAME = "docbuild"

_CONSOLE_FORMAT = "[docbuild] %(levelname)s %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``docbuild.<name>``, or the package logger when ``name`` is empty."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def _handler(handler: logging.Handler, level: int, fmt: str) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Send docbuild records to stderr and, when given, to ``log_file``.

    The file sink always records DEBUG so phase details such as skipped
    description files survive a quiet console run.
    """
    console_level = logging.DEBUG if verbose else logging.INFO
    logger = get_logger()
    logger.propagate = False

    # Reconfiguring replaces handlers from an earlier call in the same process.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(_handler(logging.StreamHandler(), console_level, _CONSOLE_FORMAT))
    if log_file is None:
        logger.setLevel(console_level)
        return logger

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.addHandler(
        _handler(logging.FileHandler(log_file, encoding="utf-8"), logging.DEBUG, _FILE_FORMAT)
    )
    logger.setLevel(logging.DEBUG)
    return logger


__all__ = ["configure_logging", "get_logger"]
