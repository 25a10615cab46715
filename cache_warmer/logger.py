# cache_warmer/logger.py
"""Logging setup for CacheWarmer.

All modules log through the ``CacheWarmer`` logger. The CLI calls
:func:`init_logging` once with the level and optional log file from its
options; until then the logger writes INFO to stdout.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Union

DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOGGER_NAME: Final[str] = "CacheWarmer"

#: rotate the log file at 5 MiB, keep three old copies
_MAX_BYTES: Final[int] = 5 * 1024 * 1024
_BACKUPS: Final[int] = 3


def init_logging(
    level: Union[int, str] = "INFO",
    log_file: Union[str, Path, None] = None,
    log_format: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """Attach fresh stdout (and optional rotating file) handlers to the project logger.

    Handlers installed by an earlier call are closed first, so the CLI and
    tests can call this repeatedly without duplicating output.
    """
    lg = logging.getLogger(LOGGER_NAME)
    lg.setLevel(level)
    for handler in list(lg.handlers):
        lg.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(log_format)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file is not None:
        handlers.append(
            RotatingFileHandler(str(log_file), maxBytes=_MAX_BYTES, backupCount=_BACKUPS, encoding="utf-8")
        )
    for handler in handlers:
        handler.setFormatter(formatter)
        lg.addHandler(handler)

    # the console listing is printed separately; keep log lines off the root logger
    lg.propagate = False
    return lg


logger: logging.Logger = init_logging()

__all__ = ["logger", "init_logging", "LOGGER_NAME", "DEFAULT_FORMAT"]
