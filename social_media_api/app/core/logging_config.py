"""
Logging setup for the Social Media API.

``setup_logging`` attaches a console handler and, when ``LOG_FILE`` is
set, a file handler to the application logger.  The line layout comes
from ``settings.log_format`` (``LOG_FORMAT`` in the environment) so a
deployment can switch to e.g. a bare ``%(message)s`` for a collector
that adds its own timestamps.  Configuration happens once per logger.
"""

import logging
from pathlib import Path
from typing import Optional

from .config import settings


DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: Optional[str] = None,
    logfile: Optional[str] = None,
    fmt: Optional[str] = None,
    logger_name: Optional[str] = None,
) -> logging.Logger:
    """Configure and return the application logger.

    Parameters
    ----------
    level : Optional[str]
        Logging level name, case insensitive.  Defaults to
        ``settings.log_level``; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Extra file to write log lines to.  Parent directories are
        created as needed.
    fmt : Optional[str]
        ``logging.Formatter`` format string.  Defaults to
        ``settings.log_format``.
    logger_name : Optional[str]
        Logger to configure; the root logger when omitted.
    """
    logger = logging.getLogger(logger_name)
    if logger.handlers:
        # Already configured (tests, repeated create_app calls).
        return logger

    level_name = (level or settings.log_level).upper()
    logger.setLevel(getattr(logging, level_name, logging.INFO))

    formatter = logging.Formatter(fmt=fmt or settings.log_format, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
