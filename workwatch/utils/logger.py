"""Logging setup for WorkWatch."""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

ROOT_LOGGER = 'workwatch'
LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'


def setup_logger(
    name: str,
    level: Optional[Union[str, int]] = None,
    log_file: Optional[Path] = None
) -> logging.Logger:
    """Get a logger for a WorkWatch module.

    Module loggers carry no handlers of their own; records propagate to the
    ``workwatch`` package logger, which writes to stderr until a log file is
    given.

    Args:
        name: Logger name, usually ``__name__``
        level: Optional level for this logger
        log_file: If set, redirect all WorkWatch logging to this file

    Returns:
        Configured logger
    """
    root = logging.getLogger(ROOT_LOGGER)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        root.setLevel(logging.INFO)

    if log_file is not None:
        for handler in list(root.handlers):
            root.removeHandler(handler)
            handler.close()
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(file_handler)

    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level.upper() if isinstance(level, str) else level)
    return logger
