# taskhook/utils.py - logging helpers
import logging
import sys
from typing import Optional, Union

PACKAGE_LOGGER = "taskhook"


def setup_logger(name: str = PACKAGE_LOGGER, level: Optional[Union[int, str]] = None) -> logging.Logger:
    """Return a logger under the ``taskhook`` package logger.

    The handler lives on the package logger only and writes to stderr:
    stdout belongs to the hook protocol (one JSON line plus an optional notice).
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if package_logger.level == logging.NOTSET:
        package_logger.setLevel(logging.WARNING)

    if not package_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)

    if level is not None:
        package_logger.setLevel(level)

    return logging.getLogger(name)
