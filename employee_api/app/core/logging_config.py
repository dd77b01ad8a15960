"""
Logging configuration for the Employee API.

``setup_logging`` attaches handlers to the root logger the first time
it runs and sets the level of the ``employee_api`` package logger, so
the repository, service and HTTP modules (which all log through
``logging.getLogger(__name__)``) follow ``LOG_LEVEL`` even when another
tool such as uvicorn or pytest configured the root logger first.
"""

import logging
from pathlib import Path
from typing import Optional

from .config import normalize_log_level

PACKAGE_LOGGER = "employee_api"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> logging.Logger:
    """Configure logging and return the package logger.

    Parameters
    ----------
    level : str
        Logging level name; unknown names mean ``INFO``.
    logfile : Optional[str]
        Path of a file that receives the same records as the console.
    """
    numeric_level = getattr(logging, normalize_log_level(level))
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(numeric_level)

    root = logging.getLogger()
    if root.handlers:
        return package_logger

    root.setLevel(numeric_level)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
    return package_logger
