"""
Logging setup for the unicon command line.

Conversion output goes to stdout; log records go to stderr so they never
mix with a result another program may be parsing.
"""

import logging
import sys

from src.services.logging_utils import LOGGER_NAMESPACE

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
DATE_FORMAT = "%b-%d %H:%M:%S"


def init_logging(level: int = logging.WARNING) -> logging.Logger:
    """
    Initialize application logging.

    - Logs to stderr through a single handler on the 'unicon' logger.
    - Safe to call multiple times; later calls only update the level.

    Args:
        level: Logging level for the application logger

    Returns:
        The application logger
    """
    app_logger = logging.getLogger(LOGGER_NAMESPACE)
    app_logger.setLevel(level)

    if app_logger.handlers:
        return app_logger  # Already initialized

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    app_logger.addHandler(handler)
    return app_logger
