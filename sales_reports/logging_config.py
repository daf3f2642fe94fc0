"""Console logging configuration for the ``sales_reports`` package.

All ``sales_reports.*`` loggers propagate to one package logger configured
here, so API handlers, the seed loader and the CLI share a single format.
"""

import logging
import sys

from sales_reports.config import LOG_LEVEL

_CONSOLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = LOG_LEVEL) -> logging.Logger:
    """Initialise the root ``sales_reports`` logger.

    Returns:
        The configured package logger.
    """
    root_logger = logging.getLogger("sales_reports")
    root_logger.setLevel(level)

    # Prevent duplicate handlers on repeated calls (e.g. tests, app reloads)
    if root_logger.handlers:
        return root_logger

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT, datefmt=_DATE_FORMAT))
    root_logger.addHandler(console_handler)

    root_logger.debug("Logging initialised at level %s", level)
    return root_logger
