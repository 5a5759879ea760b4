"""
Logging setup for applications embedding the aggregator.
"""

import logging
import sys

from healthagg.config import settings

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str | None = None, format_str: str = DEFAULT_FORMAT) -> logging.Logger:
    """
    Configure the root logger to write to stdout.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL);
            defaults to HEALTHAGG_LOG_LEVEL
        format_str: Log message format

    Returns:
        The root logger
    """
    if level is None:
        level = settings.HEALTHAGG_LOG_LEVEL
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(logging.Formatter(format_str))
    root_logger.addHandler(console_handler)

    return root_logger
