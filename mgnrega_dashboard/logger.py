"""
Logging setup for the dashboard process.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "info") -> logging.Logger:
    logger = logging.getLogger("mgnrega_dashboard")
    logger.setLevel(level.upper())

    # Clear existing handlers if rerun
    if logger.hasHandlers():
        logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
