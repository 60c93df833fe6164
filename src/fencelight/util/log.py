"""Diagnostics logging; stderr only so the JSON stream on stdout stays intact"""

import logging
import sys


def configure_logging(log_level: int | str) -> logging.Logger:
    """Attach a single stderr handler to the package logger at the given level."""
    level = log_level if isinstance(log_level, int) else getattr(logging, str(log_level).upper(), logging.WARNING)

    logger = logging.getLogger("fencelight")
    logger.setLevel(level)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.addHandler(handler)
    return logger
