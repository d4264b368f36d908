from __future__ import annotations

import logging
import sys

LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def setup_logger(name: str = "clinews", level: str = "WARNING") -> logging.Logger:
    """
    Configure and return a logger writing to stderr.

    Library modules log through children of the "clinews" logger, so configuring
    it once here covers the whole package. Unknown level names fall back to WARNING.
    """
    logger = logging.getLogger(name)

    level_name = str(level).upper()
    log_level = getattr(logging, level_name) if level_name in LEVELS else logging.WARNING
    logger.setLevel(log_level)

    # Avoid duplicate handlers when called twice
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    ))
    logger.addHandler(handler)
    logger.propagate = False

    return logger
