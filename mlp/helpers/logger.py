# helpers/logger.py
"""Logging setup for the mlp package.

Usage::

    from mlp.helpers.logger import get_logger
    log = get_logger(__name__)
    log.debug("Layer created")
"""
import logging
import os
import sys

PACKAGE_LOGGER = "mlp"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_INITIALISED = False


def parse_level(name):
    """Level name (e.g. "debug") -> logging level int; unknown names give WARNING."""
    level = logging.getLevelName(str(name).strip().upper())
    return level if isinstance(level, int) else logging.WARNING


def _setup_package_logger():
    """Configure the package logger once (idempotent)."""
    global _INITIALISED
    if _INITIALISED:
        return
    _INITIALISED = True

    pkg = logging.getLogger(PACKAGE_LOGGER)
    pkg.setLevel(parse_level(os.environ.get("MLP_LOG_LEVEL", "WARNING")))

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    pkg.addHandler(handler)


def get_logger(name):
    """Return a named logger, configuring the package logger on first use."""
    _setup_package_logger()
    return logging.getLogger(name)
