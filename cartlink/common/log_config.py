"""
Logging Configuration

Routes the package's log records to stderr so that stdout carries only
the extraction report (or JSON) produced by the CLI.
"""

import logging
import sys

PACKAGE_LOGGER = "cartlink"
LOG_FORMAT = "%(levelname)-8s %(name)s: %(message)s"


def setup_logging(verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """
    Attach a single stderr handler to the package logger.

    Args:
        verbose: If True, log at DEBUG (shows SHEIN tier decisions)
        quiet: If True, log at WARNING; ignored when verbose is set

    Returns:
        The configured package logger
    """
    level = logging.INFO
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # Calling twice must not duplicate output
    logger.handlers.clear()
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)

    return logger
