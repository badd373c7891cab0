"""Logging configuration helpers."""

import logging

PACKAGE_LOGGER = __name__.partition(".")[0]


def configure_logging() -> None:
    """Configure package logging with a single stream handler."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(logging.INFO)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
