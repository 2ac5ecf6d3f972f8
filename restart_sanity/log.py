"""
Logging setup for restart-sanity.

Usage:
    from restart_sanity.log import get_logger
    logger = get_logger(__name__)
    logger.debug("Counting row and column symbol maximums")
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
PACKAGE_LOGGER = "restart_sanity"


class StderrHandler(logging.StreamHandler):
    """StreamHandler bound to the current sys.stderr at each emit, not at creation."""

    def __init__(self) -> None:
        super().__init__(sys.stderr)

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value) -> None:
        pass


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the package logger, which owns the one handler.

    Args:
        name: Logger name (typically __name__ of the calling module).

    Returns:
        logging.Logger instance.
    """
    root = logging.getLogger(PACKAGE_LOGGER)

    # Avoid adding duplicate handlers if called multiple times
    if not root.handlers:
        handler = StderrHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        root.setLevel(logging.WARNING)

    return logging.getLogger(name)


def set_verbose(verbose: bool) -> None:
    """Switch package logging between DEBUG (verbose) and WARNING."""
    get_logger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
