"""Logging setup for the keycalc command line."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_handler: logging.Handler | None = None


class _StderrHandler(logging.StreamHandler):
    """Stream handler that writes to whatever sys.stderr is at emit time."""

    def __init__(self) -> None:
        super().__init__(sys.stderr)

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value) -> None:
        pass


def setup_logging(level: str | int = "WARNING") -> logging.Logger:
    """
    Configure the ``keycalc`` logger hierarchy.

    The first call attaches a stderr handler; later calls only change the
    level, so repeated setup never duplicates output.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ERROR) or number

    Returns:
        The package root logger
    """
    global _handler

    if isinstance(level, str):
        level = level.upper()
    root_logger = logging.getLogger("keycalc")
    root_logger.setLevel(level)

    if _handler is None:
        _handler = _StderrHandler()
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root_logger.addHandler(_handler)

    return root_logger
