"""Logging setup for the tracker's command-line interface."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s | %(message)s"


def configure_logging(level: int | str = logging.WARNING) -> None:
    """Send log messages at or above the given level to stderr.

    Existing handlers on the root logger are removed, so calling this twice does not
    duplicate log lines.

    :param level: Minimum level of the messages shown, as a number or a name like 'INFO'
    """
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
    root.addHandler(handler)

    logging.getLogger(__name__).debug(
        "Logging configured (level=%s)", logging.getLevelName(root.level)
    )
