"""Centralized logging helpers."""

from __future__ import annotations

import logging
from typing import Final

_LOGGER_NAME: Final = "seqfind"
_FORMAT: Final = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"


def get_logger(component: str | None = None) -> logging.Logger:
    """Return the ``seqfind`` logger, or ``seqfind.<component>``.

    Only the package logger carries a handler. Component loggers keep level
    ``NOTSET`` and propagate to it, so one ``setLevel`` on ``seqfind`` controls
    every record the library emits.
    """
    root = logging.getLogger(_LOGGER_NAME)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        root.addHandler(handler)
    return root.getChild(component) if component else root
