"""Console logging helper shared by the mipmap modules."""

from __future__ import annotations

import logging
from typing import Optional

_LOGGER_NAME = "mipmap_1d"


def get_logger(name: str) -> logging.Logger:
    """Return a child of the package logger, installing a console handler once.

    Parameters
    ----------
    name : str
        Module name, typically ``__name__``.
    """
    base = logging.getLogger(_LOGGER_NAME)
    if not base.handlers:
        base.setLevel(logging.INFO)
        handler = logging.StreamHandler()
        handler.setLevel(logging.INFO)
        formatter = logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(module)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)
        base.addHandler(handler)
        base.propagate = False
    if name.startswith(_LOGGER_NAME + ".") or name == _LOGGER_NAME:
        return logging.getLogger(name)
    return logging.getLogger(f"{_LOGGER_NAME}.{name}")


def set_level(level: int) -> None:
    """Update log level for the package logger and all its handlers."""
    base = logging.getLogger(_LOGGER_NAME)
    base.setLevel(level)
    for handler in base.handlers:
        handler.setLevel(level)


def attach_handler(handler: Optional[logging.Handler]) -> None:
    """Optionally attach a host application's handler (e.g., a log panel)."""
    if handler is None:
        return
    base = logging.getLogger(_LOGGER_NAME)
    if handler not in base.handlers:
        base.addHandler(handler)
