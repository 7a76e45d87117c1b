"""Loggers for include-docs.

The package is a library, so it only attaches a ``NullHandler``; the
application that calls :func:`include_docs.include_docs` decides where
records go.
"""

from __future__ import annotations

import logging

_LOGGER_NAME = "include_docs"

logging.getLogger(_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``include_docs.<name>``, or the package logger when ``name`` is empty."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


__all__ = ["get_logger"]
