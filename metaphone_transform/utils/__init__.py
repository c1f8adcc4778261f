"""Utility helpers shared across the :mod:`metaphone_transform` package."""

from __future__ import annotations

from .logging_config import configure_logging
from .observability import StructuredLoggerAdapter, get_logger

__all__ = [
    "configure_logging",
    "StructuredLoggerAdapter",
    "get_logger",
]
