"""Phonetic word encoding for spelling-suggestion search."""

__version__ = "0.1.0"

from .core import (
    DEFAULT_ENCODER,
    PhoneticEncoder,
    REPLACEMENT_ALPHABET,
    encode,
    replacement_alphabet,
)
from .utils import configure_logging

__all__ = [
    "DEFAULT_ENCODER",
    "PhoneticEncoder",
    "REPLACEMENT_ALPHABET",
    "encode",
    "replacement_alphabet",
    "configure_logging",
]
