"""Core phonetic encoding for :mod:`metaphone_transform`."""

from .encoder import (
    DEFAULT_ENCODER,
    EncodingStep,
    PhoneticEncoder,
    encode,
    replacement_alphabet,
)
from .probes import PaddedWord, Probe, is_slavo_germanic
from .rules import REPLACEMENT_ALPHABET, RULES, Rule, match_rule

__all__ = [
    "DEFAULT_ENCODER",
    "EncodingStep",
    "PhoneticEncoder",
    "encode",
    "replacement_alphabet",
    "PaddedWord",
    "Probe",
    "is_slavo_germanic",
    "REPLACEMENT_ALPHABET",
    "RULES",
    "Rule",
    "match_rule",
]
