"""Lookaround predicates evaluated against a padded, upper-cased word."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, FrozenSet

PAD = " " * 5
VOWELS: FrozenSet[str] = frozenset("AEIOUY")

_SLAVO_GERMANIC_MARKERS = ("W", "K", "CZ", "WITZ")


def is_slavo_germanic(text: str) -> bool:
    """Return ``True`` when ``text`` shows Slavic or Germanic orthography."""

    return any(marker in text for marker in _SLAVO_GERMANIC_MARKERS)


@dataclass(frozen=True)
class PaddedWord:
    """Upper-cased word followed by :data:`PAD`.

    The padding lets rules peek a few characters past the real end of the word
    without bounds checks. ``last`` is the index of the final pad character,
    not of the final letter.
    """

    text: str
    length: int
    last: int
    slavo_germanic: bool

    @classmethod
    def from_word(cls, word: str) -> "PaddedWord":
        text = word.upper() + PAD
        length = len(text)
        return cls(
            text=text,
            length=length,
            last=length - 1,
            slavo_germanic=is_slavo_germanic(text),
        )

    def window(self, start: int, width: int) -> str:
        if start < 0 or start >= self.length:
            return ""
        return self.text[start:start + width]

    def char(self, index: int) -> str:
        if index < 0 or index >= self.length:
            return ""
        return self.text[index]


ProbeFn = Callable[[PaddedWord, int], bool]


class Probe:
    """Composable predicate over ``(word, cursor)``.

    Probes combine with ``&``, ``|`` and ``~`` so rule conditions read like the
    boolean expressions they stand for.
    """

    __slots__ = ("_fn", "label")

    def __init__(self, fn: ProbeFn, label: str = "probe") -> None:
        self._fn = fn
        self.label = label

    def __call__(self, word: PaddedWord, pos: int) -> bool:
        return self._fn(word, pos)

    def __and__(self, other: "Probe") -> "Probe":
        return Probe(
            lambda word, pos: self(word, pos) and other(word, pos),
            f"({self.label} & {other.label})",
        )

    def __or__(self, other: "Probe") -> "Probe":
        return Probe(
            lambda word, pos: self(word, pos) or other(word, pos),
            f"({self.label} | {other.label})",
        )

    def __invert__(self) -> "Probe":
        return Probe(lambda word, pos: not self(word, pos), f"~{self.label}")

    def __repr__(self) -> str:
        return f"Probe({self.label})"


def _matches(word: PaddedWord, start: int, width: int, options: FrozenSet[str]) -> bool:
    return word.window(start, width) in options


def at(offset: int, width: int, *options: str) -> Probe:
    """``width`` characters starting ``offset`` from the cursor are one of ``options``.

    The window width is independent of the option lengths: an option longer
    than ``width`` can never match.
    """

    choices = frozenset(options)
    return Probe(
        lambda word, pos: _matches(word, pos + offset, width, choices),
        f"at({offset},{width},{'/'.join(options)})",
    )


def starts(width: int, *options: str) -> Probe:
    """The first ``width`` characters of the word are one of ``options``."""

    choices = frozenset(options)
    return Probe(
        lambda word, pos: _matches(word, 0, width, choices),
        f"starts({width},{'/'.join(options)})",
    )


def from_last(offset: int, width: int, *options: str) -> Probe:
    """Window anchored at the final pad character rather than the cursor."""

    choices = frozenset(options)
    return Probe(
        lambda word, pos: _matches(word, word.last + offset, width, choices),
        f"from_last({offset},{width},{'/'.join(options)})",
    )


def vowel(offset: int) -> Probe:
    return Probe(
        lambda word, pos: word.char(pos + offset) in VOWELS,
        f"vowel({offset})",
    )


def past(index: int) -> Probe:
    """Cursor is strictly beyond ``index``."""

    return Probe(lambda word, pos: pos > index, f"past({index})")


def position(index: int) -> Probe:
    return Probe(lambda word, pos: pos == index, f"position({index})")


def before_last(distance: int) -> Probe:
    """Cursor sits ``distance`` characters before the final pad character."""

    return Probe(lambda word, pos: pos == word.last - distance, f"before_last({distance})")


FIRST = position(0)
AT_LAST = before_last(0)
SLAVO_GERMANIC = Probe(lambda word, pos: word.slavo_germanic, "slavo_germanic")
ALWAYS = Probe(lambda word, pos: True, "always")


__all__ = [
    "PAD",
    "VOWELS",
    "PaddedWord",
    "Probe",
    "is_slavo_germanic",
    "at",
    "starts",
    "from_last",
    "vowel",
    "past",
    "position",
    "before_last",
    "FIRST",
    "AT_LAST",
    "SLAVO_GERMANIC",
    "ALWAYS",
]
