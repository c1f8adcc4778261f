"""Phonetic encoder used to widen spelling-suggestion searches.

The encoder upper-cases a word, pads it, and walks it left to right. At each
cursor position the character selects a tuple of rules from
:data:`~metaphone_transform.core.rules.RULES`; the first rule whose condition
holds emits its code and moves the cursor. Only a single (primary) code is
produced.
"""

from __future__ import annotations

from typing import Iterator, List, NamedTuple, Optional, Tuple

from metaphone_transform.utils.observability import get_logger

from .probes import PaddedWord, starts
from .rules import REPLACEMENT_ALPHABET, SILENT_INITIALS, Rule, match_rule

logger = get_logger(__name__)

_SILENT_INITIAL = starts(2, *SILENT_INITIALS)


class EncodingStep(NamedTuple):
    """One dispatch of the traversal loop."""

    position: int
    char: str
    rule: Optional[Rule]
    code: str
    advance: int


def _initial_cursor(word: PaddedWord, code: List[str]) -> int:
    cursor = 0
    if _SILENT_INITIAL(word, 0):
        cursor += 1
    # word-initial X sounds like S ("Xavier")
    if word.text[0] == "X":
        code.append("S")
        cursor += 1
    return cursor


class PhoneticEncoder:
    """Maps words to phonetic codes so similar-sounding words compare equal.

    Instances keep no per-call state, so a single encoder may be shared across
    threads without locking.
    """

    def iter_steps(self, word: str) -> Iterator[EncodingStep]:
        """Yield each rule dispatch made while encoding ``word``.

        Leading adjustments (silent initial consonant, initial ``X``) happen
        before the first step and are not reported.
        """

        padded = PaddedWord.from_word(word)
        yield from self._walk(padded, _initial_cursor(padded, []))

    def _walk(self, padded: PaddedWord, cursor: int) -> Iterator[EncodingStep]:
        while cursor < padded.length:
            rule = match_rule(padded, cursor)
            if rule is None:
                step = EncodingStep(cursor, padded.text[cursor], None, "", 1)
            else:
                step = EncodingStep(
                    cursor,
                    padded.text[cursor],
                    rule,
                    rule.code,
                    rule.step(padded, cursor),
                )
            yield step
            cursor += step.advance

    def transform(self, word: str) -> str:
        """Return the phonetic code for ``word``.

        Total over strings: empty input yields ``""`` and characters without
        rules (digits, punctuation, most accented letters) are skipped.
        """

        padded = PaddedWord.from_word(word)
        code: List[str] = []
        cursor = _initial_cursor(padded, code)
        for step in self._walk(padded, cursor):
            if step.code:
                code.append(step.code)

        result = "".join(code)
        logger.debug("Encoded word", context={"word": word, "code": result})
        return result

    def replacement_alphabet(self) -> Tuple[str, ...]:
        """Symbols tried as substitutions and insertions when generating suggestions."""

        return REPLACEMENT_ALPHABET


DEFAULT_ENCODER = PhoneticEncoder()


def encode(word: str) -> str:
    return DEFAULT_ENCODER.transform(word)


def replacement_alphabet() -> Tuple[str, ...]:
    return REPLACEMENT_ALPHABET


__all__ = [
    "EncodingStep",
    "PhoneticEncoder",
    "DEFAULT_ENCODER",
    "encode",
    "replacement_alphabet",
]
