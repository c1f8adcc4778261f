"""Per-letter rule table driving the phonetic encoder.

Each triggering character maps to an ordered tuple of :class:`Rule` entries.
The encoder applies the first rule whose condition matches at the cursor, so
order inside a tuple matters and later entries act as fallbacks. Every tuple
ends in an unconditional rule.

The exception word lists (``BACHER``, ``DANGER``, ``HEIM`` and so on) are
curated data; extend them only alongside new reference vectors.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

from .probes import (
    ALWAYS,
    AT_LAST,
    FIRST,
    SLAVO_GERMANIC,
    PaddedWord,
    Probe,
    at,
    before_last,
    from_last,
    past,
    position,
    starts,
    vowel,
)

REPLACEMENT_ALPHABET: Tuple[str, ...] = (
    "A", "B", "X", "S", "K", "J", "T", "F", "H", "L", "M", "N", "P", "R", "0",
)

SILENT_INITIALS: Tuple[str, ...] = ("GN", "KN", "PN", "WR", "PS")


@dataclass(frozen=True)
class Rule:
    """Emit ``code`` and move the cursor when ``when`` matches.

    ``swallow`` consumes one more character when it also matches, which is how
    doubled letters (``BB``, ``TT``) collapse into a single code.
    """

    when: Probe
    code: str
    advance: int = 1
    swallow: Optional[Probe] = None

    def step(self, word: PaddedWord, pos: int) -> int:
        if self.swallow is not None and self.swallow(word, pos):
            return self.advance + 1
        return self.advance


def _doubled(letter: str, code: str) -> Tuple[Rule, ...]:
    return (Rule(ALWAYS, code, 1, at(1, 1, letter)),)


_VOWEL_RULES = (
    Rule(FIRST, "A"),
    Rule(ALWAYS, ""),
)

_VAN_VON = starts(4, "VAN ", "VON ")
_SCH_PREFIX = starts(3, "SCH")

_CH = at(0, 2, "CH")
_CH_GERMANIC = (
    _VAN_VON
    | _SCH_PREFIX
    | at(-2, 6, "ORCHES", "ARCHIT", "ORCHID")
    | at(2, 1, "T", "S")
    | ((at(-1, 1, "A", "O", "U", "E") | FIRST)
       & at(2, 1, "L", "R", "N", "M", "B", "H", "F", "V", "W", " "))
)
_CC = at(0, 2, "CC") & ~(position(1) & starts(1, "M"))
_CC_SOFT = at(2, 1, "I", "E", "H") & ~at(2, 2, "HU")

_C_RULES = (
    Rule(
        (past(1) & ~vowel(-2) & at(-1, 3, "ACH") & ~at(2, 1, "I", "E"))
        | at(-2, 6, "BACHER", "MACHER"),
        "K", 2,
    ),
    Rule(FIRST & at(0, 6, "CAESAR"), "S", 2),
    Rule(at(0, 4, "CHIA"), "K", 2),
    Rule(_CH & past(0) & at(0, 4, "CHAE"), "K", 2),
    Rule(
        _CH & ((FIRST & at(1, 5, "HARAC", "HARIS"))
               | (at(1, 3, "HOR", "HYM", "HIA", "HEM") & ~starts(5, "CHORE"))),
        "K", 2,
    ),
    Rule(_CH & _CH_GERMANIC, "K", 2),
    Rule(_CH & past(0) & starts(2, "MC"), "K", 2),
    Rule(_CH, "X", 2),
    Rule(at(0, 2, "CZ") & ~at(0, 4, "WICZ"), "S", 2),
    # two-character window, so the three-letter option never matches
    Rule(at(0, 2, "CIA"), "X", 2),
    Rule(
        _CC & _CC_SOFT & ((position(1) & at(-1, 1, "A")) | at(-1, 5, "UCCEE", "UCCES")),
        "KS", 3,
    ),
    Rule(_CC & _CC_SOFT, "X", 3),
    Rule(_CC, "K", 2),
    Rule(at(0, 2, "CK", "CG", "CQ"), "K", 2),
    Rule(at(0, 2, "CI", "CE", "CY"), "S", 2),
    Rule(at(1, 2, " C", " Q", " G"), "K", 3),
    Rule(at(1, 1, "C", "K", "Q") & ~at(1, 2, "CE", "CI"), "K", 2),
    Rule(ALWAYS, "K"),
)

_D_RULES = (
    Rule(at(0, 2, "DG") & at(2, 1, "I", "E", "Y"), "J", 3),
    Rule(at(0, 2, "DG"), "TK", 2),
    Rule(at(0, 2, "DT", "DD"), "T", 2),
    Rule(ALWAYS, "T"),
)

_GH = at(1, 1, "H")
_GN = at(1, 1, "N")
_G_SOFT = at(1, 1, "E", "I", "Y") | at(-1, 4, "AGGI", "OGGI")

_G_RULES = (
    Rule(_GH & past(0) & ~vowel(-1), "K", 2),
    Rule(_GH & FIRST & at(2, 1, "I"), "J", 2),
    Rule(_GH & FIRST, "K", 2),
    Rule(
        _GH & ((past(1) & at(-2, 1, "B", "H", "D"))
               | (past(2) & at(-3, 1, "B", "H", "D"))
               | (past(3) & at(-4, 1, "B", "H"))),
        "", 2,
    ),
    Rule(_GH & past(2) & at(-1, 1, "U") & at(-3, 1, "C", "G", "L", "R", "T"), "F", 2),
    Rule(_GH & past(0) & ~at(-1, 1, "I"), "K", 2),
    Rule(_GH, "", 2),
    Rule(_GN & position(1) & vowel(-1) & ~SLAVO_GERMANIC, "KN", 2),
    Rule(_GN & ~at(2, 2, "EY") & ~SLAVO_GERMANIC, "N", 2),
    Rule(_GN, "KN", 2),
    Rule(at(1, 2, "LI") & ~SLAVO_GERMANIC, "KL", 2),
    Rule(
        FIRST & (at(1, 1, "Y")
                 | at(1, 2, "ES", "EP", "EB", "EL", "EY", "IB", "IL", "IN", "IE", "EI", "ER")),
        "K", 2,
    ),
    Rule(
        (at(1, 2, "ER") | at(1, 1, "Y"))
        & ~starts(6, "DANGER", "RANGER", "MANGER")
        & ~at(-1, 1, "E", "I")
        & ~at(-1, 3, "RGY", "OGY"),
        "K", 2,
    ),
    Rule(_G_SOFT & (_VAN_VON | _SCH_PREFIX | at(1, 2, "ET")), "K", 2),
    Rule(_G_SOFT, "J", 2),
    Rule(ALWAYS, "K", 1, at(1, 1, "G")),
)

_H_RULES = (
    Rule((FIRST | vowel(-1)) & vowel(1), "H", 2),
    Rule(ALWAYS, ""),
)

_SAN = starts(4, "SAN ")
_JOSE = at(0, 4, "JOSE") | _SAN
_JJ = at(1, 1, "J")

_J_RULES = (
    Rule(_JOSE & ((FIRST & at(4, 1, " ")) | _SAN), "H"),
    Rule(_JOSE, "J"),
    Rule(FIRST, "J", 1, _JJ),
    Rule(vowel(-1) & ~SLAVO_GERMANIC & at(1, 1, "A", "O"), "J", 1, _JJ),
    Rule(AT_LAST, "J", 1, _JJ),
    Rule(
        ~at(1, 1, "L", "T", "K", "S", "N", "M", "B", "Z") & ~at(-1, 1, "S", "K", "L"),
        "J", 1, _JJ,
    ),
    Rule(ALWAYS, "", 1, _JJ),
)

_L_RULES = (
    Rule(
        at(1, 1, "L")
        & ((before_last(2) & at(-1, 4, "ILLO", "ILLA", "ALLE"))
           | ((from_last(-1, 2, "AS", "OS") | from_last(0, 1, "A", "O"))
              & at(-1, 4, "ALLE"))),
        "L", 2,
    ),
    Rule(ALWAYS, "L", 1, at(1, 1, "L")),
)

_M_RULES = (
    Rule(
        (at(-1, 3, "UMB") & (before_last(1) | at(2, 2, "ER"))) | at(1, 1, "M"),
        "M", 2,
    ),
    Rule(ALWAYS, "M"),
)

_P_RULES = (
    Rule(at(1, 1, "N"), "F", 2),
    Rule(ALWAYS, "P", 1, at(1, 1, "P", "B")),
)

_R_RULES = (
    Rule(
        AT_LAST & ~SLAVO_GERMANIC & at(-2, 2, "IE") & ~at(-4, 2, "ME", "MA"),
        "", 1, at(1, 1, "R"),
    ),
    Rule(ALWAYS, "R", 1, at(1, 1, "R")),
)

_SC = at(0, 2, "SC")
_SCH = _SC & at(2, 1, "H")
_S_OR_Z = at(1, 1, "S", "Z")

_S_RULES = (
    Rule(at(-1, 3, "ISL", "YSL"), ""),
    Rule(FIRST & at(0, 5, "SUGAR"), "X"),
    Rule(at(0, 2, "SH") & at(1, 4, "HEIM", "HOEK", "HOLM", "HOLZ"), "S", 2),
    Rule(at(0, 2, "SH"), "X", 2),
    Rule(at(0, 3, "SIO", "SIA") | at(0, 4, "SIAN"), "S", 3),
    Rule((FIRST & at(1, 1, "M", "N", "L", "W")) | at(1, 1, "Z"), "S", 1, at(1, 1, "Z")),
    Rule(_SCH & at(3, 2, "ER", "EN"), "X", 3),
    Rule(_SCH & at(3, 2, "OO", "UY", "ED", "EM"), "SK", 3),
    Rule(_SCH, "X", 3),
    Rule(_SC & at(2, 1, "I", "E", "Y"), "S", 3),
    Rule(_SC, "SK", 3),
    Rule(AT_LAST & at(-2, 2, "AI", "OI"), "", 1, _S_OR_Z),
    Rule(ALWAYS, "S", 1, _S_OR_Z),
)

_TH = at(0, 2, "TH") | at(0, 3, "TTH")

_T_RULES = (
    Rule(at(0, 4, "TION"), "X", 3),
    Rule(at(0, 3, "TIA", "TCH"), "X", 3),
    Rule(_TH & (at(2, 2, "OM", "AM") | _VAN_VON | _SCH_PREFIX), "T", 2),
    Rule(_TH, "0", 2),
    Rule(ALWAYS, "T", 1, at(1, 1, "T", "D")),
)

# A word-initial W before a vowel (or WH) sounds as "A" and still falls
# through to the remaining W rules, hence the combined codes.
_W_LEAD = FIRST & (vowel(1) | at(0, 2, "WH"))
_W_SOFT = (
    (AT_LAST & vowel(-1))
    | at(-1, 5, "EWSKI", "EWSKY", "OWSKI", "OWSKY")
    | _SCH_PREFIX
)
_W_ITZ = at(0, 4, "WICZ", "WITZ")

_W_RULES = (
    Rule(at(0, 2, "WR"), "R", 2),
    Rule(_W_LEAD & _W_SOFT, "AF"),
    Rule(_W_LEAD & _W_ITZ, "ATS", 4),
    Rule(_W_LEAD, "A"),
    Rule(_W_SOFT, "F"),
    Rule(_W_ITZ, "TS", 4),
    Rule(ALWAYS, ""),
)

_X_RULES = (
    Rule(
        AT_LAST & (at(-3, 3, "IAU", "EAU") | at(-2, 2, "AU", "OU")),
        "", 1, at(1, 1, "C", "X"),
    ),
    Rule(ALWAYS, "KS", 1, at(1, 1, "C", "X")),
)

_Z_RULES = (
    Rule(at(1, 1, "H"), "J", 2),
    Rule(ALWAYS, "S", 1, at(1, 1, "Z")),
)


def _build_table() -> Dict[str, Tuple[Rule, ...]]:
    table: Dict[str, Tuple[Rule, ...]] = {letter: _VOWEL_RULES for letter in "AEIOUY"}
    table.update(
        {
            "B": _doubled("B", "P"),
            "Ç": (Rule(ALWAYS, "S"),),
            "C": _C_RULES,
            "D": _D_RULES,
            "F": _doubled("F", "F"),
            "G": _G_RULES,
            "H": _H_RULES,
            "J": _J_RULES,
            "K": _doubled("K", "K"),
            "L": _L_RULES,
            "M": _M_RULES,
            "N": _doubled("N", "N"),
            "Ñ": (Rule(ALWAYS, "N"),),
            "P": _P_RULES,
            "Q": _doubled("Q", "K"),
            "R": _R_RULES,
            "S": _S_RULES,
            "T": _T_RULES,
            "V": _doubled("V", "F"),
            "W": _W_RULES,
            "X": _X_RULES,
            "Z": _Z_RULES,
        }
    )
    return table


RULES: Mapping[str, Tuple[Rule, ...]] = MappingProxyType(_build_table())


def match_rule(word: PaddedWord, pos: int) -> Optional[Rule]:
    """Return the first rule that fires at ``pos``, or ``None`` for unknown characters."""

    for rule in RULES.get(word.text[pos], ()):
        if rule.when(word, pos):
            return rule
    return None


__all__ = [
    "REPLACEMENT_ALPHABET",
    "SILENT_INITIALS",
    "Rule",
    "RULES",
    "match_rule",
]
