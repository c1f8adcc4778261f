import pytest

from metaphone_transform.core.probes import ALWAYS, PaddedWord, at
from metaphone_transform.core.rules import (
    REPLACEMENT_ALPHABET,
    RULES,
    SILENT_INITIALS,
    Rule,
    match_rule,
)


def test_every_letter_ends_with_unconditional_rule():
    for letter, rules in RULES.items():
        assert rules, letter
        assert rules[-1].when is ALWAYS, letter


def test_rule_advances_stay_within_four_positions():
    for rules in RULES.values():
        for rule in rules:
            assert 1 <= rule.advance <= 4
            if rule.swallow is not None:
                assert rule.advance + 1 <= 4


def test_table_covers_expected_letters():
    expected = set("AEIOUYBCDFGHJKLMNPQRSTVWXZ") | {"Ç", "Ñ"}

    assert set(RULES) == expected


@pytest.mark.parametrize("char", [" ", "1", "-", "'", "É"])
def test_pad_and_non_letters_have_no_rules(char):
    assert char not in RULES
    assert match_rule(PaddedWord.from_word(char), 0) is None


def test_vowels_share_one_rule_set():
    assert all(RULES[vowel] is RULES["A"] for vowel in "EIOUY")


def test_emitted_symbols_belong_to_replacement_alphabet():
    symbols = set(REPLACEMENT_ALPHABET)

    for rules in RULES.values():
        for rule in rules:
            assert set(rule.code) <= symbols, rule.code


def test_rule_table_is_read_only():
    with pytest.raises(TypeError):
        RULES["B"] = ()  # type: ignore[index]


def test_silent_initials():
    assert SILENT_INITIALS == ("GN", "KN", "PN", "WR", "PS")


def test_rule_step_swallows_doubled_letter():
    rule = Rule(ALWAYS, "P", 1, at(1, 1, "B"))

    assert rule.step(PaddedWord.from_word("BB"), 0) == 2
    assert rule.step(PaddedWord.from_word("BA"), 0) == 1


def test_rule_step_without_swallow_uses_advance():
    rule = Rule(ALWAYS, "X", 3)

    assert rule.step(PaddedWord.from_word("SCH"), 0) == 3


def test_first_matching_rule_wins():
    word = PaddedWord.from_word("CHAE")

    rule = match_rule(word, 0)

    # CHAE only counts mid-word, so the word-initial CH falls through to X
    assert rule is not None
    assert rule.code == "X"
    assert rule.advance == 2


def test_vowel_rules_depend_on_position():
    word = PaddedWord.from_word("ABA")

    assert match_rule(word, 0).code == "A"
    assert match_rule(word, 2).code == ""


def test_slavo_germanic_flag_changes_gn_rule():
    plain = PaddedWord.from_word("SIGNAL")
    germanic = PaddedWord.from_word("WIGNAL")

    assert match_rule(plain, 2).code == "N"
    assert match_rule(germanic, 2).code == "KN"


def test_terminal_rules_test_padding_not_last_letter():
    # "last" indexes the final pad character, so the silent terminal R rule
    # never sees a real letter
    assert match_rule(PaddedWord.from_word("MEIER"), 4).code == "R"
