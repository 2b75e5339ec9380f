# tests/test_dsl.py
"""Tests for the grammar (.grammar) and lexicon (.lex) DSLs."""

import pytest

from buffalo.core.english import create_buffalo_lexicon, create_english_grammar, create_test_lexicon
from buffalo.core.grammar import Grammar
from buffalo.core.grammar_lang import (
    GrammarParseError, format_grammar, parse_grammar, validate_grammar
)
from buffalo.core.lexicon import Lexicon
from buffalo.core.lexicon_lang import LexiconParseError, format_lexicon, parse_lexicon
from buffalo.core.types import Rule


GRAMMAR_TEXT = """
# toy grammar
S -> NP VP
NP -> DET N [0.9]
VP -> V | V NP [0.7]
"""

LEXICON_TEXT = """
# toy lexicon
the : DET
dog : N number=singular
chased : V tense=past lemma=chase
chases : V person=3
"""


# === Grammar DSL ===

def test_parse_grammar():
    g = parse_grammar(GRAMMAR_TEXT)

    assert g.all_rules() == [
        Rule("S", ("NP", "VP"), 1.0),
        Rule("NP", ("DET", "N"), 0.9),
        Rule("VP", ("V",), 0.7),
        Rule("VP", ("V", "NP"), 0.7),
    ]


def test_grammar_error_reports_line():
    with pytest.raises(GrammarParseError) as exc:
        parse_grammar("S -> NP VP\nNP DET N")

    assert exc.value.line_num == 2
    assert exc.value.line == "NP DET N"
    assert str(exc.value).startswith("Line 2:")


def test_grammar_error_on_terminal_lhs():
    with pytest.raises(GrammarParseError) as exc:
        parse_grammar("N -> DET")

    assert exc.value.line_num == 1


def test_grammar_error_on_empty_alternative():
    with pytest.raises(GrammarParseError):
        parse_grammar("VP -> V |")


def test_english_grammar_survives_formatting():
    g = create_english_grammar()

    again = parse_grammar(format_grammar(g))

    assert again.all_rules() == g.all_rules()


@pytest.mark.parametrize("weight", [1e-05, 0.25, 2.5e10, -0.5])
def test_weight_survives_formatting(weight):
    g = Grammar().add_rule("S", ["N"], weight)

    again = parse_grammar(format_grammar(g))

    assert again.all_rules() == [Rule("S", ("N",), weight)]


def test_leading_dot_weight():
    assert parse_grammar("S -> N [.5]").all_rules() == [Rule("S", ("N",), 0.5)]


@pytest.mark.parametrize("line", ["S -> NP [high]", "S -> NP [0.5", "S -> NP, VP", "S -> [1e-05] NP"])
def test_grammar_error_on_bad_symbol(line):
    with pytest.raises(GrammarParseError) as exc:
        parse_grammar(line)

    assert exc.value.line_num == 1
    assert "Bad symbol" in str(exc.value)


def test_validate_grammar_reports_missing_rules():
    g = parse_grammar("S -> NP VP\nNP -> N")

    assert validate_grammar(g) == ["S -> NP VP: VP has no rules"]


def test_validate_grammar_missing_start():
    g = parse_grammar("NP -> N")

    assert validate_grammar(g) == ["No rules for start symbol S"]


def test_validate_english_grammar():
    # ADJP has no rules, but no rule mentions it either
    assert validate_grammar(create_english_grammar()) == []


# === Lexicon DSL ===

def test_parse_lexicon():
    lex = parse_lexicon(LEXICON_TEXT)

    assert lex.size == 4
    assert lex.lookup("the")[0].pos == "DET"
    assert lex.lookup("the")[0].features is None

    chased = lex.lookup("chased")[0]
    assert chased.lemma == "chase"
    assert chased.features == {"tense": "past"}

    assert lex.lookup("chases")[0].features == {"person": 3}


def test_lexicon_error_reports_line():
    with pytest.raises(LexiconParseError) as exc:
        parse_lexicon("the : DET\ndog N")

    assert exc.value.line_num == 2


def test_lexicon_error_on_bad_feature():
    with pytest.raises(LexiconParseError):
        parse_lexicon("dog : N plural")


@pytest.mark.parametrize("factory", [create_test_lexicon, create_buffalo_lexicon])
def test_builtin_lexicons_survive_formatting(factory):
    lex = factory()

    again = parse_lexicon(format_lexicon(lex))

    assert [e.to_dict() for e in again.entries()] == [e.to_dict() for e in lex.entries()]


def test_numeric_looking_strings_stay_strings():
    lex = Lexicon().add_word("bond", "N", {"code": "007", "person": 3})

    again = parse_lexicon(format_lexicon(lex))

    assert again.lookup("bond")[0].features == {"code": "007", "person": 3}
