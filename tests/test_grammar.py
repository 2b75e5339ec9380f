# tests/test_grammar.py
"""Tests for grammar construction and symbol classification."""

import pytest

from buffalo.core.grammar import Grammar, GrammarError, is_nonterminal, is_terminal
from buffalo.core.english import create_english_grammar
from buffalo.core.types import Rule


def test_add_and_get_rules():
    g = Grammar()
    g.add_rule("S", ["NP", "VP"])

    rules = g.rules_for("S")

    assert rules == [Rule("S", ("NP", "VP"), 1.0)]


def test_rules_in_insertion_order():
    g = Grammar()
    g.add_rule("NP", ["DET", "N"]).add_rule("NP", ["N"]).add_rule("VP", ["V"])

    assert [r.rhs for r in g.rules_for("NP")] == [("DET", "N"), ("N",)]
    assert len(g.all_rules()) == 3
    assert g.nonterminals() == ["NP", "VP"]


def test_weight_is_kept():
    g = Grammar()
    g.add_rule("S", ["NP", "VP"], 0.8)

    assert g.rules_for("S")[0].weight == 0.8


def test_unknown_lhs_has_no_rules():
    assert Grammar().rules_for("PP") == []


def test_start_symbol():
    assert Grammar().start_symbol == "S"


def test_terminal_lhs_rejected():
    with pytest.raises(GrammarError):
        Grammar().add_rule("N", ["DET"])


def test_empty_rhs_rejected():
    with pytest.raises(GrammarError):
        Grammar().add_rule("S", [])


def test_terminals_mentioned():
    g = Grammar()
    g.add_rule("S", ["NP", "VP"]).add_rule("NP", ["DET", "N"]).add_rule("VP", ["V"])

    assert g.terminals() == {"DET", "N", "V"}


# === Classification ===

def test_is_terminal():
    for symbol in ["N", "V", "DET", "ADJ", "PN", "REL"]:
        assert is_terminal(symbol)
        assert not is_nonterminal(symbol)


def test_is_nonterminal():
    for symbol in ["S", "NP", "VP", "PP", "RC", "ADJP", "ADVP"]:
        assert is_nonterminal(symbol)
        assert not is_terminal(symbol)


# === English grammar ===

def test_english_grammar_has_core_categories():
    g = create_english_grammar()

    for lhs in ["S", "NP", "VP", "PP", "RC"]:
        assert g.rules_for(lhs)


def test_english_grammar_has_reduced_relative_clause():
    g = create_english_grammar()

    assert ("NP", "VP") in [r.rhs for r in g.rules_for("RC")]
