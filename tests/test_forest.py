# tests/test_forest.py
"""Tests for the chart and for tree extraction: cycles, the cap, deduplication."""

import pytest

from buffalo.core.chart import Chart, Edge
from buffalo.core.earley import EarleyParser
from buffalo.core.forest import MAX_TREES, ForestExtractor
from buffalo.core.grammar import Grammar
from buffalo.core.lexicon import Lexicon
from buffalo.core.types import Rule, serialize_tree


@pytest.fixture
def x_lexicon():
    return Lexicon().add_word("x", "N")


@pytest.fixture
def binary_grammar():
    """S -> S S | N: every bracketing of the input is a parse."""
    g = Grammar()
    g.add_rule("S", ["S", "S"])
    g.add_rule("S", ["N"])
    return g


# === Chart ===

def test_chart_deduplicates_items():
    chart = Chart(("dog",))
    rule = Rule("NP", ("N",))

    a = chart.add(0, rule, 0, 0)
    b = chart.add(0, rule, 0, 0)
    c = chart.add(1, rule, 1, 0)

    assert a is b
    assert c.id != a.id
    assert len(chart) == 2
    assert chart.items[c.id] is c


def test_chart_keeps_every_edge():
    chart = Chart(("dog",))
    rule = Rule("NP", ("N",))
    start = chart.add(0, rule, 0, 0)
    done = chart.add(1, rule, 1, 0)

    chart.add_edge(done, Edge(prev_id=start.id, word="dog"))
    chart.add_edge(done, Edge(prev_id=start.id, word="dog"))

    assert len(chart.edges_for(done)) == 2
    assert chart.edges_for(start) == []


def test_build_chart_columns(binary_grammar, x_lexicon):
    parser = EarleyParser(binary_grammar, x_lexicon)

    chart = parser.build_chart(("x", "x", "x"))

    assert len(chart.columns) == 4
    assert [str(i.rule) for i in chart.columns[0][:2]] == ["S -> S S", "S -> N"]
    # one item, S -> S S . @0, reached through several edges
    completed = chart.completed("S")
    assert len(completed) == 1
    assert len(chart.edges_for(completed[0])) == 2


# === Cycle guard ===

def test_unit_cycle_terminates():
    # S -> NP -> S -> NP ... at the same span
    g = Grammar()
    g.add_rule("S", ["NP"])
    g.add_rule("NP", ["N"])
    g.add_rule("NP", ["S"])
    lex = Lexicon().add_word("dog", "N")

    result = EarleyParser(g, lex).parse(["dog"])

    assert [serialize_tree(t.root) for t in result.trees] == ['(S (NP (N "dog")))']
    assert result.errors is None


def test_left_recursion():
    g = Grammar()
    g.add_rule("S", ["NP"])
    g.add_rule("NP", ["NP", "PP"])
    g.add_rule("NP", ["N"])
    g.add_rule("PP", ["PREP", "NP"])
    lex = Lexicon().add_word("dog", "N").add_word("with", "PREP")

    result = EarleyParser(g, lex).parse(["dog", "with", "dog", "with", "dog"])

    # [dog with dog] with dog / dog with [dog with dog]
    assert len(result.trees) == 2


# === Cap ===

def test_cap_on_exploding_ambiguity(binary_grammar, x_lexicon):
    # 9 tokens have Catalan(8) = 1430 bracketings
    result = EarleyParser(binary_grammar, x_lexicon).parse(["x"] * 9)

    assert len(result.trees) == MAX_TREES
    keys = [serialize_tree(t.root) for t in result.trees]
    assert len(set(keys)) == len(keys)


def test_small_cap(binary_grammar, x_lexicon):
    result = EarleyParser(binary_grammar, x_lexicon, max_trees=3).parse(["x"] * 5)

    assert len(result.trees) == 3


def test_all_bracketings_below_cap(binary_grammar, x_lexicon):
    # Catalan(3) = 5
    result = EarleyParser(binary_grammar, x_lexicon).parse(["x"] * 4)

    assert len(result.trees) == 5


# === Deduplication ===

def test_duplicate_readings_give_one_tree():
    g = Grammar()
    g.add_rule("S", ["NP"])
    g.add_rule("NP", ["N"])
    lex = Lexicon()
    lex.add_word("fish", "N", {"number": "singular"})
    lex.add_word("fish", "N", {"number": "plural"})

    result = EarleyParser(g, lex).parse(["fish"])

    assert len(result.trees) == 1
    # first reading wins
    assert result.trees[0].root.leaves()[0].entry.features == {"number": "singular"}


def test_extractor_on_chart_directly(binary_grammar, x_lexicon):
    parser = EarleyParser(binary_grammar, x_lexicon)
    chart = parser.build_chart(("x", "x"))

    trees = ForestExtractor(chart, max_trees=10).extract("S")

    assert [serialize_tree(t.root) for t in trees] == ['(S (S (N "x")) (S (N "x")))']
    assert trees[0].root.span == (0, 2)


def test_no_completed_items_gives_no_trees(binary_grammar):
    parser = EarleyParser(binary_grammar, Lexicon())
    chart = parser.build_chart(("x",))

    assert ForestExtractor(chart).extract("S") == []
