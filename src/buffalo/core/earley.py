# src/buffalo/core/earley.py
"""
Earley parser.

Handles arbitrary (ambiguous, left-recursive) context-free grammars and
returns every parse, not just the best one. Parsing fills a Chart with
predict/scan/complete; trees are built afterwards by ForestExtractor.

    parser = EarleyParser(create_english_grammar(), create_buffalo_lexicon())
    result = parser.parse(["buffalo"] * 8)
"""

from buffalo.core.chart import Chart, Edge, Item
from buffalo.core.forest import MAX_TREES, ForestExtractor
from buffalo.core.grammar import Grammar, is_nonterminal
from buffalo.core.lexicon import Lexicon
from buffalo.core.types import ParseResult


EMPTY_INPUT = "Empty input"
NO_PARSE = "No valid parse found"


class EarleyParser:
    def __init__(self, grammar: Grammar, lexicon: Lexicon, max_trees: int = MAX_TREES):
        if max_trees < 1:
            raise ValueError(f"max_trees must be positive, got {max_trees}")
        self.grammar = grammar
        self.lexicon = lexicon
        self.max_trees = max_trees

    def parse(self, tokens: list[str] | tuple[str, ...]) -> ParseResult:
        """Parse a token sequence and return every distinct tree (up to max_trees)."""
        tokens = tuple(tokens)
        if not tokens:
            return ParseResult(input=tokens, trees=[], errors=[EMPTY_INPUT])

        chart = self.build_chart(tokens)
        extractor = ForestExtractor(chart, max_trees=self.max_trees)
        trees = extractor.extract(self.grammar.start_symbol)

        return ParseResult(
            input=tokens,
            trees=trees,
            errors=None if trees else [NO_PARSE],
        )

    def build_chart(self, tokens: tuple[str, ...]) -> Chart:
        chart = Chart(tokens)

        for rule in self.grammar.rules_for(self.grammar.start_symbol):
            chart.add(0, rule, 0, 0)

        for pos in range(len(tokens) + 1):
            column = chart.columns[pos]
            # The column grows while we walk it
            i = 0
            while i < len(column):
                item = column[i]
                symbol = item.next_symbol
                if symbol is None:
                    self._complete(chart, pos, item)
                elif is_nonterminal(symbol):
                    self._predict(chart, pos, symbol)
                elif pos < len(tokens):
                    self._scan(chart, pos, item, symbol)
                i += 1

        return chart

    def _predict(self, chart: Chart, pos: int, symbol: str) -> None:
        for rule in self.grammar.rules_for(symbol):
            chart.add(pos, rule, 0, pos)

    def _scan(self, chart: Chart, pos: int, item: Item, symbol: str) -> None:
        word = chart.tokens[pos]
        for entry in self.lexicon.lookup(word):
            if entry.pos != symbol:
                continue
            advanced = chart.add(pos + 1, item.rule, item.dot + 1, item.origin)
            chart.add_edge(advanced, Edge(prev_id=item.id, word=word, entry=entry))

    def _complete(self, chart: Chart, pos: int, completed: Item) -> None:
        """Advance every item in the origin column that was waiting for this lhs."""
        waiting_column = chart.columns[completed.origin]
        i = 0
        while i < len(waiting_column):
            waiting = waiting_column[i]
            if waiting.next_symbol == completed.rule.lhs:
                advanced = chart.add(pos, waiting.rule, waiting.dot + 1, waiting.origin)
                chart.add_edge(advanced, Edge(prev_id=waiting.id, child_id=completed.id))
            i += 1


def parse(grammar: Grammar, lexicon: Lexicon, tokens: list[str], max_trees: int = MAX_TREES) -> ParseResult:
    return EarleyParser(grammar, lexicon, max_trees=max_trees).parse(tokens)
