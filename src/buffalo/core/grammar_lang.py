# src/buffalo/core/grammar_lang.py
"""
A simple DSL for grammars.

Syntax:
  # comment
  S -> NP VP
  NP -> DET ADJ N [0.8]
  VP -> V | V NP [0.9]

Alternatives separated by | become separate rules sharing the weight.
"""

import re

from buffalo.core.grammar import Grammar, is_nonterminal


SYMBOL_RE = re.compile(r"\w+")
# trailing [weight]: 0.8, .5, 1e-05, -2
WEIGHT_RE = re.compile(r"\[([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)\]\s*$")


class GrammarParseError(Exception):
    def __init__(self, message: str, line_num: int, line: str):
        self.line_num = line_num
        self.line = line
        super().__init__(f"Line {line_num}: {message}\n  {line}")


class GrammarParser:
    def __init__(self):
        self.grammar = Grammar()

    def parse(self, text: str) -> Grammar:
        self.grammar = Grammar()

        lines = text.strip().split("\n")
        for i, line in enumerate(lines, 1):
            line = line.strip()

            if not line or line.startswith("#"):
                continue

            try:
                self.parse_line(line)
            except Exception as e:
                raise GrammarParseError(str(e), i, line)

        return self.grammar

    def parse_line(self, line: str):
        """Parse: LHS -> SYM SYM | SYM [weight]"""
        weight = 1.0
        weight_match = WEIGHT_RE.search(line)
        if weight_match:
            weight = float(weight_match.group(1))
            line = line[:weight_match.start()].strip()

        if "->" not in line:
            raise ValueError("Expected: LHS -> SYMBOL ... [weight]")

        lhs, body = line.split("->", 1)
        lhs = lhs.strip()
        if not SYMBOL_RE.fullmatch(lhs):
            raise ValueError(f"Bad left-hand side: {lhs!r}")

        for alternative in body.split("|"):
            rhs = alternative.split()
            if not rhs:
                raise ValueError("Empty alternative")
            for symbol in rhs:
                if not SYMBOL_RE.fullmatch(symbol):
                    raise ValueError(f"Bad symbol: {symbol!r}")
            self.grammar.add_rule(lhs, rhs, weight)


def parse_grammar(text: str) -> Grammar:
    parser = GrammarParser()
    return parser.parse(text)


def format_grammar(grammar: Grammar) -> str:
    lines = []
    current_lhs = None

    for rule in grammar.all_rules():
        if rule.lhs != current_lhs:
            if current_lhs is not None:
                lines.append("")
            current_lhs = rule.lhs
        weight_str = f" [{rule.weight}]" if rule.weight != 1.0 else ""
        lines.append(f"{rule}{weight_str}")

    return "\n".join(lines)


def validate_grammar(grammar: Grammar) -> list[str]:
    """Problems that will not stop parsing but make some rules inert."""
    errors = []
    defined = set(grammar.nonterminals())

    if grammar.start_symbol not in defined:
        errors.append(f"No rules for start symbol {grammar.start_symbol}")

    for rule in grammar.all_rules():
        for symbol in rule.rhs:
            if is_nonterminal(symbol) and symbol not in defined:
                errors.append(f"{rule}: {symbol} has no rules")

    return errors
