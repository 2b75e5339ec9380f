# src/buffalo/core/grammar.py
"""
Context-free grammar over part-of-speech terminals.

Rules are grouped by left-hand side so the parser can expand a
non-terminal without scanning the whole rule list. Insertion order is
preserved everywhere; it decides the order parses come out in.
"""

from buffalo.core.types import NONTERMINALS, START_SYMBOL, Rule


class GrammarError(ValueError):
    pass


def is_nonterminal(symbol: str) -> bool:
    return symbol in NONTERMINALS


def is_terminal(symbol: str) -> bool:
    """Anything outside the fixed non-terminal set is a terminal (a POS tag)."""
    return symbol not in NONTERMINALS


class Grammar:
    def __init__(self):
        self._rules: list[Rule] = []
        self._by_lhs: dict[str, list[Rule]] = {}

    def add_rule(self, lhs: str, rhs: list[str] | tuple[str, ...], weight: float = 1.0) -> "Grammar":
        if not is_nonterminal(lhs):
            raise GrammarError(f"left-hand side must be a non-terminal, got {lhs!r}")
        if not rhs:
            raise GrammarError(f"rule for {lhs} has an empty right-hand side")

        rule = Rule(lhs, tuple(rhs), float(weight))
        self._rules.append(rule)
        self._by_lhs.setdefault(lhs, []).append(rule)
        return self

    def rules_for(self, lhs: str) -> list[Rule]:
        return list(self._by_lhs.get(lhs, []))

    def all_rules(self) -> list[Rule]:
        return list(self._rules)

    def nonterminals(self) -> list[str]:
        """Non-terminals that have at least one rule."""
        return list(self._by_lhs.keys())

    def terminals(self) -> set[str]:
        """Terminal symbols mentioned on any right-hand side."""
        return {s for r in self._rules for s in r.rhs if is_terminal(s)}

    @property
    def start_symbol(self) -> str:
        return START_SYMBOL

    def __len__(self) -> int:
        return len(self._rules)
