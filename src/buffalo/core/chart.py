# src/buffalo/core/chart.py
"""
The Earley chart: columns of items plus provenance edges.

Column k holds items whose dot sits just after token k-1:

    NP -> DET . N   @3   "an NP started at 3, DET matched, N expected"

Items live in an arena (items[i].id == i) so edges can point at them by
id. An item can be reached several ways; each way is one edge, and that
is where ambiguity lives until trees are extracted.
"""

from dataclasses import dataclass
from typing import NamedTuple

from buffalo.core.types import LexiconEntry, Rule


@dataclass(frozen=True)
class Item:
    rule: Rule
    dot: int
    origin: int
    id: int

    @property
    def is_complete(self) -> bool:
        return self.dot >= len(self.rule.rhs)

    @property
    def next_symbol(self) -> str | None:
        if self.is_complete:
            return None
        return self.rule.rhs[self.dot]

    def __str__(self) -> str:
        rhs = list(self.rule.rhs)
        rhs.insert(self.dot, ".")
        return f"{self.rule.lhs} -> {' '.join(rhs)}  @{self.origin} #{self.id}"


class Edge(NamedTuple):
    """
    How an item was reached from the item before it (prev_id).

    Leaf edges consumed a word (child_id is None). Branch edges attached a
    completed item (child_id).
    """
    prev_id: int
    child_id: int | None = None
    word: str | None = None
    entry: LexiconEntry | None = None

    @property
    def is_leaf(self) -> bool:
        return self.child_id is None


class Chart:
    def __init__(self, tokens: tuple[str, ...]):
        self.tokens = tokens
        self.columns: list[list[Item]] = [[] for _ in range(len(tokens) + 1)]
        self._index: list[dict[tuple, Item]] = [{} for _ in range(len(tokens) + 1)]
        self.items: list[Item] = []
        self.edges: dict[int, list[Edge]] = {}

    def add(self, pos: int, rule: Rule, dot: int, origin: int) -> Item:
        """Insert an item into column pos, or return the one already there."""
        key = (rule.lhs, rule.rhs, dot, origin)
        existing = self._index[pos].get(key)
        if existing is not None:
            return existing

        item = Item(rule, dot, origin, len(self.items))
        self.items.append(item)
        self.columns[pos].append(item)
        self._index[pos][key] = item
        return item

    def add_edge(self, item: Item, edge: Edge) -> None:
        self.edges.setdefault(item.id, []).append(edge)

    def edges_for(self, item: Item) -> list[Edge]:
        return self.edges.get(item.id, [])

    def completed(self, symbol: str) -> list[Item]:
        """Items in the last column that derive the whole input from symbol."""
        return [
            item for item in self.columns[-1]
            if item.rule.lhs == symbol and item.is_complete and item.origin == 0
        ]

    def __len__(self) -> int:
        return len(self.items)
