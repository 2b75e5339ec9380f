# src/buffalo/core/forest.py
"""
Tree extraction from a filled chart.

Walks provenance edges backwards from each completed top-level item and
enumerates concrete trees. The number of trees can grow exponentially
with sentence length ("buffalo buffalo buffalo ..."), so:

- an item met again on its own expansion path contributes nothing
- every list of alternatives is capped at max_trees
- structurally identical trees are kept once, first one wins

Expanding an item yields partials: the children matched so far for the
item's rule, and where they end. A completed item's partials become
nodes of its lhs.
"""

from typing import NamedTuple

from buffalo.core.chart import Chart, Item
from buffalo.core.types import ParseNode, ParseTree, branch_key, leaf_key


# Upper bound on trees returned by a single parse
MAX_TREES = 100


class _Partial(NamedTuple):
    children: tuple[ParseNode, ...]
    end: int
    key: str  # canonical form of children, space separated


def _extend(partial: _Partial, node: ParseNode, key: str) -> _Partial:
    joined = f"{partial.key} {key}" if partial.key else key
    return _Partial(partial.children + (node,), node.span[1], joined)


class ForestExtractor:
    def __init__(self, chart: Chart, max_trees: int = MAX_TREES):
        self.chart = chart
        self.max_trees = max_trees
        self._memo: dict[int, list[_Partial]] = {}
        self._node_memo: dict[int, list[tuple[ParseNode, str]]] = {}
        self._visiting: set[int] = set()

    def extract(self, start_symbol: str) -> list[ParseTree]:
        trees: list[ParseTree] = []
        seen: set[str] = set()

        for item in self.chart.completed(start_symbol):
            nodes, _ = self._nodes(item)
            for node, key in nodes:
                if key in seen:
                    continue
                seen.add(key)
                trees.append(ParseTree(root=node, sentence=self.chart.tokens, weight=item.rule.weight))
                if len(trees) >= self.max_trees:
                    return trees

        return trees

    def _nodes(self, item: Item) -> tuple[list[tuple[ParseNode, str]], bool]:
        """Trees rooted at a completed item, with their canonical forms."""
        cached = self._node_memo.get(item.id)
        if cached is not None:
            return cached, False

        partials, cut = self._partials(item)
        lhs = item.rule.lhs
        nodes = [
            (ParseNode(lhs, p.children, span=(item.origin, p.end)), branch_key(lhs, p.key))
            for p in partials
        ]
        if not cut:
            self._node_memo[item.id] = nodes
        return nodes, cut

    def _partials(self, item: Item) -> tuple[list[_Partial], bool]:
        """
        Every distinct way to have matched item.rule.rhs[:item.dot].

        The second value is True when a cycle was cut somewhere below, in
        which case the result depends on the current path and is not cached.
        """
        cached = self._memo.get(item.id)
        if cached is not None:
            return cached, False
        if item.id in self._visiting:
            return [], True
        if item.dot == 0:
            return [_Partial((), item.origin, "")], False

        self._visiting.add(item.id)
        results: list[_Partial] = []
        seen: set[str] = set()
        cut = False

        for edge in self.chart.edges_for(item):
            if len(results) >= self.max_trees:
                break

            prev = self.chart.items[edge.prev_id]
            prev_partials, prev_cut = self._partials(prev)
            cut = cut or prev_cut

            if edge.is_leaf:
                symbol = item.rule.rhs[item.dot - 1]
                key = leaf_key(symbol, edge.word)
                for p in prev_partials:
                    leaf = ParseNode(symbol, word=edge.word, span=(p.end, p.end + 1), entry=edge.entry)
                    if not self._push(results, seen, _extend(p, leaf, key)):
                        break
            else:
                child = self.chart.items[edge.child_id]
                child_nodes, child_cut = self._nodes(child)
                cut = cut or child_cut
                for p in prev_partials:
                    if len(results) >= self.max_trees:
                        break
                    for node, key in child_nodes:
                        if node.span[0] != p.end:
                            continue
                        if not self._push(results, seen, _extend(p, node, key)):
                            break

        self._visiting.discard(item.id)
        if not cut:
            self._memo[item.id] = results
        return results, cut

    def _push(self, results: list[_Partial], seen: set[str], partial: _Partial) -> bool:
        """Add partial unless it is a duplicate. False once the cap is reached."""
        if len(results) >= self.max_trees:
            return False
        if partial.key not in seen:
            seen.add(partial.key)
            results.append(partial)
        return len(results) < self.max_trees
