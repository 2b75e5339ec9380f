# src/buffalo/core/types.py
"""
Core value types shared by the lexicon, grammar and parser.

Everything here is immutable: grammars and lexicons hand these out to the
parser, and the parser hands trees to callers, without anyone copying.
"""

from dataclasses import dataclass, field


# Parts of speech assigned directly to words
TERMINALS = ("N", "V", "PN", "DET", "ADJ", "ADV", "PREP", "CONJ", "REL", "AUX")

# Syntactic categories expanded by grammar rules
NONTERMINALS = frozenset({"S", "NP", "VP", "PP", "ADJP", "ADVP", "RC"})

START_SYMBOL = "S"


@dataclass(frozen=True)
class LexiconEntry:
    word: str
    pos: str
    lemma: str
    features: dict[str, str | int] | None = field(default=None, compare=False, hash=False)

    def to_dict(self) -> dict:
        return {
            "word": self.word,
            "pos": self.pos,
            "lemma": self.lemma,
            "features": dict(self.features) if self.features else None,
        }


@dataclass(frozen=True)
class Rule:
    lhs: str
    rhs: tuple[str, ...]
    weight: float = 1.0

    def __str__(self) -> str:
        return f"{self.lhs} -> {' '.join(self.rhs)}"


@dataclass(frozen=True)
class ParseNode:
    """
    A node in a parse tree.

    Leaves carry the consumed word (and the lexicon entry that licensed it)
    and have no children. Internal nodes have children and no word.
    Spans are [start, end) token offsets.
    """
    symbol: str
    children: tuple["ParseNode", ...] = ()
    word: str | None = None
    span: tuple[int, int] = (0, 0)
    entry: LexiconEntry | None = field(default=None, compare=False)

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def leaves(self) -> list["ParseNode"]:
        if self.is_leaf:
            return [self] if self.word is not None else []
        result = []
        for child in self.children:
            result.extend(child.leaves())
        return result

    def walk(self):
        """Yield this node and every descendant, depth-first."""
        yield self
        for child in self.children:
            yield from child.walk()

    def to_dict(self) -> dict:
        d = {
            "symbol": self.symbol,
            "span": list(self.span),
            "children": [c.to_dict() for c in self.children],
        }
        if self.word is not None:
            d["word"] = self.word
            d["entry"] = self.entry.to_dict() if self.entry else None
        return d


@dataclass(frozen=True)
class ParseTree:
    root: ParseNode
    sentence: tuple[str, ...]
    weight: float | None = None

    def to_dict(self) -> dict:
        return {
            "root": self.root.to_dict(),
            "sentence": list(self.sentence),
            "weight": self.weight,
            "bracketed": format_tree(self.root),
        }


@dataclass
class ParseResult:
    input: tuple[str, ...]
    trees: list[ParseTree] = field(default_factory=list)
    errors: list[str] | None = None

    @property
    def ok(self) -> bool:
        return bool(self.trees)

    def to_dict(self) -> dict:
        return {
            "input": list(self.input),
            "trees": [t.to_dict() for t in self.trees],
            "errors": self.errors,
            "count": len(self.trees),
        }


def leaf_key(symbol: str, word: str) -> str:
    return f'({symbol} "{word}")'


def branch_key(symbol: str, child_keys: str) -> str:
    return f"({symbol} {child_keys})"


def serialize_tree(node: ParseNode) -> str:
    """
    Canonical structural form of a tree, used to detect duplicates.

    Two derivations that differ only in rule-application order serialize
    identically. Spans and lexicon entries are not part of the form.
    """
    if node.is_leaf:
        return leaf_key(node.symbol, node.word or "")
    return branch_key(node.symbol, " ".join(serialize_tree(c) for c in node.children))


def format_tree(node: ParseNode) -> str:
    """Bracketed form for display: [S [NP [DET the] [N dog]] [VP [V ran]]]"""
    if node.is_leaf:
        return f"[{node.symbol} {node.word}]"
    return f"[{node.symbol} " + " ".join(format_tree(c) for c in node.children) + "]"


def format_tree_indented(node: ParseNode, indent: int = 0) -> str:
    pad = "  " * indent
    if node.is_leaf:
        return f"{pad}{node.symbol}: {node.word}"
    lines = [f"{pad}{node.symbol} [{node.span[0]}:{node.span[1]}]"]
    for child in node.children:
        lines.append(format_tree_indented(child, indent + 1))
    return "\n".join(lines)
