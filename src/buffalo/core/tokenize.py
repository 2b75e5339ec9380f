# src/buffalo/core/tokenize.py
"""
Tokenization: raw text → tokens the parser can consume.

"Buffalo buffalo, Buffalo buffalo!" → Buffalo / buffalo / , / Buffalo / buffalo / !

Punctuation is kept as tokens (with positions) but words() drops it,
since the lexicons only know words.
"""

import re
from dataclasses import dataclass


@dataclass
class Token:
    text: str
    position: int  # character offset in original

    @property
    def is_word(self) -> bool:
        return bool(re.match(r"\w", self.text))


def tokenize(text: str) -> list[Token]:
    """Split text into tokens, tracking positions."""
    tokens = []
    for match in re.finditer(r"\w+(?:'\w+)?|[^\w\s]", text):
        tokens.append(Token(text=match.group(), position=match.start()))
    return tokens


def words(text: str) -> list[str]:
    """Word tokens only, in order, case preserved."""
    return [t.text for t in tokenize(text) if t.is_word]
