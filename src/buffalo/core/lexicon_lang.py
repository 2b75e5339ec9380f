# src/buffalo/core/lexicon_lang.py
"""
A simple DSL for lexicons.

Syntax:
  # comment
  the : DET
  chased : V tense=past lemma=chase
  buffalo : N number=plural

One reading per line. key=value pairs are grammatical features, except
lemma which sets the canonical form. Values are strings, except for the
keys in INT_FEATURES.
"""

import re

from buffalo.core.lexicon import Lexicon
from buffalo.core.types import LexiconEntry


# features whose values are numbers (person=3)
INT_FEATURES = frozenset({"person"})


class LexiconParseError(Exception):
    def __init__(self, message: str, line_num: int, line: str):
        self.line_num = line_num
        self.line = line
        super().__init__(f"Line {line_num}: {message}\n  {line}")


class LexiconParser:
    def __init__(self):
        self.lexicon = Lexicon()

    def parse(self, text: str) -> Lexicon:
        self.lexicon = Lexicon()

        lines = text.strip().split("\n")
        for i, line in enumerate(lines, 1):
            line = line.strip()

            if not line or line.startswith("#"):
                continue

            try:
                self.parse_line(line)
            except Exception as e:
                raise LexiconParseError(str(e), i, line)

        return self.lexicon

    def parse_line(self, line: str):
        match = re.match(r"(\S+)\s*:\s*(\w+)(.*)$", line)
        if not match:
            raise ValueError("Expected: word : POS [key=value ...]")

        word, pos, rest = match.groups()
        features = {}
        lemma = None

        for pair in rest.split():
            kv = re.fullmatch(r"(\w+)=(\S+)", pair)
            if not kv:
                raise ValueError(f"Expected key=value, got: {pair}")
            key, value = kv.groups()
            if key == "lemma":
                lemma = value
            else:
                features[key] = int(value) if key in INT_FEATURES and value.isdigit() else value

        self.lexicon.add_word(word, pos, features or None, lemma)


def parse_lexicon(text: str) -> Lexicon:
    parser = LexiconParser()
    return parser.parse(text)


def format_entry(entry: LexiconEntry) -> str:
    parts = [f"{entry.word} : {entry.pos}"]
    for key, value in (entry.features or {}).items():
        parts.append(f"{key}={value}")
    if entry.lemma != entry.word.lower():
        parts.append(f"lemma={entry.lemma}")
    return " ".join(parts)


def format_lexicon(lexicon: Lexicon) -> str:
    return "\n".join(format_entry(e) for e in lexicon.entries())
