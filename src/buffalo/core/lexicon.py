# src/buffalo/core/lexicon.py
"""
Lexicon mapping words to their parts of speech.

A word can have any number of readings:
"buffalo" → N (the animal), V (to intimidate), PN (the city), ...

Lookup is case-insensitive. Nothing is inferred from morphology; the
lexicon is a static table filled in before parsing.
"""

from collections.abc import Iterator

from buffalo.core.types import LexiconEntry


class Lexicon:
    def __init__(self):
        self._entries: dict[str, list[LexiconEntry]] = {}

    def add_word(
        self,
        word: str,
        pos: str,
        features: dict | None = None,
        lemma: str | None = None,
    ) -> "Lexicon":
        """Add a reading for a word. Existing readings are kept."""
        entry = LexiconEntry(
            word=word,
            pos=pos,
            lemma=lemma or word.lower(),
            features=dict(features) if features else None,
        )
        self._entries.setdefault(word.lower(), []).append(entry)
        return self

    def lookup(self, word: str) -> list[LexiconEntry]:
        """All readings for a word, in insertion order. Empty if unknown."""
        return list(self._entries.get(word.lower(), []))

    def has(self, word: str) -> bool:
        return word.lower() in self._entries

    def words(self) -> list[str]:
        return list(self._entries.keys())

    def entries(self) -> Iterator[LexiconEntry]:
        for readings in self._entries.values():
            yield from readings

    @property
    def size(self) -> int:
        return sum(len(readings) for readings in self._entries.values())

    def __len__(self) -> int:
        return self.size

    def __contains__(self, word: str) -> bool:
        return self.has(word)
