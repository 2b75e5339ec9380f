# src/buffalo/core/english.py
"""
Built-in English grammar and lexicons.

The grammar is deliberately permissive: reduced relative clauses
(RC -> NP VP, "buffalo [that] Buffalo buffalo buffalo") are what make
"Buffalo buffalo Buffalo buffalo buffalo buffalo Buffalo buffalo" parse.
"""

from buffalo.core.grammar import Grammar
from buffalo.core.lexicon import Lexicon


# (lhs, rhs, weight)
ENGLISH_RULES = [
    # Sentences
    ("S", ["NP", "VP"], 1.0),
    ("S", ["VP"], 0.8),              # imperative: "Buffalo!" = "Intimidate!"
    ("S", ["NP"], 0.5),              # exclamatory / nominal
    ("S", ["S", "CONJ", "S"], 0.7),

    # Noun phrases
    ("NP", ["N"], 0.6),
    ("NP", ["DET", "N"], 0.9),
    ("NP", ["DET", "ADJ", "N"], 0.8),
    ("NP", ["ADJ", "N"], 0.5),
    ("NP", ["NP", "PP"], 0.6),
    ("NP", ["NP", "RC"], 0.7),
    ("NP", ["PN"], 0.8),
    ("NP", ["PN", "N"], 0.85),       # "Buffalo buffalo": bison from Buffalo
    ("NP", ["NP", "CONJ", "NP"], 0.6),

    # Verb phrases
    ("VP", ["V"], 0.7),
    ("VP", ["V", "NP"], 0.9),
    ("VP", ["V", "NP", "PP"], 0.6),
    ("VP", ["V", "PP"], 0.5),
    ("VP", ["V", "ADV"], 0.6),
    ("VP", ["ADV", "V"], 0.5),
    ("VP", ["V", "NP", "ADV"], 0.5),
    ("VP", ["ADV", "V", "NP"], 0.5),
    ("VP", ["VP", "CONJ", "VP"], 0.6),

    # Adverb phrases
    ("ADVP", ["ADV"], 0.8),
    ("ADVP", ["ADV", "ADV"], 0.4),

    # Prepositional phrases
    ("PP", ["PREP", "NP"], 1.0),

    # Relative clauses
    ("RC", ["REL", "S"], 0.8),       # "who the dog bit"
    ("RC", ["REL", "VP"], 0.7),      # "who ran"
    ("RC", ["NP", "VP"], 0.6),       # reduced: the "that" is omitted
    ("RC", ["S"], 0.4),
]


# (word, pos, features, lemma)
TEST_WORDS = [
    ("the", "DET", None, None),
    ("a", "DET", None, None),
    ("an", "DET", None, None),

    ("dog", "N", {"number": "singular"}, None),
    ("dogs", "N", {"number": "plural"}, "dog"),
    ("cat", "N", {"number": "singular"}, None),
    ("cats", "N", {"number": "plural"}, "cat"),
    ("man", "N", {"number": "singular"}, None),
    ("men", "N", {"number": "plural"}, "man"),
    ("woman", "N", {"number": "singular"}, None),
    ("women", "N", {"number": "plural"}, "woman"),
    ("bird", "N", {"number": "singular"}, None),
    ("birds", "N", {"number": "plural"}, "bird"),
    ("fish", "N", {"number": "singular"}, None),
    ("fish", "N", {"number": "plural"}, None),

    ("chased", "V", {"tense": "past"}, "chase"),
    ("chase", "V", {"tense": "present"}, None),
    ("chases", "V", {"tense": "present", "number": "singular", "person": 3}, "chase"),
    ("bit", "V", {"tense": "past"}, "bite"),
    ("bite", "V", {"tense": "present"}, None),
    ("bites", "V", {"tense": "present", "number": "singular", "person": 3}, "bite"),
    ("ran", "V", {"tense": "past"}, "run"),
    ("run", "V", {"tense": "present"}, None),
    ("runs", "V", {"tense": "present", "number": "singular", "person": 3}, "run"),
    ("saw", "V", {"tense": "past"}, "see"),
    ("see", "V", {"tense": "present"}, None),
    ("sees", "V", {"tense": "present", "number": "singular", "person": 3}, "see"),
    ("ate", "V", {"tense": "past"}, "eat"),
    ("eat", "V", {"tense": "present"}, None),
    ("eats", "V", {"tense": "present", "number": "singular", "person": 3}, "eat"),

    ("big", "ADJ", None, None),
    ("small", "ADJ", None, None),
    ("fast", "ADJ", None, None),
    ("slow", "ADJ", None, None),

    ("quickly", "ADV", None, None),
    ("slowly", "ADV", None, None),
    ("away", "ADV", None, None),

    ("in", "PREP", None, None),
    ("on", "PREP", None, None),
    ("with", "PREP", None, None),
    ("to", "PREP", None, None),
    ("from", "PREP", None, None),

    ("who", "REL", None, None),
    ("whom", "REL", None, None),
    ("that", "REL", None, None),
    ("which", "REL", None, None),

    ("and", "CONJ", None, None),
    ("or", "CONJ", None, None),
]


BUFFALO_WORDS = [
    ("Buffalo", "PN", None, "buffalo"),  # the city in New York
    ("buffalo", "N", {"number": "plural"}, None),
    ("buffalo", "N", {"number": "singular"}, None),
    ("buffalo", "V", {"tense": "present", "number": "plural"}, None),  # to intimidate
    ("buffalo", "V", {"tense": "present", "number": "singular", "person": 1}, None),
    ("buffalo", "V", {"tense": "present", "number": "singular", "person": 2}, None),
    ("buffalo", "ADV", None, None),
]


def create_english_grammar() -> Grammar:
    g = Grammar()
    for lhs, rhs, weight in ENGLISH_RULES:
        g.add_rule(lhs, rhs, weight)
    return g


def _build_lexicon(words: list[tuple]) -> Lexicon:
    lex = Lexicon()
    for word, pos, features, lemma in words:
        lex.add_word(word, pos, features, lemma)
    return lex


def create_test_lexicon() -> Lexicon:
    """Common English words for parser testing. Does not know "buffalo"."""
    return _build_lexicon(TEST_WORDS)


def create_buffalo_lexicon() -> Lexicon:
    return _build_lexicon(BUFFALO_WORDS)


BUILTIN_GRAMMARS = {
    "english": create_english_grammar,
}

BUILTIN_LEXICONS = {
    "english": create_test_lexicon,
    "buffalo": create_buffalo_lexicon,
}
