"""
Shared dependencies for routes.
"""

import os

import redis

from buffalo.core.english import BUILTIN_GRAMMARS, BUILTIN_LEXICONS
from buffalo.core.grammar import Grammar
from buffalo.core.lexicon import Lexicon
from buffalo.core.store import GrammarStore, LexiconStore


REDIS_HOST = os.environ.get("BUFFALO_REDIS_HOST", "localhost")
REDIS_PORT = int(os.environ.get("BUFFALO_REDIS_PORT", "6379"))


def get_redis(db: int = 0):
    return redis.Redis(host=REDIS_HOST, port=REDIS_PORT, db=db)


def get_grammar_store(db: int = 0) -> GrammarStore:
    return GrammarStore(get_redis(db))


def get_lexicon_store(db: int = 0) -> LexiconStore:
    return LexiconStore(get_redis(db))


def resolve_grammar(name: str, db: int = 0) -> Grammar | None:
    """Built-in grammar by name, else a stored one by id or name."""
    if name in BUILTIN_GRAMMARS:
        return BUILTIN_GRAMMARS[name]()
    return get_grammar_store(db).load(name)


def resolve_lexicon(name: str, db: int = 0) -> Lexicon | None:
    if name in BUILTIN_LEXICONS:
        return BUILTIN_LEXICONS[name]()
    return get_lexicon_store(db).load(name)
