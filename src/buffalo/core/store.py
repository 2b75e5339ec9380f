# src/buffalo/core/store.py
"""
Named grammars and lexicons, stored as DSL text in Redis.

Sources are validated on the way in and parsed again on load; the parser
itself only ever sees in-memory Grammar / Lexicon objects.
"""

import json
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone

import redis

from buffalo.core.grammar import Grammar
from buffalo.core.grammar_lang import parse_grammar
from buffalo.core.lexicon import Lexicon
from buffalo.core.lexicon_lang import parse_lexicon


def generate_id() -> str:
    return uuid.uuid4().hex[:12]


@dataclass
class StoredSource:
    id: str
    name: str
    kind: str
    dsl: str
    created_at: str
    size: int  # rules or entries

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "kind": self.kind,
            "dsl": self.dsl,
            "created_at": self.created_at,
            "size": self.size,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "StoredSource":
        return cls(**data)


class _SourceStore:
    kind = ""

    def __init__(self, client: redis.Redis, prefix: str = "buffalo"):
        self.client = client
        self.prefix = prefix

    def _key(self, source_id: str) -> str:
        return f"{self.prefix}:{self.kind}:{source_id}"

    def _list_key(self) -> str:
        return f"{self.prefix}:{self.kind}s"

    def _parse(self, dsl: str):
        raise NotImplementedError

    def create(self, name: str, dsl: str) -> str:
        """Validate and store DSL text, returns the new id."""
        return self.save(name, dsl, self.parse(dsl))

    def parse(self, dsl: str):
        try:
            return self._parse(dsl)
        except Exception as e:
            raise ValueError(f"Failed to parse {self.kind}: {e}") from e

    def save(self, name: str, dsl: str, parsed) -> str:
        """Store DSL text already parsed into `parsed`, returns the new id."""
        source = StoredSource(
            id=generate_id(),
            name=name,
            kind=self.kind,
            dsl=dsl,
            created_at=datetime.now(timezone.utc).isoformat(),
            size=len(parsed),
        )
        self.client.set(self._key(source.id), json.dumps(source.to_dict()))
        self.client.rpush(self._list_key(), source.id)
        return source.id

    def get(self, source_id: str) -> StoredSource | None:
        data = self.client.get(self._key(source_id))
        if not data:
            return None
        return StoredSource.from_dict(json.loads(data))

    def find(self, id_or_name: str) -> StoredSource | None:
        """Look up by id, falling back to the most recent source with that name."""
        source = self.get(id_or_name)
        if source:
            return source
        for source in self.list_all():
            if source.name == id_or_name:
                return source
        return None

    def list_all(self) -> list[StoredSource]:
        ids = self.client.lrange(self._list_key(), 0, -1)
        sources = []
        for sid in ids:
            source = self.get(sid.decode())
            if source:
                sources.append(source)
        return sorted(sources, key=lambda s: s.created_at, reverse=True)

    def delete(self, source_id: str) -> bool:
        if not self.client.exists(self._key(source_id)):
            return False
        self.client.delete(self._key(source_id))
        self.client.lrem(self._list_key(), 0, source_id)
        return True

    def clear(self) -> None:
        """Remove everything under this store's prefix. Useful for tests."""
        for key in self.client.scan_iter(f"{self.prefix}:{self.kind}*"):
            self.client.delete(key)


class GrammarStore(_SourceStore):
    kind = "grammar"

    def _parse(self, dsl: str) -> Grammar:
        return parse_grammar(dsl)

    def load(self, id_or_name: str) -> Grammar | None:
        source = self.find(id_or_name)
        if source is None:
            return None
        return parse_grammar(source.dsl)


class LexiconStore(_SourceStore):
    kind = "lexicon"

    def _parse(self, dsl: str) -> Lexicon:
        return parse_lexicon(dsl)

    def load(self, id_or_name: str) -> Lexicon | None:
        source = self.find(id_or_name)
        if source is None:
            return None
        return parse_lexicon(source.dsl)
