"""
HTTP client for the Buffalo API.
"""

import os

import httpx

BASE_URL = os.environ.get("BUFFALO_API_URL", "http://localhost:8000/api")


# === Parse ===

def parse(tokens: list[str], grammar: str = "english", lexicon: str = "english",
          max_trees: int | None = None) -> dict:
    payload = {"tokens": tokens, "grammar": grammar, "lexicon": lexicon}
    if max_trees is not None:
        payload["max_trees"] = max_trees
    r = httpx.post(f"{BASE_URL}/parse", json=payload, timeout=120)
    r.raise_for_status()
    return r.json()


def list_builtins() -> dict:
    r = httpx.get(f"{BASE_URL}/builtins")
    r.raise_for_status()
    return r.json()


# === Grammars ===

def create_grammar(name: str, dsl: str) -> dict:
    r = httpx.post(f"{BASE_URL}/grammars", json={"name": name, "dsl": dsl}, timeout=60)
    r.raise_for_status()
    return r.json()


def list_grammars() -> list[dict]:
    r = httpx.get(f"{BASE_URL}/grammars")
    r.raise_for_status()
    return r.json()["grammars"]


def get_grammar(grammar_id: str) -> dict:
    r = httpx.get(f"{BASE_URL}/grammars/{grammar_id}")
    r.raise_for_status()
    return r.json()


def get_grammar_dsl(grammar_id: str) -> dict:
    r = httpx.get(f"{BASE_URL}/grammars/{grammar_id}/dsl")
    r.raise_for_status()
    return r.json()


def delete_grammar(grammar_id: str) -> dict:
    r = httpx.delete(f"{BASE_URL}/grammars/{grammar_id}")
    r.raise_for_status()
    return r.json()


# === Lexicons ===

def create_lexicon(name: str, dsl: str) -> dict:
    r = httpx.post(f"{BASE_URL}/lexicons", json={"name": name, "dsl": dsl}, timeout=60)
    r.raise_for_status()
    return r.json()


def list_lexicons() -> list[dict]:
    r = httpx.get(f"{BASE_URL}/lexicons")
    r.raise_for_status()
    return r.json()["lexicons"]


def get_lexicon(lexicon_id: str) -> dict:
    r = httpx.get(f"{BASE_URL}/lexicons/{lexicon_id}")
    r.raise_for_status()
    return r.json()


def get_lexicon_dsl(lexicon_id: str) -> dict:
    r = httpx.get(f"{BASE_URL}/lexicons/{lexicon_id}/dsl")
    r.raise_for_status()
    return r.json()


def delete_lexicon(lexicon_id: str) -> dict:
    r = httpx.delete(f"{BASE_URL}/lexicons/{lexicon_id}")
    r.raise_for_status()
    return r.json()
