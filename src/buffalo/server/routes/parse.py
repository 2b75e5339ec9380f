"""
Parse routes: /api/parse
"""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from buffalo.core.earley import EarleyParser
from buffalo.core.english import BUILTIN_GRAMMARS, BUILTIN_LEXICONS
from buffalo.core.forest import MAX_TREES
from buffalo.core.tokenize import words
from buffalo.server.deps import resolve_grammar, resolve_lexicon


router = APIRouter(prefix="/api", tags=["parse"])


class ParseRequest(BaseModel):
    tokens: list[str] | None = None
    text: str | None = None
    grammar: str = "english"
    lexicon: str = "english"
    max_trees: int = Field(default=MAX_TREES, ge=1, le=MAX_TREES)


@router.post("/parse")
async def parse(req: ParseRequest, db: int = 0):
    """Parse tokens (or text, tokenized here) and return every distinct tree."""
    if req.tokens is not None:
        tokens = req.tokens
    elif req.text is not None:
        tokens = words(req.text)
    else:
        raise HTTPException(status_code=400, detail="Provide tokens or text")

    grammar = resolve_grammar(req.grammar, db)
    if grammar is None:
        raise HTTPException(status_code=404, detail=f"Grammar not found: {req.grammar}")

    lexicon = resolve_lexicon(req.lexicon, db)
    if lexicon is None:
        raise HTTPException(status_code=404, detail=f"Lexicon not found: {req.lexicon}")

    parser = EarleyParser(grammar, lexicon, max_trees=req.max_trees)
    result = parser.parse(tokens)
    return result.to_dict()


@router.get("/builtins")
async def list_builtins():
    """Names of the built-in grammars and lexicons."""
    return {
        "grammars": list(BUILTIN_GRAMMARS),
        "lexicons": list(BUILTIN_LEXICONS),
    }
