"""
Grammar routes: /api/grammars
"""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from buffalo.core.grammar_lang import parse_grammar, validate_grammar
from buffalo.server.deps import get_grammar_store


router = APIRouter(prefix="/api/grammars", tags=["grammars"])


class CreateGrammarRequest(BaseModel):
    name: str
    dsl: str


@router.get("")
async def list_grammars(db: int = 0):
    """List stored grammars."""
    store = get_grammar_store(db)
    return {
        "grammars": [
            {"id": g.id, "name": g.name, "created_at": g.created_at, "rule_count": g.size}
            for g in store.list_all()
        ]
    }


@router.post("")
async def create_grammar(req: CreateGrammarRequest, db: int = 0):
    """Store a grammar from DSL text."""
    store = get_grammar_store(db)
    try:
        grammar = store.parse(req.dsl)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    grammar_id = store.save(req.name, req.dsl, grammar)
    return {
        "id": grammar_id,
        "name": req.name,
        "rule_count": len(grammar),
        "warnings": validate_grammar(grammar),
    }


@router.get("/{grammar_id}")
async def get_grammar(grammar_id: str, db: int = 0):
    store = get_grammar_store(db)
    source = store.get(grammar_id)
    if not source:
        raise HTTPException(status_code=404, detail="Grammar not found")

    grammar = parse_grammar(source.dsl)
    return {
        "id": source.id,
        "name": source.name,
        "created_at": source.created_at,
        "rules": [
            {"lhs": r.lhs, "rhs": list(r.rhs), "weight": r.weight}
            for r in grammar.all_rules()
        ],
    }


@router.get("/{grammar_id}/dsl")
async def get_grammar_dsl(grammar_id: str, db: int = 0):
    store = get_grammar_store(db)
    source = store.get(grammar_id)
    if not source:
        raise HTTPException(status_code=404, detail="Grammar not found")
    return {"id": source.id, "name": source.name, "dsl": source.dsl}


@router.delete("/{grammar_id}")
async def delete_grammar(grammar_id: str, db: int = 0):
    store = get_grammar_store(db)
    if not store.delete(grammar_id):
        raise HTTPException(status_code=404, detail="Grammar not found")
    return {"deleted": grammar_id}
