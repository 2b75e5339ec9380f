"""
Lexicon routes: /api/lexicons
"""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from buffalo.core.lexicon_lang import parse_lexicon
from buffalo.server.deps import get_lexicon_store


router = APIRouter(prefix="/api/lexicons", tags=["lexicons"])


class CreateLexiconRequest(BaseModel):
    name: str
    dsl: str


@router.get("")
async def list_lexicons(db: int = 0):
    """List stored lexicons."""
    store = get_lexicon_store(db)
    return {
        "lexicons": [
            {"id": lx.id, "name": lx.name, "created_at": lx.created_at, "entry_count": lx.size}
            for lx in store.list_all()
        ]
    }


@router.post("")
async def create_lexicon(req: CreateLexiconRequest, db: int = 0):
    """Store a lexicon from DSL text."""
    store = get_lexicon_store(db)
    try:
        lexicon_id = store.create(req.name, req.dsl)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    source = store.get(lexicon_id)
    return {"id": source.id, "name": source.name, "entry_count": source.size}


@router.get("/{lexicon_id}")
async def get_lexicon(lexicon_id: str, db: int = 0):
    store = get_lexicon_store(db)
    source = store.get(lexicon_id)
    if not source:
        raise HTTPException(status_code=404, detail="Lexicon not found")

    lexicon = parse_lexicon(source.dsl)
    return {
        "id": source.id,
        "name": source.name,
        "created_at": source.created_at,
        "entries": [e.to_dict() for e in lexicon.entries()],
    }


@router.get("/{lexicon_id}/dsl")
async def get_lexicon_dsl(lexicon_id: str, db: int = 0):
    store = get_lexicon_store(db)
    source = store.get(lexicon_id)
    if not source:
        raise HTTPException(status_code=404, detail="Lexicon not found")
    return {"id": source.id, "name": source.name, "dsl": source.dsl}


@router.delete("/{lexicon_id}")
async def delete_lexicon(lexicon_id: str, db: int = 0):
    store = get_lexicon_store(db)
    if not store.delete(lexicon_id):
        raise HTTPException(status_code=404, detail="Lexicon not found")
    return {"deleted": lexicon_id}
