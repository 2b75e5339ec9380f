"""
Buffalo API Server.

    uvicorn buffalo.server.main:app --port 8000
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.routing import APIRoute

from buffalo.server.routes import grammars, lexicons, parse


TITLE = "Buffalo API"
VERSION = "0.1.0"


def route_table(app: FastAPI) -> list[str]:
    """One line per API route, sorted by path: "POST  /api/parse  → parse"."""
    routes = sorted(
        (route.path, ", ".join(sorted(route.methods - {"HEAD", "OPTIONS"})), route.name)
        for route in app.routes
        if isinstance(route, APIRoute)
    )
    return [f"  {methods:8} {path:40} → {name}" for path, methods, name in routes]


@asynccontextmanager
async def lifespan(app: FastAPI):
    print(f"\n{TITLE} {VERSION}")
    print("\n".join(route_table(app)) + "\n")
    yield


app = FastAPI(title=TITLE, version=VERSION, lifespan=lifespan)

# CORS for the local visualizer dev server
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://localhost:5173"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(parse.router)
app.include_router(grammars.router)
app.include_router(lexicons.router)


@app.get("/")
async def root():
    return {"name": TITLE, "version": VERSION}
