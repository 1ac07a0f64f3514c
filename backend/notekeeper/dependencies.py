"""
NoteKeeper Backend - Request Dependencies
==========================================

What:  FastAPI dependencies shared by the route modules.
How:   The NoteStore is created by create_app() and kept on app.state;
       handlers receive it through Depends(get_store), never by importing a
       global. Tests build a fresh app (and store) per test case.
"""

from typing import Any

from fastapi import Request

from notekeeper.services.note_store import NoteStore


def get_store(request: Request) -> NoteStore:
    """
    Return the NoteStore owned by the application serving this request.

    Example usage in a route:
        @router.get("/notes")
        async def list_notes(store: NoteStore = Depends(get_store)):
            return store.list()
    """
    return request.app.state.store


def get_json_body(request: Request) -> Any:
    """Parsed JSON body left on request.state by JSONBodyMiddleware ({} when absent)."""
    return getattr(request.state, "body", {})
