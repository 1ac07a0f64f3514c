"""
NoteKeeper Backend - Root Route
=================================

What:  GET / answers with a static HTML greeting.
"""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter(tags=["Root"])

GREETING = "<h1>Hello World!</h1>"


@router.get("/", response_class=HTMLResponse, summary="Greeting page")
@router.head("/", include_in_schema=False)
async def index() -> HTMLResponse:
    return HTMLResponse(content=GREETING)
