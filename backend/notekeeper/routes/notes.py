"""
NoteKeeper Backend - Notes Route Handlers
===========================================

What:  The /api/notes resource: list, fetch one, create, delete.
How:   Each handler pulls the NoteStore in through Depends(get_store),
       calls one store operation and returns the result. Errors are raised
       as exceptions and turned into responses by the handlers in main.py.

Path ids:
    `{note_id}` is taken as a raw string and converted with parse_note_id().
    Text that is not an integral number (e.g. "abc") does not produce a
    400/422: it becomes None, which matches no note, so GET answers 404 and
    DELETE answers 204 like for any other absent id.
"""

import logging
import math
import re
from typing import Any, List, Optional

from fastapi import APIRouter, Depends, Response
from pydantic import ValidationError as PydanticValidationError

from notekeeper.dependencies import get_json_body, get_store
from notekeeper.exceptions import ValidationError
from notekeeper.schemas.note import ErrorResponse, NoteCreate, NoteResponse
from notekeeper.services.note_store import NoteStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Notes"])


_PREFIXED_INTEGER = re.compile(r"0[xX][0-9a-fA-F]+|0[bB][01]+|0[oO][0-7]+")


def parse_note_id(raw: str) -> Optional[int]:
    """
    Convert a path segment to a note id the way JavaScript's Number() would.

    Surrounding whitespace is ignored. Integral values in any decimal
    spelling are accepted ("2", "2.0", "2e0" → 2), and so are unsigned
    hex, binary and octal literals ("0x1" → 1, "0b1" → 1, "0o7" → 7).
    Everything else returns None: words, fractions, NaN and the infinities.
    """
    text = raw.strip()
    if not text or "_" in text:
        return None
    if _PREFIXED_INTEGER.fullmatch(text):
        return int(text, 0)
    try:
        value = float(text)
    except ValueError:
        return None
    if math.isnan(value) or math.isinf(value) or not value.is_integer():
        return None
    return int(value)


@router.get(
    "/notes",
    response_model=List[NoteResponse],
    summary="List all notes",
)
@router.head("/notes", include_in_schema=False)
async def list_notes(store: NoteStore = Depends(get_store)) -> List[NoteResponse]:
    """Every note in the store, in insertion order."""
    return [NoteResponse.model_validate(note) for note in store.list()]


@router.get(
    "/notes/{note_id}",
    response_model=NoteResponse,
    responses={
        200: {"description": "The note", "model": NoteResponse},
        404: {"description": "No note with this id (empty body)"},
    },
    summary="Get a single note by id",
)
@router.head("/notes/{note_id}", include_in_schema=False)
async def get_note(note_id: str, store: NoteStore = Depends(get_store)) -> NoteResponse:
    note = store.find_by_id(parse_note_id(note_id))
    return NoteResponse.model_validate(note)


@router.post(
    "/notes",
    response_model=NoteResponse,
    responses={
        200: {"description": "The created note", "model": NoteResponse},
        400: {"description": "content missing", "model": ErrorResponse},
    },
    summary="Create a note",
)
async def create_note(
    body: Any = Depends(get_json_body),
    store: NoteStore = Depends(get_store),
) -> NoteResponse:
    """
    Create a note from `{"content": str, "important"?: bool}`.

    The server assigns `id` and `date`; any client-supplied values for them
    are ignored. A body that is not a JSON object counts as empty, so it
    fails with "content missing" like a body without `content`.

    Returns 200 (not 201) with the created note.
    """
    if not isinstance(body, dict):
        body = {}

    try:
        payload = NoteCreate.model_validate(body)
    except PydanticValidationError as e:
        field = str(e.errors()[0]["loc"][0])
        raise ValidationError(message=f"{field} is invalid", field=field)

    note = store.create(payload.content, payload.important)
    return NoteResponse.model_validate(note)


@router.delete(
    "/notes/{note_id}",
    status_code=204,
    response_class=Response,
    responses={204: {"description": "Deleted, or there was nothing to delete"}},
    summary="Delete a note by id",
)
async def delete_note(note_id: str, store: NoteStore = Depends(get_store)) -> Response:
    """Always 204: deleting an absent note is a no-op."""
    store.remove(parse_note_id(note_id))
    return Response(status_code=204)
