"""
NoteKeeper Backend - Note Domain Model
========================================

What:  The Note entity held by NoteStore.
Why:   Keeps the stored shape separate from the wire shape (schemas/note.py),
       so serialization details such as the date format never leak into the
       store logic.
How:   A frozen dataclass. Notes are never updated in place: a note is
       created once and later removed as a whole.

Field ownership:
    - id:        server-assigned (max existing id + 1), never client-supplied
    - content:   client-supplied, required and non-empty
    - important: client-supplied, defaults to False
    - date:      server-assigned creation time, timezone-aware UTC
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Note:
    id: int
    content: str
    date: datetime
    important: bool = False
