"""
NoteKeeper Backend - In-Memory Note Store
==========================================

What:  Holds the current collection of notes and the operations over it.
Why:   The store is an explicitly owned object rather than a module-level
       list: each application instance (and each test) gets its own.
How:   The collection is an immutable tuple. Every mutation builds a new
       tuple and swaps the reference in a single assignment.
Who:   Owned by the FastAPI app (app.state.store); reached by route handlers
       through the get_store dependency.

Concurrency:
    Handlers run on one asyncio event loop and no mutation awaits between
    reading the current tuple and assigning the new one, so two requests
    can never observe a half-applied change. Nothing here is safe to call
    from several threads at once.

Id generation:
    max(existing ids) + 1, or 1 for an empty store. This is NOT a counter:
    deleting the highest note makes its id available again.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, Iterable, List, Optional, Tuple

from notekeeper.exceptions import NotFoundError, ValidationError
from notekeeper.models.note import Note

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def seed_notes() -> List[Note]:
    """The three fixture notes loaded at start-up."""
    return [
        Note(
            id=1,
            content="HTML is easy",
            date=datetime(2022, 5, 30, 17, 30, 31, 98000, tzinfo=timezone.utc),
            important=True,
        ),
        Note(
            id=2,
            content="Browser can execute only Javascript",
            date=datetime(2022, 5, 30, 18, 39, 34, 91000, tzinfo=timezone.utc),
            important=False,
        ),
        Note(
            id=3,
            content="GET and POST are the most important methods of HTTP protocol",
            date=datetime(2022, 5, 30, 19, 20, 14, 298000, tzinfo=timezone.utc),
            important=True,
        ),
    ]


class NoteStore:
    """
    Ordered, in-memory collection of notes.

    Responsibilities:
        - list():          all notes in insertion order
        - find_by_id():    single note or NotFoundError
        - remove():        drop a note by id (idempotent)
        - create():        validate, assign id/date, append
        - generated_id():  next id for create()

    Args:
        notes: Initial notes (e.g. seed_notes()); copied into the store.
        clock: Returns the creation timestamp for new notes.
               Injected by tests to get deterministic dates.
    """

    def __init__(
        self,
        notes: Optional[Iterable[Note]] = None,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self._notes: Tuple[Note, ...] = tuple(notes or ())
        self._clock = clock

    def __len__(self) -> int:
        return len(self._notes)

    def list(self) -> List[Note]:
        """Return every note in insertion order. The list is a copy."""
        return list(self._notes)

    def find_by_id(self, note_id: Optional[int]) -> Note:
        """
        Linear scan for the note with `note_id`.

        `None` stands for an id that could not be parsed; it never matches.

        Raises:
            NotFoundError: no note has that id
        """
        for note in self._notes:
            if note.id == note_id:
                return note
        raise NotFoundError(resource="note", resource_id=note_id)

    def remove(self, note_id: Optional[int]) -> None:
        """Replace the collection with every note whose id differs. No-op when absent."""
        remaining = tuple(note for note in self._notes if note.id != note_id)
        if len(remaining) != len(self._notes):
            logger.info("Removed note %s (%d remaining)", note_id, len(remaining))
        self._notes = remaining

    def generated_id(self) -> int:
        """1 for an empty store, otherwise 1 + the highest id present."""
        if not self._notes:
            return 1
        return max(note.id for note in self._notes) + 1

    def create(self, content: Optional[str], important: Optional[bool] = None) -> Note:
        """
        Create a note and append it to the store.

        What:    Validates content, assigns id and date, appends.
        How:     The new tuple (old notes + new note) replaces the old one
                 in one assignment.

        Args:
            content:   Note text; must be present and non-empty.
            important: Flag; None means "omitted" and becomes False.

        Returns:
            The created Note.

        Raises:
            ValidationError: content is missing or empty
        """
        if not content:
            raise ValidationError(message="content missing", field="content")

        note = Note(
            id=self.generated_id(),
            content=content,
            date=self._clock(),
            important=important if important is not None else False,
        )
        self._notes = self._notes + (note,)
        logger.info("Created note %d (important=%s)", note.id, note.important)
        return note
