# Routes package init
"""
NoteKeeper Backend - API Routes Package
=========================================

Route Inventory:
    - root.py:    GET    /                   (HTML greeting)
    - notes.py:   GET    /api/notes          (list notes)
                  GET    /api/notes/{id}     (single note, 404 empty body if absent)
                  POST   /api/notes          (create note)
                  DELETE /api/notes/{id}     (delete note, always 204)
    - health.py:  GET    /health             (liveness check)

Every GET route also answers HEAD, and a single trailing slash is optional
(see middleware/trailing_slash.py). Anything else falls through to the
unknown-endpoint handler in main.py.

Routes stay THIN: extract input, call NoteStore, return a schema.
"""
