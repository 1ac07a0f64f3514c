"""
NoteKeeper Backend - Application Package Initializer
=====================================================

What: Marks the `notekeeper` directory as a Python package.
Who:  Used by uvicorn (`notekeeper.main:app`), pytest and `python -m notekeeper`.

Architecture Note:
    ┌─────────────────────────────────────┐
    │   Middleware (CORS, IDs, logging)   │  ← cross-cutting, every request
    ├─────────────────────────────────────┤
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │        Services (NoteStore)         │  ← id generation, validation
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← Note entity + Pydantic wire models
    └─────────────────────────────────────┘

    There is no persistence layer: the store lives in process memory for
    the lifetime of the application instance that owns it.
"""

__version__ = "1.0.0"
