# Services package init
"""
NoteKeeper Backend - Services Layer
=====================================

What:  Business logic between the routes (HTTP) and the data (Note entities).

Service Inventory:
    - NoteStore: in-memory note collection with id generation and
      create-time validation

Routes never touch the note collection directly; they go through the
NoteStore owned by the application, which keeps the store testable
without HTTP.
"""
