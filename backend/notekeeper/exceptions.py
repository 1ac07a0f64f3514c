"""
NoteKeeper Backend - Custom Exception Hierarchy
=================================================

What:  Application-specific exceptions for the two expected failure modes.
How:   Each exception carries a message and an optional context dict.
       Global exception handlers (registered in main.py) turn them into
       HTTP responses, so route handlers never build error responses by hand.
Who:   Raised by NoteStore and the JSON body middleware; caught by handlers.

Exception Hierarchy:
    NoteKeeperError (base)
    ├── ValidationError   → 400 {"error": message}
    └── NotFoundError     → 404 with an empty body

Note the asymmetry: a missing note is a bare 404, while an unknown
endpoint (handled in main.py, not here) is a 404 with an error body.
"""

from typing import Any, Dict, Optional


class NoteKeeperError(Exception):
    """
    Base exception for all NoteKeeper application errors.

    Attributes:
        message:  Client-facing error description (returned in the API response)
        context:  Additional debug info (logged, never returned to the client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(NoteKeeperError):
    """
    Raised when client input fails validation.

    When:    Missing/empty `content` on create, a wrongly typed body field,
             or a request body that is not valid JSON.
    HTTP:    400 Bad Request

    Example response:
        {"error": "content missing"}
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(NoteKeeperError):
    """
    Raised when a requested note does not exist.

    When:    GET /api/notes/{id} with an id that matches no stored note
             (including ids that did not parse as a number).
    HTTP:    404 Not Found, empty body
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id is not None:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
