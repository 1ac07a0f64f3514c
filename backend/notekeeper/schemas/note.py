"""
NoteKeeper Backend - Pydantic Request/Response Schemas
=======================================================

What:  Pydantic models defining the API contract.
How:   Route handlers return these models; FastAPI serializes them and
       publishes them in the OpenAPI document.

Design Decision:
    Schemas are separate from the Note dataclass because the wire format
    has its own rules: `date` is rendered the way JavaScript's
    Date.toISOString() renders it (millisecond precision, `Z` suffix), and
    keys appear in the order id, content, date, important.
"""

import math
from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, Field, field_serializer, field_validator


def is_truthy(value: Any) -> bool:
    """
    JavaScript truthiness: only false, 0, NaN, "" and null are falsy.

    Unlike Python's bool(), empty lists and dicts count as True.
    """
    if value is None or value is False:
        return False
    if isinstance(value, (list, dict)):
        return True
    if isinstance(value, float) and math.isnan(value):
        return False
    return bool(value)


def format_timestamp(value: datetime) -> str:
    """
    Render a datetime as UTC ISO-8601 with milliseconds and a `Z` suffix.

    Naive datetimes are assumed to already be UTC.

    Example:
        datetime(2022, 5, 30, 17, 30, 31, 98000, tzinfo=timezone.utc)
        → "2022-05-30T17:30:31.098Z"
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


# ══════════════════════════════════════════════════════════════════════════
# Response Models - What the API returns to clients
# ══════════════════════════════════════════════════════════════════════════


class NoteResponse(BaseModel):
    """
    What:  Full representation of a note.
    Who:   Returned by GET /api/notes (as array items), GET /api/notes/{id}
           and POST /api/notes.
    """
    id: int = Field(description="Server-assigned note identifier")
    content: str = Field(description="Note text")
    date: datetime = Field(description="Creation time (UTC, ISO 8601 with milliseconds)")
    important: bool = Field(description="Whether the note is flagged as important")

    model_config = {"from_attributes": True}

    @field_serializer("date")
    def serialize_date(self, value: datetime) -> str:
        return format_timestamp(value)


# ══════════════════════════════════════════════════════════════════════════
# Request Models - What the client sends in the body
# ══════════════════════════════════════════════════════════════════════════


class NoteCreate(BaseModel):
    """
    What:  Body of POST /api/notes.

    Both fields are optional at the schema level: a missing `content` is a
    business rule enforced by NoteStore.create(), which answers with the
    exact `{"error": "content missing"}` body rather than FastAPI's 422.
    Unknown keys (e.g. a client-supplied `id` or `date`) are ignored.

    `important` never fails a request. Values that are not booleans are
    reduced to one by JavaScript truthiness, so `""` and `0` become False
    while `2`, `"no"` and `[]` become True.
    """
    content: Optional[str] = Field(default=None, description="Note text (required, non-empty)")
    important: Optional[bool] = Field(default=None, description="Defaults to false when omitted")

    model_config = {"extra": "ignore"}

    @field_validator("important", mode="before")
    @classmethod
    def coerce_important(cls, v: Any) -> Optional[bool]:
        if v is None or isinstance(v, bool):
            return v
        return is_truthy(v)


# ══════════════════════════════════════════════════════════════════════════
# Error & Health Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    What:  Error body for validation failures and unknown endpoints.

    Example:
        {"error": "content missing"}
    """
    error: str = Field(description="Human-readable error description")


class HealthResponse(BaseModel):
    """Returned by GET /health for liveness checks."""
    status: str = Field(description="Overall service status")
    version: str = Field(description="Application version")
    notes: int = Field(description="Number of notes currently in the store")
    uptime_seconds: float = Field(description="Seconds since the service started")
