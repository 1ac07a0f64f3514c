"""
NoteKeeper Backend - JSON Body Parsing Middleware
===================================================

What:  Parses JSON request bodies before routing and request logging.
Why:   The request logger prints the parsed body and the create handler
       reads its fields; both need the same parsed value, parsed once.
How:   Reads the raw body, decodes it when the Content-Type is JSON, and
       leaves the result on request.state.body. Requests without a JSON
       body get an empty dict, so handlers can treat "no body" and
       "empty object" the same way.

Accepted content types:
    application/json, and any application/*+json (e.g. application/merge-patch+json)

Failure:
    Undecodable JSON, or a top-level value that is neither an object nor
    an array, ends the request here with 400 {"error": "malformed JSON"}.
    This is the only interceptor in the chain that can short-circuit.
"""

import json
import logging
from typing import Any

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from notekeeper.exceptions import ValidationError

logger = logging.getLogger(__name__)


def is_json_content_type(content_type: str) -> bool:
    """True for application/json and application/*+json, ignoring parameters."""
    media_type = content_type.split(";", 1)[0].strip().lower()
    if media_type == "application/json":
        return True
    return media_type.startswith("application/") and media_type.endswith("+json")


def decode_json_body(raw: bytes) -> Any:
    """
    Decode a raw request body into a JSON object or array.

    Raises:
        ValidationError: body is not UTF-8 JSON, or is a bare scalar
    """
    try:
        value = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ValidationError(message="malformed JSON", context={"reason": str(e)})

    if not isinstance(value, (dict, list)):
        raise ValidationError(
            message="malformed JSON",
            context={"reason": f"top-level {type(value).__name__} is not an object or array"},
        )
    return value


class JSONBodyMiddleware(BaseHTTPMiddleware):
    """Leaves the parsed JSON body (or {}) on request.state.body."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        body: Any = {}
        content_type = request.headers.get("content-type", "")

        if is_json_content_type(content_type):
            raw = await request.body()
            if raw.strip():
                try:
                    body = decode_json_body(raw)
                except ValidationError as exc:
                    logger.warning(
                        "Rejected %s %s: %s", request.method, request.url.path, exc.context.get("reason")
                    )
                    return JSONResponse(status_code=400, content={"error": exc.message})

        request.state.body = body
        return await call_next(request)
