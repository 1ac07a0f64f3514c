"""
NoteKeeper Backend - Trailing Slash Middleware
================================================

What:  Makes one trailing slash optional on every route.
How:   `/api/notes/` is routed exactly like `/api/notes`, and
       `/api/notes/2/` like `/api/notes/2`. Only a single slash is dropped,
       so `/api/notes//` still falls through to the unknown-endpoint handler.
When:  Innermost interceptor, directly in front of the router. The request
       logger runs earlier and therefore records the path as the client
       sent it.

The app is created with redirect_slashes=False, so a slash mismatch is
never answered with a redirect.
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response


def strip_trailing_slash(path: str) -> str:
    """Drop one trailing slash; "/" itself is left alone."""
    if len(path) > 1 and path.endswith("/"):
        return path[:-1]
    return path


class TrailingSlashMiddleware(BaseHTTPMiddleware):
    """Rewrites the routing path so a trailing slash is optional."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.scope["path"]
        stripped = strip_trailing_slash(path)
        if stripped != path:
            request.scope["path"] = stripped
        return await call_next(request)
