# Middleware package init
"""
NoteKeeper Backend - Middleware Package
========================================

What:  Interceptors applied to every request before it reaches a route.
How:   Each interceptor receives the request and a `call_next` continuation.
       Apart from the JSON body parser rejecting malformed input, every
       interceptor always calls onward.

Middleware Chain (order matters!):
    Request → [CORS] → [GZip] → [Request ID] → [JSON Body] → [Logging]
            → [Trailing Slash] → Route Handler

    1. CORS: answers preflight requests, adds Access-Control-* headers
    2. GZip: compresses larger responses
    3. Request ID: correlation ID for every log line of the request
    4. JSON Body: parses the body once, for the logger and the handlers
    5. Logging: records method, path and parsed body, then the outcome
    6. Trailing Slash: `/api/notes/` routes like `/api/notes`
"""
