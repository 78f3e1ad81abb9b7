# Middleware package init
"""
CookHub Backend — Middleware Package
======================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain:
    Request → [Request ID] → [Logging] → [CORS Policy] → [GZip] → Route Handler

    1. Request ID: correlation ID for logs and error bodies
    2. Logging: method, path, status, duration with the request ID
    3. CORS Policy: fixed header set; answers OPTIONS preflights directly

    Responses travel back through the same chain in reverse, so the
    X-Request-ID and CORS headers are present on error responses too.
"""
