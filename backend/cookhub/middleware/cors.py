"""
CookHub Backend — CORS Policy Middleware
==========================================

What:  Stamps a fixed set of CORS headers on every response and answers
       OPTIONS preflights with an empty 200.
How:   Starlette's CORSMiddleware only reacts to requests carrying an Origin
       header and echoes the requested headers back. This platform publishes
       one static policy on every response instead, so browsers and plain
       HTTP clients see the same headers.

Policy (values from settings):
    Access-Control-Allow-Origin:   *
    Access-Control-Allow-Methods:  GET, POST, PUT, DELETE, OPTIONS
    Access-Control-Allow-Headers:  Content-Type, Authorization on the API handlers;
                                   Content-Type only on /api/search, / and every
                                   other path that falls through to the landing page
    Access-Control-Max-Age:        3600

Static files under /static are passed through untouched.
"""

from typing import Dict, Iterable, Optional, Set

from fastapi.routing import APIRoute
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from cookhub.config import settings

NARROW_HEADER_PATHS = frozenset({"/", "/api/search"})


def wide_header_paths(routes: Iterable) -> Set[str]:
    """Exact paths of the API handlers that advertise the full allowed-header set."""
    return {
        route.path
        for route in routes
        if isinstance(route, APIRoute)
        and route.path not in NARROW_HEADER_PATHS
        and "{" not in route.path
    }


class CORSPolicyMiddleware(BaseHTTPMiddleware):
    def __init__(
        self,
        app: ASGIApp,
        allow_origin: str = settings.cors_allow_origin,
        allow_methods: str = settings.cors_allow_methods,
        allow_headers: str = settings.cors_allow_headers,
        narrow_allow_headers: str = settings.cors_narrow_allow_headers,
        max_age: int = settings.cors_max_age,
        wide_paths: Optional[Iterable[str]] = None,
        static_prefix: str = "/static",
    ):
        super().__init__(app)
        self.allow_origin = allow_origin
        self.allow_methods = allow_methods
        self.allow_headers = allow_headers
        self.narrow_allow_headers = narrow_allow_headers
        self.max_age = max_age
        # None: every path except NARROW_HEADER_PATHS gets the full set
        self.wide_paths = frozenset(wide_paths) if wide_paths is not None else None
        self.static_prefix = static_prefix

    def headers_for(self, path: str) -> Dict[str, str]:
        if self.wide_paths is None:
            wide = path not in NARROW_HEADER_PATHS
        else:
            wide = path in self.wide_paths
        allow_headers = self.allow_headers if wide else self.narrow_allow_headers
        return {
            "Access-Control-Allow-Origin": self.allow_origin,
            "Access-Control-Allow-Methods": self.allow_methods,
            "Access-Control-Allow-Headers": allow_headers,
            "Access-Control-Max-Age": str(self.max_age),
        }

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path == self.static_prefix or path.startswith(self.static_prefix + "/"):
            return await call_next(request)

        headers = self.headers_for(path)

        # Preflight never reaches the router
        if request.method == "OPTIONS":
            return Response(status_code=200, headers=headers)

        response = await call_next(request)
        response.headers.update(headers)
        return response
