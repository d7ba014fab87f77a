"""
=============================================================================
HTTP PROTOCOL LAYER
=============================================================================

Just enough HTTP/1.1 for the contact server:

    ┌─────────────────────────────────────────────────────────────────────┐
    │ request.py      decoded text  →  HTTPRequest (method, path, text)   │
    │ router.py       HTTPRequest   →  handler (first match wins)         │
    │ response.py     handler       →  HTTPResponse  →  bytes             │
    │ status_codes.py the three status codes we ever send                 │
    └─────────────────────────────────────────────────────────────────────┘

=============================================================================
"""

from .request import HTTPRequest, RequestParser, HTTPParseError, parse_request
from .response import (
    HTTPResponse,
    ok,
    not_found,
    route_not_found,
    internal_error,
)
from .router import Router, Route, RouteMatch
from .status_codes import HTTPStatus

__all__ = [
    "HTTPRequest",
    "RequestParser",
    "HTTPParseError",
    "parse_request",
    "HTTPResponse",
    "ok",
    "not_found",
    "route_not_found",
    "internal_error",
    "Router",
    "Route",
    "RouteMatch",
    "HTTPStatus",
]
