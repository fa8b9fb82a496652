"""
HTTP Package - Presentation Layer

Framework independent request/response values and the route table.
Import the router from ``src.presentation.http.router``.
"""

from .cors import CorsPolicy
from .request import (
    BodyParseResult,
    HttpRequest,
    accepts_json,
    is_json,
    parse_body_json,
)
from .response import HttpResponse
from .routes import RouteKind, RouteMatch, RouteTable, build_route_table

__all__ = [
    "BodyParseResult",
    "CorsPolicy",
    "HttpRequest",
    "HttpResponse",
    "RouteKind",
    "RouteMatch",
    "RouteTable",
    "accepts_json",
    "build_route_table",
    "is_json",
    "parse_body_json",
]
