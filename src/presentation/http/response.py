"""
HTTP Response Writer - Presentation Layer

Response value returned by the router and the helpers producing it for
each status code the API uses.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Sequence

from fastapi import status

from src.shared import JSON_MEDIA_TYPE


@dataclass(frozen=True)
class HttpResponse:
    """Status code, headers and an already encoded body."""

    status_code: int
    headers: Dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    def json(self) -> Any:
        """Decode the body, ``None`` for empty responses."""
        if not self.body:
            return None
        return json.loads(self.body)


def send_json(payload: Any, status_code: int = status.HTTP_200_OK) -> HttpResponse:
    body = json.dumps(payload, separators=(",", ":")).encode("utf-8")
    return HttpResponse(
        status_code=status_code,
        headers={"Content-Type": JSON_MEDIA_TYPE},
        body=body,
    )


def created_resource(payload: Any) -> HttpResponse:
    return send_json(payload, status.HTTP_201_CREATED)


def no_content(headers: Optional[Mapping[str, str]] = None) -> HttpResponse:
    return HttpResponse(
        status_code=status.HTTP_204_NO_CONTENT, headers=dict(headers or {})
    )


def bad_request(error: Any = None) -> HttpResponse:
    """400 with ``{"error": error}`` when an error is given, else empty."""
    if error:
        return send_json({"error": error}, status.HTTP_400_BAD_REQUEST)
    return HttpResponse(status_code=status.HTTP_400_BAD_REQUEST)


def not_found() -> HttpResponse:
    return HttpResponse(status_code=status.HTTP_404_NOT_FOUND)


def method_not_allowed(allowed_methods: Sequence[str] = ()) -> HttpResponse:
    headers = {"Allow": ",".join(allowed_methods)} if allowed_methods else {}
    return HttpResponse(
        status_code=status.HTTP_405_METHOD_NOT_ALLOWED, headers=headers
    )


def content_type_not_acceptable() -> HttpResponse:
    return HttpResponse(status_code=status.HTTP_406_NOT_ACCEPTABLE)


def internal_server_error() -> HttpResponse:
    return HttpResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
