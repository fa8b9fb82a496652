"""
HTTP Request Reader - Presentation Layer

Framework independent view of an incoming request plus the helpers the
router uses for content negotiation and body parsing.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Optional, Tuple, Union

from src.shared import ANY_MEDIA_TYPE, JSON_MEDIA_TYPE

HeaderSource = Union[Mapping[str, str], Iterable[Tuple[str, str]]]


@dataclass(frozen=True)
class HttpRequest:
    """A fully buffered request. Header names are stored lower-cased."""

    method: str
    path: str
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes = b""

    @classmethod
    def build(
        cls,
        method: str,
        path: str,
        headers: Optional[HeaderSource] = None,
        body: bytes = b"",
    ) -> "HttpRequest":
        items = headers.items() if isinstance(headers, Mapping) else headers or ()
        return cls(
            method=method.upper(),
            path=path,
            headers={name.lower(): value for name, value in items},
            body=body,
        )

    def header(self, name: str, default: str = "") -> str:
        return self.headers.get(name.lower(), default)


@dataclass(frozen=True)
class BodyParseResult:
    """Outcome of decoding a JSON body: either ``value`` or ``error``."""

    value: Any = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def accepts_json(request: HttpRequest) -> bool:
    """Does the client accept a JSON response?"""
    accept = request.header("accept")
    return JSON_MEDIA_TYPE in accept or ANY_MEDIA_TYPE in accept


def is_json(request: HttpRequest) -> bool:
    """Is the request body declared as JSON?"""
    return request.header("content-type").lower() == JSON_MEDIA_TYPE


def parse_body_json(request: HttpRequest) -> BodyParseResult:
    """
    Decode the request body as UTF-8 JSON.

    Never raises: undecodable bytes and malformed JSON are reported
    through ``BodyParseResult.error``.
    """
    try:
        text = request.body.decode("utf-8")
    except UnicodeDecodeError as exc:
        return BodyParseResult(error=f"Body is not valid UTF-8: {exc}")

    try:
        return BodyParseResult(value=json.loads(text))
    except json.JSONDecodeError as exc:
        return BodyParseResult(error=f"Body is not valid JSON: {exc.msg}")
