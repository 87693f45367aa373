# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP request/response data models used across sockshttp."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

from ..proxy import ProxyEndpoint

Headers = dict[str, str]


class HttpMethod(str, Enum):
    GET = "GET"
    HEAD = "HEAD"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


@dataclass(frozen=True)
class StructuredBody:
    """Response body that was decoded from JSON."""

    value: Any


@dataclass(frozen=True)
class TextBody:
    """Response body kept as raw text."""

    text: str


ResponseBody = Union[StructuredBody, TextBody]


@dataclass
class HttpRequest:
    """One outbound request, routed through a SOCKS5 proxy."""

    url: str
    proxy: ProxyEndpoint
    method: HttpMethod = HttpMethod.GET
    headers: Headers | None = None
    body: Any = None

    @property
    def has_body(self) -> bool:
        return self.body is not None


@dataclass
class HttpResponse:
    """Raw response as returned by the transport."""

    status_code: int
    headers: Headers = field(default_factory=dict)
    body: ResponseBody = field(default_factory=lambda: TextBody(""))
    url: str | None = None

    @property
    def body_value(self) -> Any:
        """The decoded value for structured bodies, the text otherwise."""
        if isinstance(self.body, StructuredBody):
            return self.body.value
        return self.body.text

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status_code,
            "headers": dict(self.headers),
            "body": self.body_value,
        }


__all__ = [
    "Headers",
    "HttpMethod",
    "HttpRequest",
    "HttpResponse",
    "ResponseBody",
    "StructuredBody",
    "TextBody",
]
