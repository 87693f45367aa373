# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP client exports."""

from .adapters import StubClientFactory, StubHttpClient
from .client import ClientFactory, HttpClient, create_default_http_client
from .headers import header_value, normalize_headers, stringify_header_values
from .httpx_client import HttpxClient, decode_response_body
from .models import (
    Headers,
    HttpMethod,
    HttpRequest,
    HttpResponse,
    ResponseBody,
    StructuredBody,
    TextBody,
)

__all__ = [
    "ClientFactory",
    "Headers",
    "HttpClient",
    "HttpMethod",
    "HttpxClient",
    "HttpRequest",
    "HttpResponse",
    "ResponseBody",
    "StructuredBody",
    "StubClientFactory",
    "StubHttpClient",
    "TextBody",
    "create_default_http_client",
    "decode_response_body",
    "header_value",
    "normalize_headers",
    "stringify_header_values",
]
