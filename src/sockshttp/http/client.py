# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP client abstraction and factory."""

from typing import Callable, Protocol

from ..config import HttpSettings, load_http_settings
from ..proxy import ProxyEndpoint
from .models import HttpRequest, HttpResponse


class HttpClient(Protocol):
    """Minimal protocol for issuing HTTP requests."""

    def request(self, request: HttpRequest) -> HttpResponse: ...

    def close(self) -> None:  # pragma: no cover - optional for adapters
        ...


ClientFactory = Callable[[ProxyEndpoint, HttpSettings], HttpClient]


def create_default_http_client(proxy: ProxyEndpoint, settings: HttpSettings | None = None) -> HttpClient:
    """Factory for the default httpx-backed client bound to one SOCKS5 proxy."""
    from .httpx_client import HttpxClient

    return HttpxClient(proxy, settings or load_http_settings())
