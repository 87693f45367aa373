# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Programmable HttpClient implementations for embedding and tests."""

from __future__ import annotations

from ..config import HttpSettings
from ..errors import TransportError
from ..proxy import ProxyEndpoint
from .client import HttpClient
from .models import HttpRequest, HttpResponse


class StubHttpClient(HttpClient):
    """Deterministic, programmable HttpClient keyed by request URL."""

    def __init__(self, responses: dict[str, HttpResponse | Exception] | None = None):
        self._responses = responses or {}
        self.requests: list[HttpRequest] = []
        self.closed = False

    def add(self, url: str, response: HttpResponse | Exception) -> None:
        self._responses[url] = response

    def request(self, request: HttpRequest) -> HttpResponse:
        self.requests.append(request)
        if request.url not in self._responses:
            raise TransportError(f"No stubbed response configured for {request.url}")
        result = self._responses[request.url]
        if isinstance(result, Exception):
            raise result
        return result

    def close(self) -> None:
        self.closed = True


class StubClientFactory:
    """
    ClientFactory that hands out one shared StubHttpClient.

    Records every proxy endpoint it was asked to build a client for, so callers can
    check that each item got its own proxy configuration.
    """

    def __init__(self, client: StubHttpClient | None = None):
        self.client = client or StubHttpClient()
        self.proxies: list[ProxyEndpoint] = []

    def __call__(self, proxy: ProxyEndpoint, settings: HttpSettings) -> HttpClient:  # noqa: ARG002
        self.proxies.append(proxy)
        self.client.closed = False
        return self.client
