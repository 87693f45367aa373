# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed HttpClient that tunnels every request through one SOCKS5 proxy."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from ..config import HttpSettings, load_http_settings
from ..errors import InvalidInput, transport_error_from_exception
from ..proxy import ProxyEndpoint
from .client import HttpClient
from .headers import header_value, normalize_headers
from .models import HttpRequest, HttpResponse, ResponseBody, StructuredBody, TextBody

logger = logging.getLogger(__name__)


def _is_json_content_type(content_type: str) -> bool:
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == "application/json" or media_type.endswith("+json")


def decode_response_body(response: httpx.Response) -> ResponseBody:
    """
    Best-effort JSON interpretation of a response body.

    Only JSON objects and arrays become StructuredBody. A JSON string becomes its
    decoded text; other scalars, empty bodies and anything that fails to decode are
    kept as raw text.
    """
    text = response.text
    stripped = text.lstrip()
    if not stripped:
        return TextBody(text)

    content_type = header_value(response.headers, "content-type")
    if not (_is_json_content_type(content_type) or stripped[0] in "{["):
        return TextBody(text)

    try:
        value = response.json()
    except ValueError:
        return TextBody(text)
    if isinstance(value, (dict, list)):
        return StructuredBody(value)
    if isinstance(value, str):
        return TextBody(value)
    return TextBody(text)


class HttpxClient(HttpClient):
    """Synchronous httpx client wrapper bound to a single SOCKS5 endpoint."""

    def __init__(
        self,
        proxy: ProxyEndpoint,
        settings: HttpSettings | None = None,
        client: httpx.Client | None = None,
    ):
        self.proxy = proxy
        self.settings = settings or load_http_settings()
        # trust_env=False keeps HTTP(S)_PROXY/ALL_PROXY from overriding the SOCKS5 route,
        # and the single "all://" proxy mount covers both http and https targets.
        if client is None:
            try:
                client = httpx.Client(
                    proxy=proxy.url,
                    trust_env=False,
                    follow_redirects=self.settings.allow_redirects,
                    timeout=self.settings.timeout,
                )
            except (httpx.InvalidURL, ValueError) as exc:
                raise InvalidInput(f"Invalid proxy address {proxy.redacted_url}: {exc}") from exc
        self._client = client

    def request(self, request: HttpRequest) -> HttpResponse:
        headers = dict(request.headers or {})
        if not header_value(headers, "User-Agent"):
            headers["User-Agent"] = self.settings.user_agent

        kwargs: dict[str, Any] = {}
        if request.has_body:
            kwargs["json"] = request.body

        logger.debug("%s %s via %s", request.method.value, request.url, self.proxy.redacted_url)
        try:
            resp = self._client.request(
                request.method.value,
                request.url,
                headers=headers,
                **kwargs,
            )
        except httpx.InvalidURL as exc:
            raise InvalidInput(f"Invalid URL: {exc}") from exc
        except (httpx.HTTPError, OSError) as exc:
            raise transport_error_from_exception(exc) from exc

        return HttpResponse(
            status_code=resp.status_code,
            headers=normalize_headers(resp.headers),
            body=decode_response_body(resp),
            url=str(resp.url),
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "HttpxClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
        self.close()
