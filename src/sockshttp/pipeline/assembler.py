# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

from typing import Any

from ..errors import MissingRequiredField
from ..http.models import HttpRequest
from ..models.params import RequestParams
from ..proxy import ProxyEndpoint


def assemble_request(
    params: RequestParams,
    headers: dict[str, str] | None,
    body: Any,
    proxy: ProxyEndpoint,
    *,
    index: int,
) -> HttpRequest:
    url = params.url.strip()
    if not url:
        raise MissingRequiredField("URL is required", item_index=index)
    return HttpRequest(
        url=url,
        method=params.method,
        headers=headers,
        body=body,
        proxy=proxy,
    )
