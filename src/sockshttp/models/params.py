# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Per-item request parameters."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..errors import InvalidInput
from ..http.models import HttpMethod

DEFAULT_PROXY_HOST = "127.0.0.1"
DEFAULT_PROXY_PORT = 9050
MIN_PORT = 1
MAX_PORT = 65535

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"", "0", "false", "no", "off"}


class FailurePolicy(str, Enum):
    """What the pipeline does when an item fails."""

    CONTINUE = "continue"
    FAIL_FAST = "fail_fast"

    @classmethod
    def from_flag(cls, continue_on_fail: bool) -> "FailurePolicy":
        return cls.CONTINUE if continue_on_fail else cls.FAIL_FAST


def _text(item: Mapping[str, Any], key: str, default: str = "") -> str:
    value = item.get(key)
    if value is None:
        return default
    return value if isinstance(value, str) else str(value)


def _flag(item: Mapping[str, Any], key: str, default: bool, index: int) -> bool:
    value = item.get(key)
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUTHY:
            return True
        if lowered in _FALSY:
            return False
    raise InvalidInput(f"Parameter '{key}' must be a boolean, got {value!r}", item_index=index)


def _method(item: Mapping[str, Any], index: int) -> HttpMethod:
    raw = _text(item, "method", HttpMethod.GET.value).strip().upper() or HttpMethod.GET.value
    try:
        return HttpMethod(raw)
    except ValueError:
        allowed = ", ".join(m.value for m in HttpMethod)
        raise InvalidInput(f"Unsupported HTTP method '{raw}' (expected one of {allowed})", item_index=index) from None


def _port(item: Mapping[str, Any], index: int) -> int:
    value = item.get("proxyPort")
    if value is None:
        return DEFAULT_PROXY_PORT
    port: int | None = None
    if isinstance(value, bool):
        port = None
    elif isinstance(value, int):
        port = value
    elif isinstance(value, float) and value.is_integer():
        port = int(value)
    elif isinstance(value, str) and value.strip().isdigit():
        port = int(value.strip())
    if port is None or not MIN_PORT <= port <= MAX_PORT:
        raise InvalidInput(
            f"Parameter 'proxyPort' must be an integer between {MIN_PORT} and {MAX_PORT}, got {value!r}",
            item_index=index,
        )
    return port


@dataclass(frozen=True)
class RequestParams:
    """
    Typed, validated view of one input item.

    Built once per item by `from_mapping`, which applies the documented defaults and
    rejects values outside their domain (unknown method, out-of-range port,
    non-boolean flags). The URL is carried as given; emptiness is checked when the
    request is assembled.
    """

    url: str
    method: HttpMethod = HttpMethod.GET
    headers_json: str = ""
    send_body: bool = False
    body_json: str = ""
    full_response: bool = False
    proxy_host: str = DEFAULT_PROXY_HOST
    proxy_port: int = DEFAULT_PROXY_PORT
    use_proxy_auth: bool = False
    proxy_user: str = ""
    proxy_password: str = ""

    @classmethod
    def from_mapping(cls, item: Mapping[str, Any], *, index: int) -> RequestParams:
        if not isinstance(item, Mapping):
            raise InvalidInput(f"Input item must be a mapping, got {type(item).__name__}", item_index=index)
        return cls(
            url=_text(item, "url"),
            method=_method(item, index),
            headers_json=_text(item, "headersJson"),
            send_body=_flag(item, "sendBody", False, index),
            body_json=_text(item, "bodyJson"),
            full_response=_flag(item, "fullResponse", False, index),
            proxy_host=_text(item, "proxyHost", DEFAULT_PROXY_HOST) or DEFAULT_PROXY_HOST,
            proxy_port=_port(item, index),
            use_proxy_auth=_flag(item, "useProxyAuth", False, index),
            proxy_user=_text(item, "proxyUser"),
            proxy_password=_text(item, "proxyPassword"),
        )


__all__ = [
    "DEFAULT_PROXY_HOST",
    "DEFAULT_PROXY_PORT",
    "FailurePolicy",
    "RequestParams",
]
