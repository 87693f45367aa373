# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers."""

from __future__ import annotations

import socket
import ssl as ssl_module
from enum import Enum
from typing import Any, Optional

import httpx


class ErrorCategory(str, Enum):
    TIMEOUT = "TIMEOUT"
    PROXY_ERROR = "PROXY_ERROR"
    SSL_ERROR = "SSL_ERROR"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    DNS_ERROR = "DNS_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    NONE = "NONE"


class PipelineError(Exception):
    """Base class for failures scoped to a single input item."""

    def __init__(self, message: str, *, item_index: int | None = None):
        super().__init__(message)
        self.message = message
        self.item_index = item_index

    def __str__(self) -> str:
        if self.item_index is None:
            return self.message
        return f"{self.message} [item {self.item_index}]"

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.message,
            "type": type(self).__name__,
            "item_index": self.item_index,
        }


class InvalidInput(PipelineError):
    """Malformed parameter values or JSON payload text."""


class MissingRequiredField(PipelineError):
    """A required parameter (the URL) was empty."""


class TransportError(PipelineError):
    """Network or proxy failure while dispatching the request."""

    def __init__(
        self,
        message: str,
        *,
        item_index: int | None = None,
        category: ErrorCategory = ErrorCategory.UNKNOWN_ERROR,
    ):
        super().__init__(message, item_index=item_index)
        self.category = category

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["category"] = self.category.value
        return data


def categorize_exception(exc: BaseException) -> ErrorCategory:
    """
    Map Python/httpx exceptions to ErrorCategory.
    """
    if isinstance(exc, httpx.TimeoutException):
        return ErrorCategory.TIMEOUT

    if isinstance(exc, httpx.ProxyError):
        return ErrorCategory.PROXY_ERROR

    # SOCKS handshake failures surface from socksio/httpcore as a plain
    # ConnectError whose message names the proxy.
    if isinstance(exc, (httpx.ConnectError, httpx.RemoteProtocolError, httpx.NetworkError)):
        text = str(exc).lower()
        if "socks" in text or "proxy" in text:
            return ErrorCategory.PROXY_ERROR
        if "name or service not known" in text or "nodename nor servname" in text or "getaddrinfo" in text:
            return ErrorCategory.DNS_ERROR
        return ErrorCategory.CONNECTION_ERROR

    if isinstance(exc, (ssl_module.SSLError, ssl_module.CertificateError)):
        return ErrorCategory.SSL_ERROR

    if isinstance(exc, (socket.gaierror, socket.herror)):
        return ErrorCategory.DNS_ERROR

    if isinstance(exc, (ConnectionError, ConnectionRefusedError, ConnectionResetError)):
        return ErrorCategory.CONNECTION_ERROR

    return ErrorCategory.UNKNOWN_ERROR


def error_category_to_reason(category: Optional[ErrorCategory]) -> str:
    """User-facing reason string."""
    mapping = {
        ErrorCategory.TIMEOUT: "Network timeout during request",
        ErrorCategory.PROXY_ERROR: "SOCKS5 proxy failure",
        ErrorCategory.SSL_ERROR: "TLS/certificate issue",
        ErrorCategory.CONNECTION_ERROR: "Network connectivity issue",
        ErrorCategory.DNS_ERROR: "DNS resolution failure",
        ErrorCategory.UNKNOWN_ERROR: "Network error during request",
        ErrorCategory.NONE: "",
        None: "",
    }
    return mapping.get(category, "Request failed due to network error")


def transport_error_from_exception(exc: BaseException, *, item_index: int | None = None) -> TransportError:
    """Wrap a low-level exception; callers raise the result ``from exc``."""
    category = categorize_exception(exc)
    reason = error_category_to_reason(category)
    detail = str(exc) or type(exc).__name__
    return TransportError(f"{reason}: {detail}", item_index=item_index, category=category)


__all__ = [
    "ErrorCategory",
    "InvalidInput",
    "MissingRequiredField",
    "PipelineError",
    "TransportError",
    "categorize_exception",
    "error_category_to_reason",
    "transport_error_from_exception",
]
