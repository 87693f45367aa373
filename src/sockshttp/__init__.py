# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
sockshttp package entrypoint.

Runs one configurable HTTP request per input item through a SOCKS5 proxy and
normalizes each result into a uniform output record. The transport is
abstracted behind an injectable client factory, and parameters, requests and
responses are modeled with typed dataclasses.
"""

from .config import HttpSettings, load_http_settings
from .errors import (
    ErrorCategory,
    InvalidInput,
    MissingRequiredField,
    PipelineError,
    TransportError,
)
from .http import (
    HttpClient,
    HttpRequest,
    HttpResponse,
    HttpxClient,
    StructuredBody,
    TextBody,
    create_default_http_client,
)
from .log import setup_logging
from .models import FailurePolicy, OutputRecord, RequestParams
from .pipeline import ItemPipeline
from .proxy import ProxyCredentials, ProxyEndpoint, build_proxy_endpoint, build_proxy_url
from .runtime import SocksHttp
from .version import __version__

__all__ = [
    "ErrorCategory",
    "FailurePolicy",
    "HttpClient",
    "HttpRequest",
    "HttpResponse",
    "HttpSettings",
    "HttpxClient",
    "InvalidInput",
    "ItemPipeline",
    "MissingRequiredField",
    "OutputRecord",
    "PipelineError",
    "ProxyCredentials",
    "ProxyEndpoint",
    "RequestParams",
    "SocksHttp",
    "StructuredBody",
    "TextBody",
    "TransportError",
    "build_proxy_endpoint",
    "build_proxy_url",
    "create_default_http_client",
    "load_http_settings",
    "setup_logging",
    "__version__",
]
