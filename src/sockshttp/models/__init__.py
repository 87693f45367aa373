# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclass exports for sockshttp."""

from ..http.models import HttpMethod, HttpRequest, HttpResponse, StructuredBody, TextBody
from ..proxy import ProxyCredentials, ProxyEndpoint
from .params import FailurePolicy, RequestParams
from .record import OutputRecord

__all__ = [
    "FailurePolicy",
    "HttpMethod",
    "HttpRequest",
    "HttpResponse",
    "OutputRecord",
    "ProxyCredentials",
    "ProxyEndpoint",
    "RequestParams",
    "StructuredBody",
    "TextBody",
]
