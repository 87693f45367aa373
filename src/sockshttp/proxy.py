# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""SOCKS5 proxy endpoint construction."""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import quote

SOCKS5_SCHEME = "socks5"
SOCKS5_REMOTE_DNS_SCHEME = "socks5h"


@dataclass(frozen=True)
class ProxyCredentials:
    user: str
    password: str = ""


@dataclass(frozen=True)
class ProxyEndpoint:
    """A SOCKS5 proxy address with optional username/password authentication."""

    host: str
    port: int
    credentials: ProxyCredentials | None = None
    remote_dns: bool = False

    @property
    def scheme(self) -> str:
        return SOCKS5_REMOTE_DNS_SCHEME if self.remote_dns else SOCKS5_SCHEME

    @property
    def url_host(self) -> str:
        """Host as it appears in a URL; IPv6 literals are bracketed."""
        if ":" in self.host and not self.host.startswith("["):
            return f"[{self.host}]"
        return self.host

    @property
    def url(self) -> str:
        """Connection string in the form ``socks5://[user:pass@]host:port``."""
        auth = ""
        if self.credentials is not None:
            auth = f"{_encode_component(self.credentials.user)}:{_encode_component(self.credentials.password)}@"
        return f"{self.scheme}://{auth}{self.url_host}:{self.port}"

    @property
    def redacted_url(self) -> str:
        """Connection string safe for logs."""
        auth = "***:***@" if self.credentials is not None else ""
        return f"{self.scheme}://{auth}{self.url_host}:{self.port}"


def _encode_component(value: str) -> str:
    # Encode every reserved character (including '@', ':' and '/') in userinfo.
    return quote(value, safe="")


def build_proxy_endpoint(
    host: str,
    port: int,
    *,
    use_auth: bool = False,
    user: str | None = None,
    password: str | None = None,
    remote_dns: bool = False,
) -> ProxyEndpoint:
    """
    Build a ProxyEndpoint from raw parameter values.

    Credentials are attached only when authentication is enabled and a username is
    given; an empty username with authentication enabled silently yields an
    unauthenticated endpoint. Host and port are used as given.
    """
    credentials = None
    if use_auth and user:
        credentials = ProxyCredentials(user=user, password=password or "")
    return ProxyEndpoint(host=host, port=port, credentials=credentials, remote_dns=remote_dns)


def build_proxy_url(
    host: str,
    port: int,
    *,
    use_auth: bool = False,
    user: str | None = None,
    password: str | None = None,
) -> str:
    return build_proxy_endpoint(host, port, use_auth=use_auth, user=user, password=password).url


__all__ = [
    "ProxyCredentials",
    "ProxyEndpoint",
    "build_proxy_endpoint",
    "build_proxy_url",
]
