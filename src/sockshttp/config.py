# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for sockshttp."""

import os
from dataclasses import dataclass

from .version import __version__

DEFAULT_USER_AGENT = f"sockshttp/{__version__}"


def _float_env(name: str, default: float) -> float:
    try:
        value = os.getenv(name)
        return float(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class HttpSettings:
    """Transport defaults shared by every per-item client."""

    timeout: float = 30.0
    user_agent: str = DEFAULT_USER_AGENT
    allow_redirects: bool = True
    proxy_remote_dns: bool = False

    @classmethod
    def from_env(cls) -> "HttpSettings":
        """Create settings from environment variables (evaluated at call time)."""
        timeout = _float_env("SOCKSHTTP_HTTP_TIMEOUT", cls.timeout)
        if timeout <= 0:
            timeout = cls.timeout
        return cls(
            timeout=timeout,
            user_agent=os.getenv("SOCKSHTTP_USER_AGENT", cls.user_agent),
            allow_redirects=_bool_env("SOCKSHTTP_HTTP_REDIRECTS", cls.allow_redirects),
            proxy_remote_dns=_bool_env("SOCKSHTTP_PROXY_REMOTE_DNS", cls.proxy_remote_dns),
        )


def load_http_settings() -> HttpSettings:
    """Load HTTP settings from environment with sensible defaults."""
    return HttpSettings.from_env()
