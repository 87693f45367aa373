# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""High-level sockshttp facade."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Optional

from .config import HttpSettings, load_http_settings
from .http.client import ClientFactory
from .models import FailurePolicy, OutputRecord
from .pipeline import ItemPipeline


class SocksHttp:
    """
    Convenience wrapper that wires settings and a client factory into an ItemPipeline.

    Clients are built and closed per item, so the facade itself holds no network
    resources; the context manager form exists for symmetry with callers that
    manage other resources the same way.
    """

    def __init__(
        self,
        settings: Optional[HttpSettings] = None,
        client_factory: Optional[ClientFactory] = None,
    ):
        self.settings = settings or load_http_settings()
        self.pipeline = ItemPipeline(client_factory=client_factory, settings=self.settings)

    def run(
        self,
        items: Iterable[Mapping[str, Any]],
        *,
        continue_on_fail: bool = False,
    ) -> list[OutputRecord]:
        return self.pipeline.run(items, FailurePolicy.from_flag(continue_on_fail))

    def request(self, **params: Any) -> OutputRecord:
        """Run a single item given as keyword parameters (``url=..., proxyPort=...``)."""
        return self.pipeline.process_item(params, 0)

    def close(self) -> None:
        return None

    def __enter__(self) -> "SocksHttp":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
        self.close()
