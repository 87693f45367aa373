# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Logging helpers for sockshttp."""

from __future__ import annotations

import logging
import os
from collections.abc import MutableMapping
from typing import Any

DEFAULT_LOG_LEVEL = os.getenv("SOCKSHTTP_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s %(levelname)-7s sockshttp %(name)s: %(message)s"


class ItemLogAdapter(logging.LoggerAdapter):
    """Prefix messages with the batch position of the item being processed."""

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> tuple[Any, MutableMapping[str, Any]]:
        index = (self.extra or {}).get("item_index")
        kwargs.setdefault("extra", {}).update(self.extra or {})
        return f"[item {index}] {msg}", kwargs


def item_logger(logger: logging.Logger, index: int) -> ItemLogAdapter:
    return ItemLogAdapter(logger, {"item_index": index})


def setup_logging(level: str | None = None) -> None:
    """Configure standard logging for CLI use; writes to stderr so stdout stays JSON."""
    effective_level = (level or DEFAULT_LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, effective_level, logging.WARNING),
        format=LOG_FORMAT,
    )


__all__ = ["ItemLogAdapter", "item_logger", "setup_logging"]
