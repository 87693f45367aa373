# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""JSON decoding of the headers and body parameters."""

from __future__ import annotations

import json
from typing import Any

from ..errors import InvalidInput
from ..http.headers import stringify_header_values


def _parse(text: str | None, field_name: str, index: int) -> Any:
    if not text or not text.strip():
        return None
    try:
        return json.loads(text)
    except ValueError:
        raise InvalidInput(f"Invalid JSON in {field_name} field", item_index=index) from None


def decode_headers(text: str | None, *, index: int) -> dict[str, str] | None:
    """Parse the headers JSON text; blank text means no extra headers."""
    value = _parse(text, "Headers", index)
    if value is None:
        return None
    if not isinstance(value, dict):
        raise InvalidInput("Headers field must be a JSON object", item_index=index)
    return stringify_header_values(value)


def decode_body(text: str | None, *, send_body: bool, index: int) -> Any:
    """Parse the body JSON text, or return None when no body is to be sent."""
    if not send_body:
        return None
    return _parse(text, "Body", index)
