# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Shape raw responses into output records."""

from __future__ import annotations

from ..http.models import HttpResponse, StructuredBody
from ..models.record import OutputRecord


def normalize_response(response: HttpResponse, *, full_response: bool) -> OutputRecord:
    if full_response:
        return OutputRecord(json=response.to_dict())
    if isinstance(response.body, StructuredBody):
        return OutputRecord(json=response.body.value)
    return OutputRecord(json={"data": response.body.text})
