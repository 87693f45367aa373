# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Per-item request pipeline stages."""

from .assembler import assemble_request
from .controller import ItemPipeline
from .decoder import decode_body, decode_headers
from .normalizer import normalize_response

__all__ = [
    "ItemPipeline",
    "assemble_request",
    "decode_body",
    "decode_headers",
    "normalize_response",
]
