# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Output record model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class OutputRecord:
    """One entry of the output batch; `paired_item` is set only on error records."""

    json: Any
    paired_item: int | None = None

    @property
    def is_error(self) -> bool:
        return self.paired_item is not None

    @classmethod
    def from_error(cls, message: str, index: int) -> OutputRecord:
        return cls(json={"error": message}, paired_item=index)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"json": self.json}
        if self.paired_item is not None:
            data["pairedItem"] = self.paired_item
        return data
