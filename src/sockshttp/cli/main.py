# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""sockshttp CLI."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, TextIO

from ..config import HttpSettings, load_http_settings
from ..errors import PipelineError
from ..log import setup_logging
from ..runtime import SocksHttp

EXIT_OK = 0
EXIT_BATCH_FAILED = 1
EXIT_BAD_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run one HTTP request per input item through a SOCKS5 proxy")
    parser.add_argument(
        "items",
        nargs="?",
        default="-",
        help="Path to a JSON array of input items (or a single object); '-' reads stdin",
    )
    parser.add_argument(
        "--continue-on-fail",
        action="store_true",
        help="Emit an error record for failing items instead of aborting the batch",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Per-request timeout in seconds (overrides SOCKSHTTP_HTTP_TIMEOUT)",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default: SOCKSHTTP_LOG_LEVEL or WARNING)")
    return parser


def _read_items(path: str, stdin: TextIO) -> list[dict[str, Any]]:
    if path == "-":
        data = json.load(stdin)
    else:
        with open(path, encoding="utf-8") as fh:
            data = json.load(fh)
    if isinstance(data, dict):
        return [data]
    if not isinstance(data, list):
        raise ValueError("input must be a JSON array of objects or a single object")
    return data


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    try:
        items = _read_items(args.items, sys.stdin)
    except (OSError, ValueError) as exc:
        print(f"sockshttp: cannot read input items: {exc}", file=sys.stderr)
        return EXIT_BAD_INPUT

    settings: HttpSettings = load_http_settings()
    if args.timeout is not None and args.timeout > 0:
        settings.timeout = args.timeout

    with SocksHttp(settings=settings) as runner:
        try:
            records = runner.run(items, continue_on_fail=args.continue_on_fail)
        except PipelineError as exc:
            print(f"sockshttp: {exc}", file=sys.stderr)
            return EXIT_BATCH_FAILED

    json.dump([record.to_dict() for record in records], sys.stdout, indent=2)
    sys.stdout.write("\n")
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
