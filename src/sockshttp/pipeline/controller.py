# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Per-item request pipeline with failure isolation."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from ..config import HttpSettings, load_http_settings
from ..errors import PipelineError
from ..http.client import ClientFactory, create_default_http_client
from ..log import item_logger
from ..models.params import FailurePolicy, RequestParams
from ..models.record import OutputRecord
from ..proxy import build_proxy_endpoint
from .assembler import assemble_request
from .decoder import decode_body, decode_headers
from .normalizer import normalize_response

logger = logging.getLogger(__name__)


class ItemPipeline:
    """
    Runs one proxied HTTP request per input item.

    Items are processed strictly in order. Each item gets its own proxy endpoint and
    its own client from `client_factory`; the client is closed before the next item
    starts. Failures are handled according to the FailurePolicy passed to `run`:
    CONTINUE turns them into error records, FAIL_FAST re-raises them tagged with the
    item index.
    """

    def __init__(self, client_factory: ClientFactory | None = None, settings: HttpSettings | None = None):
        self.client_factory = client_factory or create_default_http_client
        self.settings = settings or load_http_settings()

    def process_item(self, item: Mapping[str, Any], index: int) -> OutputRecord:
        params = RequestParams.from_mapping(item, index=index)

        headers = decode_headers(params.headers_json, index=index)
        body = decode_body(params.body_json, send_body=params.send_body, index=index)

        proxy = build_proxy_endpoint(
            params.proxy_host,
            params.proxy_port,
            use_auth=params.use_proxy_auth,
            user=params.proxy_user,
            password=params.proxy_password,
            remote_dns=self.settings.proxy_remote_dns,
        )
        request = assemble_request(params, headers, body, proxy, index=index)

        item_logger(logger, index).debug("%s %s via %s", request.method.value, request.url, proxy.redacted_url)
        client = self.client_factory(proxy, self.settings)
        try:
            response = client.request(request)
        finally:
            client.close()

        return normalize_response(response, full_response=params.full_response)

    def iter_records(
        self,
        items: Iterable[Mapping[str, Any]],
        policy: FailurePolicy = FailurePolicy.FAIL_FAST,
    ) -> Iterator[OutputRecord]:
        """Yield one OutputRecord per item; records yielded before an abort stay yielded."""
        policy = FailurePolicy(policy)
        for index, item in enumerate(items):
            try:
                record = self.process_item(item, index)
            except Exception as exc:  # noqa: BLE001
                if isinstance(exc, PipelineError):
                    exc.item_index = index
                    message = exc.message
                else:
                    message = str(exc) or type(exc).__name__

                if policy is FailurePolicy.CONTINUE:
                    item_logger(logger, index).warning("failed: %s", message)
                    yield OutputRecord.from_error(message, index)
                    continue

                if isinstance(exc, PipelineError):
                    raise
                raise PipelineError(message, item_index=index) from exc
            yield record

    def run(
        self,
        items: Iterable[Mapping[str, Any]],
        policy: FailurePolicy = FailurePolicy.FAIL_FAST,
    ) -> list[OutputRecord]:
        return list(self.iter_records(items, policy))


__all__ = ["ItemPipeline"]
