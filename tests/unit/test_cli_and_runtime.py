# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import io
import json

import pytest

from sockshttp.cli import main as cli_main
from sockshttp.cli.main import build_parser, main
from sockshttp.config import HttpSettings
from sockshttp.errors import MissingRequiredField
from sockshttp.http.adapters import StubClientFactory, StubHttpClient
from sockshttp.http.models import HttpResponse, StructuredBody, TextBody
from sockshttp.runtime import SocksHttp


def test_build_parser_defaults():
    args = build_parser().parse_args([])
    assert args.items == "-"
    assert args.continue_on_fail is False
    assert args.timeout is None

    args = build_parser().parse_args(["items.json", "--continue-on-fail", "--timeout", "2.5"])
    assert args.items == "items.json"
    assert args.continue_on_fail is True
    assert args.timeout == 2.5


def test_socks_http_facade_runs_items():
    factory = StubClientFactory(StubHttpClient({"http://x.test": HttpResponse(status_code=200, body=TextBody("hi"))}))
    with SocksHttp(settings=HttpSettings(), client_factory=factory) as runner:
        records = runner.run([{"url": "http://x.test"}, {"url": ""}], continue_on_fail=True)
        single = runner.request(url="http://x.test", fullResponse=True)

    assert [r.to_dict() for r in records] == [
        {"json": {"data": "hi"}},
        {"json": {"error": "URL is required"}, "pairedItem": 1},
    ]
    assert single.json == {"status": 200, "headers": {}, "body": "hi"}

    with pytest.raises(MissingRequiredField):
        SocksHttp(settings=HttpSettings(), client_factory=factory).run([{"url": ""}])


class _PatchedSocksHttp(SocksHttp):
    factory: StubClientFactory

    def __init__(self, settings=None, client_factory=None):  # noqa: ARG002
        super().__init__(settings=settings, client_factory=self.factory)


def _patch_runner(monkeypatch, responses):
    _PatchedSocksHttp.factory = StubClientFactory(StubHttpClient(responses))
    monkeypatch.setattr(cli_main, "SocksHttp", _PatchedSocksHttp)
    monkeypatch.setattr(cli_main, "setup_logging", lambda level=None: None)


def test_main_reads_file_and_prints_records(tmp_path, monkeypatch, capsys):
    _patch_runner(monkeypatch, {"http://x.test": HttpResponse(status_code=200, body=StructuredBody({"a": 1}))})
    path = tmp_path / "items.json"
    path.write_text(json.dumps([{"url": "http://x.test"}, {"url": "http://x.test", "bodyJson": "{", "sendBody": True}]))

    assert main([str(path), "--continue-on-fail", "--timeout", "4"]) == 0
    output = json.loads(capsys.readouterr().out)
    assert output == [
        {"json": {"a": 1}},
        {"json": {"error": "Invalid JSON in Body field"}, "pairedItem": 1},
    ]


def test_main_reports_aborted_batch(monkeypatch, capsys):
    _patch_runner(monkeypatch, {})
    monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps({"url": ""})))
    assert main(["-"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "URL is required [item 0]" in captured.err


def test_main_rejects_unreadable_input(tmp_path, monkeypatch, capsys):
    _patch_runner(monkeypatch, {})
    path = tmp_path / "bad.json"
    path.write_text("not json")
    assert main([str(path)]) == 2
    assert "cannot read input items" in capsys.readouterr().err

    path.write_text('"a string"')
    assert main([str(path)]) == 2
