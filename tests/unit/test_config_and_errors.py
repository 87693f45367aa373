# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import importlib
import logging
import socket
import ssl

import httpx

from sockshttp import config, log
from sockshttp.config import DEFAULT_USER_AGENT
from sockshttp.errors import (
    ErrorCategory,
    InvalidInput,
    TransportError,
    categorize_exception,
    error_category_to_reason,
    transport_error_from_exception,
)


def test_http_settings_env_overrides(monkeypatch):
    monkeypatch.setenv("SOCKSHTTP_HTTP_TIMEOUT", "5.5")
    monkeypatch.setenv("SOCKSHTTP_USER_AGENT", "CustomAgent/1.0")
    monkeypatch.setenv("SOCKSHTTP_HTTP_REDIRECTS", "false")
    monkeypatch.setenv("SOCKSHTTP_PROXY_REMOTE_DNS", "yes")

    importlib.reload(config)
    settings = config.load_http_settings()

    assert settings.timeout == 5.5
    assert settings.user_agent == "CustomAgent/1.0"
    assert settings.allow_redirects is False
    assert settings.proxy_remote_dns is True


def test_http_settings_invalid_env_fall_back(monkeypatch):
    monkeypatch.setenv("SOCKSHTTP_HTTP_TIMEOUT", "not-a-number")
    importlib.reload(config)
    settings = config.load_http_settings()
    assert settings.timeout == config.HttpSettings.timeout
    assert settings.user_agent == DEFAULT_USER_AGENT

    monkeypatch.setenv("SOCKSHTTP_HTTP_TIMEOUT", "-3")
    assert config.load_http_settings().timeout == config.HttpSettings.timeout


def test_load_http_settings_reads_env_at_call_time(monkeypatch):
    importlib.reload(config)
    monkeypatch.setenv("SOCKSHTTP_HTTP_TIMEOUT", "7.7")
    assert config.load_http_settings().timeout == 7.7
    monkeypatch.setenv("SOCKSHTTP_HTTP_TIMEOUT", "8.8")
    assert config.load_http_settings().timeout == 8.8


def test_setup_logging_uses_requested_level(monkeypatch):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))
    log.setup_logging("debug")
    assert calls["level"] == logging.DEBUG
    log.setup_logging("nonsense")
    assert calls["level"] == logging.WARNING


def test_categorize_exception_variants():
    request = httpx.Request("GET", "http://x.test")
    assert categorize_exception(httpx.ConnectTimeout("t", request=request)) is ErrorCategory.TIMEOUT
    assert categorize_exception(httpx.ProxyError("p", request=request)) is ErrorCategory.PROXY_ERROR
    assert categorize_exception(httpx.ConnectError("SOCKS5 auth rejected", request=request)) is ErrorCategory.PROXY_ERROR
    assert categorize_exception(httpx.ConnectError("[Errno -2] Name or service not known")) is ErrorCategory.DNS_ERROR
    assert categorize_exception(httpx.ConnectError("refused")) is ErrorCategory.CONNECTION_ERROR
    assert categorize_exception(ssl.SSLError("bad cert")) is ErrorCategory.SSL_ERROR
    assert categorize_exception(socket.gaierror("dns")) is ErrorCategory.DNS_ERROR
    assert categorize_exception(ConnectionResetError("reset")) is ErrorCategory.CONNECTION_ERROR
    assert categorize_exception(ValueError("other")) is ErrorCategory.UNKNOWN_ERROR


def test_error_category_reason_mapping():
    assert error_category_to_reason(ErrorCategory.TIMEOUT) == "Network timeout during request"
    assert error_category_to_reason(ErrorCategory.PROXY_ERROR) == "SOCKS5 proxy failure"
    assert error_category_to_reason(ErrorCategory.NONE) == ""
    assert error_category_to_reason(None) == ""


def test_transport_error_from_exception_message_and_dict():
    err = transport_error_from_exception(ConnectionRefusedError("refused"), item_index=4)
    assert isinstance(err, TransportError)
    assert err.message == "Network connectivity issue: refused"
    assert err.to_dict() == {
        "error": "Network connectivity issue: refused",
        "type": "TransportError",
        "item_index": 4,
        "category": "CONNECTION_ERROR",
    }


def test_pipeline_error_str_includes_index():
    err = InvalidInput("Invalid JSON in Body field")
    assert str(err) == "Invalid JSON in Body field"
    err.item_index = 2
    assert str(err) == "Invalid JSON in Body field [item 2]"


def test_item_logger_prefixes_index(caplog):
    with caplog.at_level(logging.WARNING, logger="sockshttp.test"):
        log.item_logger(logging.getLogger("sockshttp.test"), 3).warning("failed: %s", "boom")
    record = caplog.records[-1]
    assert record.getMessage() == "[item 3] failed: boom"
    assert record.item_index == 3


def test_setup_logging_format_names_tool(monkeypatch):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))
    log.setup_logging()
    assert calls["format"] == log.LOG_FORMAT
    assert "sockshttp" in calls["format"]
