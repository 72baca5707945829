"""Tests for structured logging helpers."""

import logging
from pathlib import Path

import httpx

from tldrview.logging_utils import (
    StructuredTextFormatter,
    extract_http_error_context,
    log_event,
    setup_logging,
)


def test_structured_formatter_extracts_httpx_request_fields():
    formatter = StructuredTextFormatter()
    record = logging.LogRecord(
        name="httpx",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg='HTTP Request: %s %s "%s %d %s"',
        args=(
            "GET",
            "https://tldr.sh/assets/index.json",
            "HTTP/1.1",
            200,
            "OK",
        ),
        exc_info=None,
    )

    result = formatter.format(record)

    assert "=== httpx_request ===" in result
    assert "http_method: GET" in result
    assert "http_url: https://tldr.sh/assets/index.json" in result
    assert "http_status: 200" in result
    assert "message:" not in result


def test_structured_formatter_orders_known_event_keys():
    formatter = StructuredTextFormatter()
    record = logging.LogRecord(
        name="root",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg='{"event":"page_fetch","url":"https://x/osx/ls.md","command":"ls","zeta":1}',
        args=(),
        exc_info=None,
    )

    lines = formatter.format(record).splitlines()

    assert lines[0] == "=== page_fetch ==="
    keys = [line.split(":", 1)[0] for line in lines[1:]]
    assert keys.index("command") < keys.index("url") < keys.index("zeta")


def test_formatter_separates_entries_with_blank_line():
    formatter = StructuredTextFormatter()
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "hello", (), None)

    first = formatter.format(record)
    second = formatter.format(record)

    assert not first.startswith("\n")
    assert second.startswith("\n=== x ===")


def test_extract_http_error_context_from_status_error():
    request = httpx.Request("GET", "https://pages.test/pages/osx/ls.md")
    response = httpx.Response(404, request=request)
    error = httpx.HTTPStatusError("not found", request=request, response=response)

    context = extract_http_error_context(error)

    assert context["http_method"] == "GET"
    assert context["http_url"] == "https://pages.test/pages/osx/ls.md"
    assert context["http_status"] == 404
    assert context["http_reason"] == "Not Found"


def test_extract_http_error_context_without_request():
    assert extract_http_error_context(httpx.ConnectError("refused")) == {}
    assert extract_http_error_context(ValueError("bad json")) == {}


def test_setup_logging_writes_events_to_file(tmp_path: Path):
    log_path = tmp_path / "nested" / "tldrview.log"

    setup_logging(str(log_path))
    log_event("command_not_found", level=logging.WARNING, command="nope")

    content = log_path.read_text(encoding="utf-8")
    assert "=== command_not_found ===" in content
    assert "level: WARNING" in content
    assert "command: nope" in content


def test_setup_logging_without_file_disables_logging():
    setup_logging(None)

    assert logging.getLogger().isEnabledFor(logging.CRITICAL) is False
