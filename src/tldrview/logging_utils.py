"""Structured event logging for tldrview."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any

EVENT_KEY_ORDER: dict[str, list[str]] = {
    "app_start": ["ts", "level", "argv", "index_url", "pages_url", "default_platform"],
    "app_stop": ["ts", "level", "reason", "exit_code", "uptime_ms", "error_type", "error"],
    "index_fetch": ["ts", "level", "url", "command_count", "elapsed_ms"],
    "page_fetch": ["ts", "level", "command", "platform", "url", "line_count", "elapsed_ms"],
    "fetch_error": [
        "ts",
        "level",
        "operation",
        "url",
        "http_method",
        "http_url",
        "http_version",
        "http_status",
        "http_reason",
        "error_type",
        "error",
    ],
    "command_not_found": ["ts", "level", "command"],
    "httpx_request": [
        "ts",
        "level",
        "logger",
        "http_method",
        "http_url",
        "http_version",
        "http_status",
        "http_reason",
    ],
}
DEFAULT_EVENT_KEY_ORDER = ["ts", "level", "logger"]


class StructuredTextFormatter(logging.Formatter):
    """Format all log records as human-readable structured blocks."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        # Blank line between entries, none after the last one.
        self._first_entry = True

    @staticmethod
    def _format_value(value: Any) -> str:
        return str(value).replace("\n", "\\n")

    @staticmethod
    def _ordered_keys(event_name: str, data: dict[str, Any]) -> list[str]:
        preferred = EVENT_KEY_ORDER.get(event_name, DEFAULT_EVENT_KEY_ORDER)
        preferred_present = [k for k in preferred if k in data and data[k] is not None]
        remaining = sorted(
            k for k in data.keys() if k not in preferred and data[k] is not None
        )
        return preferred_present + remaining

    def format(self, record: logging.LogRecord) -> str:
        base: dict[str, Any] = {
            "ts": datetime.now().astimezone().isoformat(),
            "level": record.levelname,
            "logger": record.name,
        }

        message = record.getMessage()
        parsed = None
        if message.startswith("{") and message.endswith("}"):
            try:
                parsed = json.loads(message)
            except ValueError:
                parsed = None

        if isinstance(parsed, dict):
            base.update(parsed)
        elif (
            record.name == "httpx"
            and isinstance(record.args, tuple)
            and len(record.args) == 5
            and str(record.msg) == 'HTTP Request: %s %s "%s %d %s"'
        ):
            method, url, version, status, reason = record.args
            base["event"] = "httpx_request"
            base["http_method"] = str(method)
            base["http_url"] = str(url)
            base["http_version"] = str(version)
            base["http_status"] = status
            base["http_reason"] = str(reason)
        else:
            base["event"] = record.name
            base["message"] = message

        event_name = str(base.pop("event", record.name))
        lines = [f"=== {event_name} ==="]
        for key in self._ordered_keys(event_name, base):
            lines.append(f"{key}: {self._format_value(base[key])}")

        if record.exc_info:
            lines.append("traceback:")
            lines.append(self.formatException(record.exc_info))

        body = "\n".join(lines)
        if self._first_entry:
            self._first_entry = False
            return body
        return "\n" + body


def _to_log_safe(value: Any) -> Any:
    """Convert values to JSON-serializable, log-safe representations."""
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, Path):
        return str(value)
    if isinstance(value, dict):
        return {str(k): _to_log_safe(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set)):
        return [_to_log_safe(v) for v in value]
    return str(value)


def extract_http_error_context(error: Exception) -> dict[str, Any]:
    """Extract safe HTTP context from an httpx exception when available."""
    context: dict[str, Any] = {}

    # httpx raises RuntimeError from .request/.response when they were never set.
    try:
        request = getattr(error, "request", None)
    except RuntimeError:
        request = None
    try:
        response = getattr(error, "response", None)
    except RuntimeError:
        response = None
    if request is None and response is not None:
        request = getattr(response, "request", None)

    if request is not None:
        method = getattr(request, "method", None)
        if method:
            context["http_method"] = str(method)
        url = getattr(request, "url", None)
        if url:
            context["http_url"] = str(url)

    if response is not None:
        version = getattr(response, "http_version", None)
        if version:
            context["http_version"] = str(version)
        status = getattr(response, "status_code", None)
        if status is not None:
            context["http_status"] = status
        reason = getattr(response, "reason_phrase", None)
        if reason:
            context["http_reason"] = str(reason)

    return context


def log_event(event: str, level: int = logging.INFO, **fields: Any) -> None:
    """Emit a structured log event."""
    payload: dict[str, Any] = {
        "ts": datetime.now().astimezone().isoformat(),
        "event": event,
    }
    for key, value in fields.items():
        payload[key] = _to_log_safe(value)
    logging.log(level, json.dumps(payload, ensure_ascii=False, separators=(",", ":")))


def setup_logging(log_file: str | None = None) -> None:
    """Route logging to log_file, or silence it when no file is configured."""
    if log_file:
        log_path = Path(log_file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(str(log_path), encoding="utf-8")
        handler.setFormatter(StructuredTextFormatter())
        logging.disable(logging.NOTSET)
        logging.basicConfig(level=logging.INFO, handlers=[handler], force=True)
    else:
        logging.disable(logging.CRITICAL)
