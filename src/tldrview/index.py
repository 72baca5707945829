"""Remote command index fetching and decoding."""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from typing import Any

import httpx

from .constants import INDEX_ERROR_MESSAGE
from .errors import CommandNotFoundError, IndexParseError
from .logging_utils import extract_http_error_context, log_event
from .models import Command


def fetch_index(client: httpx.Client, url: str) -> list[Command]:
    """Download and decode the full command index.

    Raises:
        IndexParseError: on any network, URL, HTTP status, or payload failure.
    """
    started = time.perf_counter()
    try:
        response = client.get(url)
        response.raise_for_status()
        commands = decode_index(response.json())
    except (httpx.HTTPError, httpx.InvalidURL, ValueError, IndexParseError) as exc:
        log_event(
            "fetch_error",
            level=logging.ERROR,
            operation="index",
            url=url,
            error_type=type(exc).__name__,
            error=str(exc),
            **extract_http_error_context(exc),
        )
        if isinstance(exc, IndexParseError):
            raise
        raise IndexParseError(INDEX_ERROR_MESSAGE) from exc

    log_event(
        "index_fetch",
        url=url,
        command_count=len(commands),
        elapsed_ms=round((time.perf_counter() - started) * 1000, 1),
    )
    return commands


def decode_index(payload: Any) -> list[Command]:
    """Decode an index payload, either a bare array or ``{"commands": [...]}``."""
    if isinstance(payload, dict):
        payload = payload.get("commands")
    if not isinstance(payload, list):
        raise IndexParseError(INDEX_ERROR_MESSAGE)
    return [_decode_command(entry) for entry in payload]


def _decode_command(entry: Any) -> Command:
    if not isinstance(entry, dict):
        raise IndexParseError(INDEX_ERROR_MESSAGE)
    name = entry.get("name")
    platforms = entry.get("platform")
    if not isinstance(name, str) or not name:
        raise IndexParseError(INDEX_ERROR_MESSAGE)
    if not isinstance(platforms, list) or not platforms:
        raise IndexParseError(INDEX_ERROR_MESSAGE)
    if not all(isinstance(p, str) for p in platforms):
        raise IndexParseError(INDEX_ERROR_MESSAGE)
    return Command(name=name, platforms=tuple(platforms))


def find_command(commands: Sequence[Command], name: str) -> Command:
    """Return the first command whose name matches exactly.

    Raises:
        CommandNotFoundError: when no entry has that name.
    """
    for command in commands:
        if command.name == name:
            return command
    raise CommandNotFoundError(name)
