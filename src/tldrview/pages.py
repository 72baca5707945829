"""Page path resolution and fetching."""

from __future__ import annotations

import logging
import time

import httpx

from .constants import PAGE_ERROR_MESSAGE, PAGE_SUFFIX
from .errors import PageFetchError
from .logging_utils import extract_http_error_context, log_event
from .models import Command, Platform


def resolve_platform(command: Command, platform: Platform | str) -> str:
    """Return the requested platform if the command has it, else its first one."""
    requested = platform.value if isinstance(platform, Platform) else platform
    if requested in command.platforms:
        return requested
    return command.platforms[0]


def build_page_url(base_url: str, command: Command, platform: Platform | str) -> str:
    segment = resolve_platform(command, platform)
    return f"{base_url.rstrip('/')}/{segment}/{command.name}{PAGE_SUFFIX}"


def fetch_page(
    client: httpx.Client,
    base_url: str,
    command: Command,
    platform: Platform | str,
) -> list[str]:
    """Download one page and split it into lines.

    Raises:
        PageFetchError: on any network, URL, HTTP status, or decode failure.
    """
    url = build_page_url(base_url, command, platform)
    started = time.perf_counter()
    try:
        response = client.get(url)
        response.raise_for_status()
        text = response.content.decode("utf-8")
    except (httpx.HTTPError, httpx.InvalidURL, UnicodeDecodeError) as exc:
        log_event(
            "fetch_error",
            level=logging.ERROR,
            operation="page",
            url=url,
            error_type=type(exc).__name__,
            error=str(exc),
            **extract_http_error_context(exc),
        )
        raise PageFetchError(PAGE_ERROR_MESSAGE) from exc

    lines = text.split("\n")
    log_event(
        "page_fetch",
        command=command.name,
        platform=resolve_platform(command, platform),
        url=url,
        line_count=len(lines),
        elapsed_ms=round((time.perf_counter() - started) * 1000, 1),
    )
    return lines
