"""Shared HTTP client construction."""

from __future__ import annotations

import httpx

from .constants import USER_AGENT


def build_client(transport: httpx.BaseTransport | None = None) -> httpx.Client:
    """Build the blocking client used for index and page requests.

    Timeouts are left at httpx defaults. Tests pass an ``httpx.MockTransport``.
    """
    headers = {
        "User-Agent": USER_AGENT,
        "Accept": "application/json, text/markdown, text/plain, */*",
    }
    return httpx.Client(
        headers=headers,
        follow_redirects=True,
        transport=transport,
    )
