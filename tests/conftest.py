"""Pytest configuration and fixtures for tldrview tests."""

from __future__ import annotations

import logging

import httpx
import pytest

from test_helpers import INDEX_URL, PAGES_URL, FakeUpstream
from tldrview.config import Settings
from tldrview.http_client import build_client


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def client(upstream: FakeUpstream):
    with build_client(httpx.MockTransport(upstream.handler)) as http_client:
        yield http_client


@pytest.fixture
def settings() -> Settings:
    return Settings(index_url=INDEX_URL, pages_url=PAGES_URL)


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo logging.disable() and file handlers installed by setup_logging()."""
    yield
    logging.disable(logging.NOTSET)
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
