"""Typed exceptions for tldrview.

Each error carries the process exit code that cli.main() returns for it.
"""

from __future__ import annotations

from .constants import (
    EXIT_INDEX_ERROR,
    EXIT_NOT_FOUND,
    EXIT_PAGE_ERROR,
    EXIT_USAGE,
)


class TldrviewError(Exception):
    """Base exception for tldrview failures."""

    exit_code = 1


class UsageError(TldrviewError):
    """Raised when command-line arguments are missing or invalid."""

    exit_code = EXIT_USAGE


class ConfigError(TldrviewError):
    """Raised when an environment setting holds an invalid value."""

    exit_code = EXIT_USAGE


class IndexParseError(TldrviewError):
    """Raised when the command index cannot be fetched or decoded."""

    exit_code = EXIT_INDEX_ERROR


class PageFetchError(TldrviewError):
    """Raised when a page cannot be fetched or decoded."""

    exit_code = EXIT_PAGE_ERROR


class CommandNotFoundError(TldrviewError):
    exit_code = EXIT_NOT_FOUND

    def __init__(self, name: str) -> None:
        super().__init__(f"No page for command '{name}'.")
        self.name = name
