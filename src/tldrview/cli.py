"""CLI entry and startup wiring.

main() is the only place that turns errors into process exit codes.
"""

from __future__ import annotations

import logging
import sys
import time
from collections.abc import Sequence
from typing import cast

import httpx

from .args import parse_args
from .config import Settings, load_settings
from .constants import (
    CONTRIBUTE_PREFIX,
    CONTRIBUTE_URL,
    EXIT_NOT_FOUND,
    EXIT_OK,
    LIST_INDENT,
    NOT_FOUND_MESSAGE,
)
from .errors import CommandNotFoundError, TldrviewError, UsageError
from .http_client import build_client
from .index import fetch_index, find_command
from .logging_utils import log_event, setup_logging
from .models import AppArgs
from .pages import fetch_page
from .renderer import render_page
from .styles import paint, strip_styles


def main(
    argv: Sequence[str] | None = None,
    *,
    client: httpx.Client | None = None,
    settings: Settings | None = None,
) -> int:
    args_list = list(sys.argv[1:] if argv is None else argv)
    app_started = time.perf_counter()

    try:
        settings = settings if settings is not None else load_settings()
    except TldrviewError as exc:
        print(f"Error: {exc}")
        return exc.exit_code

    setup_logging(settings.log_file)
    out = _Output(color=settings.color)
    log_event(
        "app_start",
        argv=args_list,
        index_url=settings.index_url,
        pages_url=settings.pages_url,
        default_platform=settings.default_platform.value,
    )

    try:
        app_args = parse_args(args_list, default_platform=settings.default_platform)
    except UsageError as exc:
        if str(exc):
            out.emit(f"{exc}\n")
        out.emit(render_usage())
        return _stop("usage", exc.exit_code, app_started)

    if client is not None:
        exit_code = _run(app_args, client, settings, out)
    else:
        with build_client() as owned_client:
            exit_code = _run(app_args, owned_client, settings, out)
    return _stop("normal" if exit_code == EXIT_OK else "error", exit_code, app_started)


def _run(app_args: AppArgs, client: httpx.Client, settings: Settings, out: _Output) -> int:
    try:
        commands = fetch_index(client, settings.index_url)

        if app_args.list_requested:
            for command in commands:
                out.emit(f"{LIST_INDENT}{command.name}")
            return EXIT_OK

        # parse_args only returns without a command when --list was given.
        command = find_command(commands, cast(str, app_args.command))
        lines = fetch_page(client, settings.pages_url, command, app_args.platform)
    except CommandNotFoundError as exc:
        log_event("command_not_found", level=logging.WARNING, command=exc.name)
        out.emit(NOT_FOUND_MESSAGE)
        out.emit(CONTRIBUTE_PREFIX + paint(CONTRIBUTE_URL, "blue_underline"))
        return EXIT_NOT_FOUND
    except TldrviewError as exc:
        out.emit(str(exc))
        return exc.exit_code

    for rendered in render_page(lines):
        out.emit(rendered)
    return EXIT_OK


def render_usage() -> str:
    command = paint("tldrview ", "bold_red") + paint("<command>", "blue_underline")
    os_flag = paint(" --os=", "bold_red") + paint("linux", "blue_underline")
    return "\n".join(
        (
            "Usage:",
            f"{LIST_INDENT}{command}",
            f"{LIST_INDENT}{command}{os_flag}",
            f"{LIST_INDENT}{paint('tldrview --list', 'bold_red')}",
        )
    )


class _Output:
    """stdout writer that drops ANSI styles when color is disabled."""

    def __init__(self, *, color: bool) -> None:
        self._color = color

    def emit(self, text: str) -> None:
        print(text if self._color else strip_styles(text))


def _stop(reason: str, exit_code: int, started: float) -> int:
    log_event(
        "app_stop",
        reason=reason,
        exit_code=exit_code,
        uptime_ms=round((time.perf_counter() - started) * 1000, 1),
    )
    return exit_code
