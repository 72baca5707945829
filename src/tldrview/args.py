"""Command-line argument parsing."""

from __future__ import annotations

from collections.abc import Sequence

from .constants import UNKNOWN_OS_MESSAGE
from .errors import UsageError
from .models import DEFAULT_PLATFORM, AppArgs, Platform, parse_platform

_OS_FLAG = "--os="
_LIST_FLAG = "--list"


def parse_args(
    argv: Sequence[str],
    *,
    default_platform: Platform = DEFAULT_PLATFORM,
) -> AppArgs:
    """Interpret argv (without program name) left to right.

    ``--list`` ends parsing immediately. Unknown ``--`` flags print a warning
    and are skipped. The last bare token is the command name.

    Raises:
        UsageError: when argv is empty, no command name is given, or
            ``--os=`` names an unknown platform.
    """
    if not argv:
        raise UsageError()

    command: str | None = None
    platform = default_platform

    for argument in argv:
        if argument.startswith(_OS_FLAG):
            parsed = parse_platform(argument[len(_OS_FLAG):])
            if parsed is None:
                raise UsageError(UNKNOWN_OS_MESSAGE)
            platform = parsed
        elif argument == _LIST_FLAG:
            return AppArgs(command=command, platform=platform, list_requested=True)
        elif argument.startswith("--"):
            print(f"Unknown parameter {argument}.\n")
        else:
            command = argument

    if command is None:
        raise UsageError()

    return AppArgs(command=command, platform=platform)
