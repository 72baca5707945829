"""ANSI style table and helpers."""

from __future__ import annotations

import re
from types import MappingProxyType

STYLES = MappingProxyType(
    {
        "bold": "\033[1m",
        "end": "\033[0m",
        "black": "\033[0;30m",
        "red": "\033[0;31m",
        "green": "\033[0;32m",
        "yellow": "\033[0;33m",
        "blue": "\033[0;34m",
        "magenta": "\033[0;35m",
        "cyan": "\033[0;36m",
        "white": "\033[0;37m",
        "blue_underline": "\033[4;34m",
        "bold_red": "\033[1;31m",
    }
)

BOLD = STYLES["bold"]
END = STYLES["end"]
GREEN = STYLES["green"]
BLUE_UNDERLINE = STYLES["blue_underline"]
BOLD_RED = STYLES["bold_red"]

_ANSI_SGR_RE = re.compile(r"\x1b\[[0-9;]*m")


def paint(text: str, *style_names: str) -> str:
    """Wrap text in the named styles followed by a reset."""
    prefix = "".join(STYLES[name] for name in style_names)
    return f"{prefix}{text}{END}"


def strip_styles(text: str) -> str:
    """Remove every ANSI SGR escape sequence from text."""
    return _ANSI_SGR_RE.sub("", text)
