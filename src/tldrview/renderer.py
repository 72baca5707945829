"""Markdown page lines to styled terminal text.

Each line is handled on its own, by the first matching prefix:

- ``# `` title, bold, preceded by a blank line
- ``>``  description, marker dropped, plain
- ``-``  example comment, bold green
- ``` ` ``` example code, bold red with ``{{placeholders}}`` underlined blue
- anything else passes through unchanged

Malformed markdown is not validated; it simply renders imperfectly.
"""

from __future__ import annotations

from collections.abc import Iterable

from .styles import BLUE_UNDERLINE, BOLD, BOLD_RED, END, GREEN


def render_page(lines: Iterable[str]) -> list[str]:
    return [render_line(line) for line in lines]


def render_line(line: str) -> str:
    if line.startswith("#"):
        return _render_title(line)
    if line.startswith(">"):
        return line[2:]
    if line.startswith("-"):
        return f"{GREEN}{BOLD}{line}{END}"
    if line.startswith("`"):
        return _render_code(line)
    return line


def _render_title(line: str) -> str:
    # Only a "# " marker opens a title; "#foo" keeps its text, unstyled.
    if not line.startswith("# "):
        return f"{line}{END}"
    return f"\n{BOLD}{line[2:]}{END}"


def _render_code(line: str) -> str:
    shifted = line[:-1].replace("`", "  ")
    shifted = shifted.replace("{{", END + BLUE_UNDERLINE)
    shifted = shifted.replace("}}", END + BOLD_RED)
    return f"{BOLD_RED}{shifted}{END}"
