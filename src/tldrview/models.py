"""Dataclasses and enums shared across tldrview layers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Platform(str, Enum):
    LINUX = "linux"
    OSX = "osx"
    WINDOWS = "windows"
    ANDROID = "android"
    SUNOS = "sunos"
    FREEBSD = "freebsd"
    NETBSD = "netbsd"
    OPENBSD = "openbsd"


DEFAULT_PLATFORM = Platform.OSX


def parse_platform(value: str) -> Platform | None:
    """Return the Platform named by value, or None if it is not recognized."""
    try:
        return Platform(value)
    except ValueError:
        return None


@dataclass(frozen=True)
class Command:
    name: str
    platforms: tuple[str, ...]


@dataclass(frozen=True)
class AppArgs:
    command: str | None
    platform: Platform
    list_requested: bool = False
