"""Environment-driven runtime settings."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from .constants import (
    DEFAULT_INDEX_URL,
    DEFAULT_PAGES_URL,
    ENV_INDEX_URL,
    ENV_LOG_FILE,
    ENV_NO_COLOR,
    ENV_PAGES_URL,
    ENV_PLATFORM,
)
from .errors import ConfigError
from .models import DEFAULT_PLATFORM, Platform, parse_platform


@dataclass(frozen=True)
class Settings:
    index_url: str = DEFAULT_INDEX_URL
    pages_url: str = DEFAULT_PAGES_URL
    default_platform: Platform = DEFAULT_PLATFORM
    log_file: str | None = None
    color: bool = True


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from environment variables, falling back to defaults."""
    env = os.environ if environ is None else environ

    index_url = _env_value(env, ENV_INDEX_URL) or DEFAULT_INDEX_URL
    pages_url = (_env_value(env, ENV_PAGES_URL) or DEFAULT_PAGES_URL).rstrip("/")

    default_platform = DEFAULT_PLATFORM
    platform_raw = _env_value(env, ENV_PLATFORM)
    if platform_raw:
        parsed = parse_platform(platform_raw)
        if parsed is None:
            raise ConfigError(f"{ENV_PLATFORM} has unknown platform '{platform_raw}'.")
        default_platform = parsed

    return Settings(
        index_url=index_url,
        pages_url=pages_url,
        default_platform=default_platform,
        log_file=_env_value(env, ENV_LOG_FILE),
        color=not _env_value(env, ENV_NO_COLOR),
    )


def _env_value(env: Mapping[str, str], name: str) -> str | None:
    value = (env.get(name) or "").strip()
    return value or None
