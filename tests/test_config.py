"""Tests for environment-driven settings."""

import pytest

from tldrview.config import load_settings
from tldrview.constants import DEFAULT_INDEX_URL, DEFAULT_PAGES_URL
from tldrview.errors import ConfigError
from tldrview.models import Platform


def test_defaults_with_empty_environment() -> None:
    settings = load_settings({})
    assert settings.index_url == DEFAULT_INDEX_URL
    assert settings.pages_url == DEFAULT_PAGES_URL
    assert settings.default_platform is Platform.OSX
    assert settings.log_file is None
    assert settings.color is True


def test_overrides_are_read_and_trimmed() -> None:
    settings = load_settings(
        {
            "TLDRVIEW_INDEX_URL": " https://mirror.test/index.json ",
            "TLDRVIEW_PAGES_URL": "https://mirror.test/pages/",
            "TLDRVIEW_PLATFORM": "linux",
            "TLDRVIEW_LOG": "/tmp/tldrview.log",
            "NO_COLOR": "1",
        }
    )
    assert settings.index_url == "https://mirror.test/index.json"
    assert settings.pages_url == "https://mirror.test/pages"
    assert settings.default_platform is Platform.LINUX
    assert settings.log_file == "/tmp/tldrview.log"
    assert settings.color is False


def test_blank_values_fall_back_to_defaults() -> None:
    settings = load_settings({"TLDRVIEW_INDEX_URL": "  ", "NO_COLOR": ""})
    assert settings.index_url == DEFAULT_INDEX_URL
    assert settings.color is True


def test_unknown_platform_is_config_error() -> None:
    with pytest.raises(ConfigError, match="TLDRVIEW_PLATFORM"):
        load_settings({"TLDRVIEW_PLATFORM": "amiga"})


def test_reads_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TLDRVIEW_PLATFORM", "windows")
    assert load_settings().default_platform is Platform.WINDOWS
