"""Tests for configuration."""

from pathlib import Path

import pytest

from calview.config import StyleConfig


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in (
        "CALVIEW_LOG_DIR",
        "CALVIEW_LOG_FILENAME",
        "CALVIEW_DISPLAY_FORMAT",
        "CALVIEW_SHOW_DEFAULTS",
    ):
        monkeypatch.delenv(key, raising=False)


def test_style_config_defaults():
    """Test StyleConfig default values."""
    config = StyleConfig()
    assert config.log_dir == Path("logs")
    assert config.log_filename == "calview.log"
    assert config.display_format == "tree"
    assert config.show_defaults is True


def test_style_config_from_env_all_vars(monkeypatch):
    """Test loading all config values from environment."""
    monkeypatch.setenv("CALVIEW_LOG_DIR", "/custom/logs")
    monkeypatch.setenv("CALVIEW_LOG_FILENAME", "styles.log")
    monkeypatch.setenv("CALVIEW_DISPLAY_FORMAT", "Table")
    monkeypatch.setenv("CALVIEW_SHOW_DEFAULTS", "no")

    config = StyleConfig.from_env()
    assert config.log_dir == Path("/custom/logs")
    assert config.log_filename == "styles.log"
    assert config.display_format == "table"
    assert config.show_defaults is False


def test_style_config_invalid_display_format(monkeypatch):
    """Test invalid CALVIEW_DISPLAY_FORMAT falls back to default."""
    monkeypatch.setenv("CALVIEW_DISPLAY_FORMAT", "xml")
    assert StyleConfig.from_env().display_format == "tree"


def test_style_config_invalid_show_defaults(monkeypatch):
    """Test invalid CALVIEW_SHOW_DEFAULTS falls back to default."""
    monkeypatch.setenv("CALVIEW_SHOW_DEFAULTS", "maybe")
    assert StyleConfig.from_env().show_defaults is True


def test_style_config_rejects_unknown_display_format():
    """Test direct construction validates the display format."""
    with pytest.raises(ValueError):
        StyleConfig(display_format="xml")


def test_style_config_records_ignored_env(monkeypatch):
    """Test invalid values are listed as ignored."""
    monkeypatch.setenv("CALVIEW_DISPLAY_FORMAT", "xml")
    monkeypatch.setenv("CALVIEW_SHOW_DEFAULTS", "false")
    config = StyleConfig.from_env()
    assert config.ignored_env == ["CALVIEW_DISPLAY_FORMAT"]
    assert config.show_defaults is False


def test_style_config_no_ignored_env_by_default():
    """Test a clean environment ignores nothing."""
    assert StyleConfig.from_env().ignored_env == []
