"""Tests for CLI logging setup."""

import logging

import pytest

from calview.config import StyleConfig
from cli import setup_logging


@pytest.mark.parametrize(
    "verbose, quiet, expected",
    [
        (False, False, logging.WARNING),
        (True, False, logging.INFO),
        (False, True, logging.ERROR),
        (True, True, logging.ERROR),
    ],
)
def test_console_level(cli_env, verbose, quiet, expected):
    """Test console verbosity flags."""
    setup_logging(verbose=verbose, quiet=quiet, config=StyleConfig(log_dir=cli_env))
    levels = [
        handler.level
        for handler in logging.getLogger().handlers
        if not isinstance(handler, logging.FileHandler)
    ]
    assert levels == [expected]


def test_repeated_setup_does_not_stack_handlers(cli_env):
    """Test calling setup twice leaves one file and one console handler."""
    config = StyleConfig(log_dir=cli_env)
    setup_logging(config=config)
    setup_logging(config=config)
    assert len(logging.getLogger().handlers) == 2


def test_ignored_env_is_logged_to_file(cli_env, monkeypatch):
    """Test invalid configuration values are recorded in the log file."""
    monkeypatch.setenv("CALVIEW_LOG_DIR", str(cli_env))
    monkeypatch.setenv("CALVIEW_SHOW_DEFAULTS", "maybe")
    setup_logging()
    for handler in logging.getLogger().handlers:
        handler.flush()
    log_text = (cli_env / "calview.log").read_text()
    assert "Ignoring invalid value for CALVIEW_SHOW_DEFAULTS" in log_text
