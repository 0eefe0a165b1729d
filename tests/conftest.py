import logging

import pytest

from calview.models.color import Colors
from calview.models.text_style import TextStyle
from calview.models.view_header_style import ViewHeaderStyle


@pytest.fixture
def full_style():
    """A view header style with every field set."""
    return ViewHeaderStyle(
        background_color=Colors.blue,
        date_text_style=TextStyle(color=Colors.grey, font_size=25),
        day_text_style=TextStyle(color=Colors.grey, font_size=20),
        today_background_color=Colors.amber,
        weekend_background_color=Colors.teal,
    )


@pytest.fixture
def cli_env(tmp_path, monkeypatch):
    """Point CLI logging at a temp dir and restore root handlers afterwards."""
    monkeypatch.setenv("CALVIEW_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.delenv("CALVIEW_DISPLAY_FORMAT", raising=False)
    monkeypatch.delenv("CALVIEW_SHOW_DEFAULTS", raising=False)

    root_logger = logging.getLogger()
    saved_handlers = root_logger.handlers[:]
    saved_level = root_logger.level

    yield tmp_path

    for handler in root_logger.handlers[:]:
        if handler not in saved_handlers:
            root_logger.removeHandler(handler)
            handler.close()
    for handler in saved_handlers:
        if handler not in root_logger.handlers:
            root_logger.addHandler(handler)
    root_logger.setLevel(saved_level)
