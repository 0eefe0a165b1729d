"""Configuration for the style inspection tools."""

import os
from pathlib import Path
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, Field

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _read_env() -> tuple[dict, list[str]]:
    """Collect config values from the environment.

    Returns:
        The accepted values keyed by field name, and the names of variables
        that were set but held values that could not be used.
    """
    config_dict = {}
    ignored = []

    # Logging
    if "CALVIEW_LOG_DIR" in os.environ:
        config_dict["log_dir"] = Path(os.environ["CALVIEW_LOG_DIR"])
    if "CALVIEW_LOG_FILENAME" in os.environ:
        config_dict["log_filename"] = os.environ["CALVIEW_LOG_FILENAME"]

    # Display defaults
    if "CALVIEW_DISPLAY_FORMAT" in os.environ:
        display_format = os.environ["CALVIEW_DISPLAY_FORMAT"].strip().lower()
        if display_format in ("tree", "table"):
            config_dict["display_format"] = display_format
        else:
            ignored.append("CALVIEW_DISPLAY_FORMAT")

    if "CALVIEW_SHOW_DEFAULTS" in os.environ:
        show_defaults = os.environ["CALVIEW_SHOW_DEFAULTS"].strip().lower()
        if show_defaults in _TRUE_VALUES:
            config_dict["show_defaults"] = True
        elif show_defaults in _FALSE_VALUES:
            config_dict["show_defaults"] = False
        else:
            ignored.append("CALVIEW_SHOW_DEFAULTS")

    return config_dict, ignored


class StyleConfig(BaseModel):
    """Style tooling configuration with Pydantic validation."""

    # Logging
    log_dir: Path = Field(default=Path("logs"))
    log_filename: str = Field(default="calview.log")

    # Display defaults
    display_format: Literal["tree", "table"] = Field(default="tree")
    show_defaults: bool = Field(default=True)

    # Variables that were set but fell back to the default
    ignored_env: list[str] = Field(default_factory=list, exclude=True)

    @classmethod
    def from_env(cls) -> "StyleConfig":
        """Load configuration from environment variables and .env file.

        Invalid values keep the default and are listed in ``ignored_env``.
        """
        load_dotenv()
        config_dict, ignored = _read_env()
        return cls(**config_dict, ignored_env=ignored)
