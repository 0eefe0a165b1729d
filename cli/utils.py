"""CLI helpers for building styles from command-line input."""

import logging

import pydantic
import typer
from rich.markup import escape

from calview.exceptions import StyleError, ValidationError
from calview.models.view_header_style import ViewHeaderStyle
from cli.display import console

logger = logging.getLogger(__name__)


def _text_style_data(
    color: str | None, font_size: float | None, font_weight: str | None
) -> dict | None:
    data = {"color": color, "font_size": font_size, "font_weight": font_weight}
    data = {key: value for key, value in data.items() if value is not None}
    return data or None


def build_view_header_style(
    background_color: str | None = None,
    today_background_color: str | None = None,
    weekend_background_color: str | None = None,
    day_color: str | None = None,
    day_font_size: float | None = None,
    day_font_weight: str | None = None,
    date_color: str | None = None,
    date_font_size: float | None = None,
    date_font_weight: str | None = None,
) -> ViewHeaderStyle:
    """Build a style from flat command-line values.

    Text styles are only created when at least one of their options is set,
    so omitted options stay absent rather than becoming empty styles.

    Raises:
        ValidationError: If any value cannot be converted.
    """
    data = {
        "background_color": background_color,
        "today_background_color": today_background_color,
        "weekend_background_color": weekend_background_color,
        "day_text_style": _text_style_data(day_color, day_font_size, day_font_weight),
        "date_text_style": _text_style_data(
            date_color, date_font_size, date_font_weight
        ),
    }
    try:
        return ViewHeaderStyle.model_validate(data)
    except pydantic.ValidationError as e:
        raise ValidationError(str(e)) from e


def parse_style_json(text: str) -> ViewHeaderStyle:
    """Validate a style from an inline JSON object.

    Both snake_case and camelCase field names are accepted.

    Raises:
        ValidationError: If the text is not valid JSON or fails validation.
    """
    try:
        return ViewHeaderStyle.model_validate_json(text)
    except pydantic.ValidationError as e:
        raise ValidationError(str(e)) from e


def exit_on_style_error(error: StyleError) -> None:
    """Log a style error, report it on the console and exit with status 2."""
    logger.error(f"Style error: {error}")
    console.print(f"[red]Error:[/red] {escape(str(error))}")
    raise typer.Exit(2)
