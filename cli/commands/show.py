"""Display the diagnostics of a view header style."""

import logging

import typer
from typing_extensions import Annotated

from calview.exceptions import StyleError
from cli.context import get_context
from cli.display import DiagnosticsRenderer
from cli.utils import build_view_header_style, exit_on_style_error

logger = logging.getLogger(__name__)


def show(
    background_color: Annotated[
        str | None,
        typer.Option("--background-color", "-b", help="Header background color"),
    ] = None,
    today_background_color: Annotated[
        str | None,
        typer.Option("--today-background-color", help="Background of today's cell"),
    ] = None,
    weekend_background_color: Annotated[
        str | None,
        typer.Option("--weekend-background-color", help="Background of weekend cells"),
    ] = None,
    day_color: Annotated[
        str | None,
        typer.Option("--day-color", help="Day name text color"),
    ] = None,
    day_font_size: Annotated[
        float | None,
        typer.Option("--day-font-size", help="Day name font size"),
    ] = None,
    day_font_weight: Annotated[
        str | None,
        typer.Option("--day-font-weight", help="Day name weight (bold, normal, w100-w900)"),
    ] = None,
    date_color: Annotated[
        str | None,
        typer.Option("--date-color", help="Date text color"),
    ] = None,
    date_font_size: Annotated[
        float | None,
        typer.Option("--date-font-size", help="Date font size"),
    ] = None,
    date_font_weight: Annotated[
        str | None,
        typer.Option("--date-font-weight", help="Date weight (bold, normal, w100-w900)"),
    ] = None,
    view: Annotated[
        str | None,
        typer.Option("--format", "-f", help="View mode: 'tree' or 'table'"),
    ] = None,
    hide_defaults: Annotated[
        bool,
        typer.Option("--hide-defaults", help="Hide properties that are not set"),
    ] = False,
) -> None:
    """Build a view header style and print its diagnostics.

    Colors are hex (#RRGGBB, #AARRGGBB, 0xAARRGGBB) or palette names.

    Examples:
        calview show -b blue --day-color grey --day-font-size 20
        calview show -b "#ff2196f3" --format table
        calview show --weekend-background-color amber --hide-defaults
    """
    ctx = get_context()
    config = ctx.config

    view = (view or config.display_format).lower()
    if view not in ("tree", "table"):
        raise typer.BadParameter(f"Invalid view mode: {view}. Use 'tree' or 'table'.")
    show_defaults = config.show_defaults and not hide_defaults

    try:
        style = build_view_header_style(
            background_color=background_color,
            today_background_color=today_background_color,
            weekend_background_color=weekend_background_color,
            day_color=day_color,
            day_font_size=day_font_size,
            day_font_weight=day_font_weight,
            date_color=date_color,
            date_font_size=date_font_size,
            date_font_weight=date_font_weight,
        )
    except StyleError as e:
        exit_on_style_error(e)

    logger.info(f"Rendering view header style ({view} view)")
    DiagnosticsRenderer().render(style, view=view, show_defaults=show_defaults)
