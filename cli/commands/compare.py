"""Compare two view header styles."""

import logging

import typer
from typing_extensions import Annotated

from calview.exceptions import StyleError
from cli.display import DiagnosticsRenderer
from cli.utils import exit_on_style_error, parse_style_json

logger = logging.getLogger(__name__)


def compare(
    left: Annotated[
        str,
        typer.Argument(help="First style as a JSON object"),
    ],
    right: Annotated[
        str,
        typer.Argument(help="Second style as a JSON object"),
    ],
) -> None:
    """Compare two view header styles for equality.

    Prints both hashes and the fields that differ. Exits with status 0 when
    the styles are equal and 1 when they differ.

    Examples:
        calview compare '{"backgroundColor": "blue"}' '{"background_color": "#2196f3"}'
        calview compare '{}' '{"todayBackgroundColor": "red"}'
    """
    try:
        left_style = parse_style_json(left)
        right_style = parse_style_json(right)
    except StyleError as e:
        exit_on_style_error(e)

    DiagnosticsRenderer().render_comparison(left_style, right_style)

    if left_style != right_style:
        logger.info("Styles differ")
        raise typer.Exit(1)
