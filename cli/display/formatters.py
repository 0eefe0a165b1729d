"""Pure formatting functions for display output."""

from typing import Any

from rich.markup import escape

from calview.diagnostics import DiagnosticsProperty
from calview.models.color import Color


def format_color(color: Color | None) -> str:
    """Format a color as Rich markup with a swatch.

    Args:
        color: Color to format, or None.

    Returns:
        Markup such as ``[on #2196f3]  [/] #FF2196F3``; a dim ``null`` when
        the color is absent. Fully transparent colors get no swatch.
    """
    if color is None:
        return "[dim]null[/dim]"
    if color.alpha == 0:
        return f"{color.to_hex()} [dim](transparent)[/dim]"
    swatch = f"#{color.red:02x}{color.green:02x}{color.blue:02x}"
    return f"[on {swatch}]  [/] {color.to_hex()}"


def format_value(value: Any) -> str:
    """Format an arbitrary property value as Rich markup."""
    if value is None:
        return "[dim]null[/dim]"
    if isinstance(value, Color):
        return format_color(value)
    return escape(str(value))


def format_property(prop: DiagnosticsProperty) -> str:
    """Format a diagnostics property as ``name: value`` markup."""
    if prop.value is None or isinstance(prop.value, Color):
        rendered = format_value(prop.value)
    else:
        rendered = escape(prop.describe())
    return f"[cyan]{prop.name}[/cyan]: {rendered}"
