"""Display module for rendering style diagnostics.

This module provides:
- console: Shared Rich console instance
- DiagnosticsRenderer: tree/table views of diagnosticable objects and
  side-by-side style comparisons
- Formatting functions for colors and property values
"""

from cli.display.console import console
from cli.display.diagnostics_renderer import DiagnosticsRenderer
from cli.display.formatters import format_color, format_property, format_value

__all__ = [
    "console",
    "DiagnosticsRenderer",
    "format_color",
    "format_property",
    "format_value",
]
