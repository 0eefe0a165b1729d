"""Styling value objects for the calendar view header."""

from calview.diagnostics import (
    ColorProperty,
    DiagnosticPropertiesBuilder,
    Diagnosticable,
    DiagnosticsProperty,
)
from calview.models import (
    Color,
    Colors,
    FontStyle,
    FontWeight,
    TextStyle,
    ViewHeaderStyle,
)

__all__ = [
    "Color",
    "ColorProperty",
    "Colors",
    "DiagnosticPropertiesBuilder",
    "Diagnosticable",
    "DiagnosticsProperty",
    "FontStyle",
    "FontWeight",
    "TextStyle",
    "ViewHeaderStyle",
]
