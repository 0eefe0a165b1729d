"""Pydantic models for calendar view styling."""

from calview.models.color import Color, Colors
from calview.models.text_style import FontStyle, FontWeight, TextStyle
from calview.models.view_header_style import ViewHeaderStyle

__all__ = [
    "Color",
    "Colors",
    "FontStyle",
    "FontWeight",
    "TextStyle",
    "ViewHeaderStyle",
]
