"""View header style model with Pydantic v2 validation."""

import logging
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from calview.diagnostics import (
    ColorProperty,
    DiagnosticPropertiesBuilder,
    Diagnosticable,
    DiagnosticsProperty,
)
from calview.models.color import Color
from calview.models.text_style import TextStyle

logger = logging.getLogger(__name__)


class ViewHeaderStyle(Diagnosticable, BaseModel):
    """Style for the view header of a calendar.

    The view header is the row above the time grid that shows day names
    and dates. Every field is optional; a field left as ``None`` means the
    renderer falls back to the theme default for that part of the header.

    Example::

        ViewHeaderStyle(
            background_color=Colors.blue,
            day_text_style=TextStyle(color=Colors.grey, font_size=20),
            date_text_style=TextStyle(color=Colors.grey, font_size=25),
        )

    Fields also accept their camelCase names (``backgroundColor=...``).
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )

    # Fills the background of the whole view header
    background_color: Optional[Color] = None
    # Date text; not used in month view, and its color is not applied to
    # today's cell in day/week/work week views
    date_text_style: Optional[TextStyle] = None
    # Day name text
    day_text_style: Optional[TextStyle] = None
    # Background of the cell for today's date
    today_background_color: Optional[Color] = None
    # Background of the cells for weekend dates
    weekend_background_color: Optional[Color] = None

    @field_validator(
        "background_color",
        "today_background_color",
        "weekend_background_color",
        mode="before",
    )
    @classmethod
    def convert_color_string(cls, v):
        """Convert hex or palette-name strings to Color."""
        if isinstance(v, str):
            return Color.parse(v)
        return v

    def _key(self) -> tuple:
        return (
            self.background_color,
            self.day_text_style,
            self.date_text_style,
            self.today_background_color,
            self.weekend_background_color,
        )

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if type(other) is not type(self):
            return False
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def merge(self, other: "ViewHeaderStyle | None") -> "ViewHeaderStyle":
        """Layer ``other`` over this style.

        Fields set on ``other`` win. Text styles set on both sides are merged
        field by field, so a caller can override only the font size of a
        themed day label.
        """
        if other is None:
            return self

        updates = {}
        for name in type(self).model_fields:
            value = getattr(other, name)
            if value is None:
                continue
            current = getattr(self, name)
            if isinstance(value, TextStyle) and isinstance(current, TextStyle):
                value = current.merge(value)
            updates[name] = value

        if not updates:
            return self
        logger.debug(f"Merging view header style fields: {sorted(updates)}")
        return self.model_copy(update=updates)

    def debug_fill_properties(self, properties: DiagnosticPropertiesBuilder) -> None:
        super().debug_fill_properties(properties)
        properties.add(DiagnosticsProperty("day_text_style", self.day_text_style))
        properties.add(DiagnosticsProperty("date_text_style", self.date_text_style))
        properties.add(ColorProperty("background_color", self.background_color))
        properties.add(
            ColorProperty("today_background_color", self.today_background_color)
        )
        properties.add(
            ColorProperty("weekend_background_color", self.weekend_background_color)
        )
