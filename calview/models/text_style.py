"""Text style primitive."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from calview.diagnostics import (
    ColorProperty,
    DiagnosticPropertiesBuilder,
    Diagnosticable,
    DiagnosticsProperty,
)
from calview.models.color import Color


class FontWeight(str, Enum):
    """Font weight enumeration (thickness of the glyphs)."""

    W100 = "w100"
    W200 = "w200"
    W300 = "w300"
    W400 = "w400"
    W500 = "w500"
    W600 = "w600"
    W700 = "w700"
    W800 = "w800"
    W900 = "w900"

    @classmethod
    def parse(cls, text: str) -> "FontWeight":
        """Parse ``w700``, ``700``, ``bold`` or ``normal``."""
        key = text.strip().lower()
        aliases = {"normal": cls.W400, "bold": cls.W700}
        if key in aliases:
            return aliases[key]
        if key.isdigit():
            key = f"w{key}"
        return cls(key)


class FontStyle(str, Enum):
    """Font style enumeration."""

    NORMAL = "normal"
    ITALIC = "italic"


class TextStyle(Diagnosticable, BaseModel):
    """Immutable description of how text is painted.

    Fields also accept their camelCase names (``fontSize=...``).
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )

    color: Optional[Color] = None
    font_size: Optional[float] = Field(default=None, gt=0)
    font_weight: Optional[FontWeight] = None
    font_style: Optional[FontStyle] = None
    font_family: Optional[str] = None
    letter_spacing: Optional[float] = None
    height: Optional[float] = None

    @field_validator("color", mode="before")
    @classmethod
    def convert_color_string(cls, v):
        """Convert hex or palette-name strings to Color."""
        if isinstance(v, str):
            return Color.parse(v)
        return v

    @field_validator("font_weight", mode="before")
    @classmethod
    def convert_font_weight(cls, v):
        """Accept ``bold``/``normal``/numeric weights as well as enum values."""
        if isinstance(v, str):
            return FontWeight.parse(v)
        if isinstance(v, int) and not isinstance(v, bool):
            return FontWeight.parse(str(v))
        return v

    def merge(self, other: "TextStyle | None") -> "TextStyle":
        """Return a copy where fields set on ``other`` override this style."""
        if other is None:
            return self
        overrides = other.model_dump(exclude_none=True)
        if not overrides:
            return self
        return self.model_copy(
            update={name: getattr(other, name) for name in overrides}
        )

    def debug_fill_properties(self, properties: DiagnosticPropertiesBuilder) -> None:
        super().debug_fill_properties(properties)
        properties.add(ColorProperty("color", self.color))
        properties.add(DiagnosticsProperty("font_size", self.font_size))
        properties.add(
            DiagnosticsProperty(
                "font_weight", self.font_weight.value if self.font_weight else None
            )
        )
        properties.add(
            DiagnosticsProperty(
                "font_style", self.font_style.value if self.font_style else None
            )
        )
        properties.add(DiagnosticsProperty("font_family", self.font_family))
        properties.add(DiagnosticsProperty("letter_spacing", self.letter_spacing))
        properties.add(DiagnosticsProperty("height", self.height))
