"""Color primitive and named palette."""

import logging
import re

from pydantic import BaseModel, ConfigDict, Field

from calview.exceptions import ColorParseError

logger = logging.getLogger(__name__)

_HEX_PATTERN = re.compile(r"^(?:#|0x)([0-9a-f]+)$", re.IGNORECASE)


class Color(BaseModel):
    """An immutable 32-bit ARGB color.

    The value is packed as 0xAARRGGBB, so Color(value=0xFF2196F3) is an
    opaque blue.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    value: int = Field(ge=0, le=0xFFFFFFFF)

    def __init__(self, value: int | None = None, **data):
        # Allow Color(0xFF2196F3) as well as Color(value=...)
        if value is not None:
            data["value"] = value
        super().__init__(**data)

    @property
    def alpha(self) -> int:
        return (self.value >> 24) & 0xFF

    @property
    def red(self) -> int:
        return (self.value >> 16) & 0xFF

    @property
    def green(self) -> int:
        return (self.value >> 8) & 0xFF

    @property
    def blue(self) -> int:
        return self.value & 0xFF

    @property
    def opacity(self) -> float:
        """Alpha channel as a fraction between 0.0 and 1.0."""
        return self.alpha / 0xFF

    @classmethod
    def from_argb(cls, a: int, r: int, g: int, b: int) -> "Color":
        """Create a color from four 8-bit channels."""
        return cls(
            value=((a & 0xFF) << 24) | ((r & 0xFF) << 16) | ((g & 0xFF) << 8) | (b & 0xFF)
        )

    @classmethod
    def from_rgbo(cls, r: int, g: int, b: int, opacity: float) -> "Color":
        """Create a color from 8-bit RGB channels and an opacity fraction."""
        return cls.from_argb(round(opacity * 0xFF), r, g, b)

    @classmethod
    def parse(cls, text: str) -> "Color":
        """Parse a color from hex notation or a palette name.

        Accepted forms: ``#RGB``, ``#RRGGBB``, ``#AARRGGBB``, ``0xAARRGGBB``
        and any name known to :class:`Colors` (case-insensitive). Six and
        three digit forms are treated as fully opaque.

        Raises:
            ColorParseError: If the text matches none of the forms above.
        """
        raw = text.strip()
        match = _HEX_PATTERN.match(raw)
        if match is None:
            named = Colors.lookup(raw)
            if named is None:
                raise ColorParseError(f"Invalid color: {text!r}")
            return named

        digits = match.group(1)
        if len(digits) == 3:
            digits = "ff" + "".join(ch * 2 for ch in digits)
        elif len(digits) == 6:
            digits = "ff" + digits
        elif len(digits) != 8:
            raise ColorParseError(f"Invalid color: {text!r}")

        color = cls(value=int(digits, 16))
        logger.debug(f"Parsed color {text!r} as {color}")
        return color

    def with_opacity(self, opacity: float) -> "Color":
        """Return a copy of this color with the alpha channel replaced."""
        if not 0.0 <= opacity <= 1.0:
            raise ValueError(f"Opacity must be between 0.0 and 1.0, got {opacity}")
        return Color.from_argb(round(opacity * 0xFF), self.red, self.green, self.blue)

    def to_hex(self) -> str:
        """Format as ``#AARRGGBB`` (upper case)."""
        return f"#{self.value:08X}"

    def __str__(self) -> str:
        return f"Color(0x{self.value:08x})"


class Colors:
    """Named palette of commonly used colors (Material primaries)."""

    transparent = Color(0x00000000)
    black = Color(0xFF000000)
    white = Color(0xFFFFFFFF)
    red = Color(0xFFF44336)
    pink = Color(0xFFE91E63)
    purple = Color(0xFF9C27B0)
    indigo = Color(0xFF3F51B5)
    blue = Color(0xFF2196F3)
    cyan = Color(0xFF00BCD4)
    teal = Color(0xFF009688)
    green = Color(0xFF4CAF50)
    yellow = Color(0xFFFFEB3B)
    amber = Color(0xFFFFC107)
    orange = Color(0xFFFF9800)
    brown = Color(0xFF795548)
    grey = Color(0xFF9E9E9E)

    @classmethod
    def names(cls) -> list[str]:
        """All palette names, sorted."""
        return sorted(
            name for name, value in vars(cls).items() if isinstance(value, Color)
        )

    @classmethod
    def lookup(cls, name: str) -> Color | None:
        """Find a palette color by name; ``gray`` is accepted for ``grey``."""
        key = name.strip().lower()
        if key == "gray":
            key = "grey"
        value = vars(cls).get(key)
        return value if isinstance(value, Color) else None
