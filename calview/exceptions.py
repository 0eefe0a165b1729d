"""Exception hierarchy for style operations."""


class StyleError(Exception):
    """Base exception for style operations."""

    pass


class ColorParseError(StyleError, ValueError):
    """Color text could not be parsed (bad hex or unknown palette name)."""

    pass


class ValidationError(StyleError):
    """Pydantic validation error."""

    pass
