"""Tests for the Color primitive and palette."""

import pydantic
import pytest

from calview.exceptions import ColorParseError, StyleError
from calview.models.color import Color, Colors


def test_color_channels():
    """Test ARGB channel accessors."""
    color = Color(0x802196F3)
    assert color.alpha == 0x80
    assert color.red == 0x21
    assert color.green == 0x96
    assert color.blue == 0xF3
    assert color.opacity == pytest.approx(0x80 / 255)


def test_color_keyword_and_positional_construction():
    """Test Color accepts value positionally or by keyword."""
    assert Color(0xFF2196F3) == Color(value=0xFF2196F3)


def test_color_from_argb_and_rgbo():
    """Test channel constructors."""
    assert Color.from_argb(255, 0x21, 0x96, 0xF3) == Colors.blue
    assert Color.from_rgbo(0x21, 0x96, 0xF3, 1.0) == Colors.blue
    assert Color.from_rgbo(0, 0, 0, 0.0) == Colors.transparent


def test_color_parse_hex_forms():
    """Test supported hex notations."""
    assert Color.parse("#2196F3") == Colors.blue
    assert Color.parse("#ff2196f3") == Colors.blue
    assert Color.parse("0xFF2196F3") == Colors.blue
    assert Color.parse("#abc").value == 0xFFAABBCC
    assert Color.parse("  #000000  ") == Colors.black


def test_color_parse_palette_names():
    """Test palette names are case-insensitive and gray is an alias."""
    assert Color.parse("Blue") == Colors.blue
    assert Color.parse("gray") == Colors.grey
    assert Color.parse("GREY") == Colors.grey


@pytest.mark.parametrize("text", ["", "#12345", "#1234567890", "not-a-color", "names"])
def test_color_parse_invalid(text):
    """Test invalid color text raises ColorParseError."""
    with pytest.raises(ColorParseError):
        Color.parse(text)


def test_color_parse_error_is_value_error():
    """ColorParseError doubles as ValueError so pydantic validators wrap it."""
    with pytest.raises(ValueError):
        Color.parse("bogus")
    with pytest.raises(StyleError):
        Color.parse("bogus")


def test_color_value_range():
    """Test values outside 32 bits are rejected."""
    with pytest.raises(pydantic.ValidationError):
        Color(0x1_0000_0000)
    with pytest.raises(pydantic.ValidationError):
        Color(-1)


def test_color_is_immutable():
    """Test assignment on a frozen Color fails."""
    color = Color(0xFF000000)
    with pytest.raises(pydantic.ValidationError):
        color.value = 0


def test_color_formatting():
    """Test string and hex output."""
    assert str(Colors.blue) == "Color(0xff2196f3)"
    assert Colors.blue.to_hex() == "#FF2196F3"
    assert str(Colors.transparent) == "Color(0x00000000)"


def test_color_with_opacity():
    """Test alpha replacement keeps RGB channels."""
    half = Colors.blue.with_opacity(0.5)
    assert half.alpha == 128
    assert (half.red, half.green, half.blue) == (0x21, 0x96, 0xF3)
    with pytest.raises(ValueError):
        Colors.blue.with_opacity(1.5)


def test_color_hash_consistent_with_equality():
    """Test equal colors hash equal."""
    assert hash(Color(0xFF2196F3)) == hash(Colors.blue)
    assert len({Color(0xFF2196F3), Colors.blue}) == 1


def test_colors_names():
    """Test palette name listing."""
    names = Colors.names()
    assert "blue" in names
    assert "transparent" in names
    assert names == sorted(names)
    assert Colors.lookup("missing") is None
