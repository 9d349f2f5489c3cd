import pytest

from saba.computed_style import (
    Color,
    ComputedStyle,
    DisplayType,
    FontSize,
    StyleError,
    TextDecoration,
)

NAMES = [
    "black", "silver", "gray", "white", "maroon", "red", "purple", "fuchsia",
    "green", "lime", "olive", "yellow", "navy", "blue", "teal", "aqua",
    "orange", "lightgray",
]


def _defaulted(parent=None, **kwargs):
    style = ComputedStyle(**kwargs)
    style.defaulting(parent, DisplayType.BLOCK, FontSize.MEDIUM, TextDecoration.NONE)
    return style


def test_from_name_pins_code():
    assert Color.from_name("red").code == "#ff0000"
    assert Color.from_name("orange").code == "#ffa500"


@pytest.mark.parametrize("name", NAMES)
def test_name_code_round_trip(name):
    color = Color.from_name(name)
    assert Color.from_code(color.code) == color
    assert color.name == name


def test_white_and_black_match_named():
    assert Color.white() == Color.from_name("white")
    assert Color.black() == Color.from_code("#000000")


def test_code_u32():
    assert Color.white().code_u32() == 0xFFFFFF
    assert Color.black().code_u32() == 0
    assert Color.from_name("red").code_u32() == int("ff0000", 16)


def test_unknown_name_raises():
    with pytest.raises(StyleError):
        Color.from_name("pink")


@pytest.mark.parametrize("code", ["ff0000", "#fff", "#ff00000", ""])
def test_invalid_code_raises(code):
    with pytest.raises(StyleError, match="invalid color code"):
        Color.from_code(code)


def test_unsupported_code_raises():
    with pytest.raises(StyleError, match="not supported"):
        Color.from_code("#123456")


def test_display_from_str():
    assert DisplayType.from_str("block") is DisplayType.BLOCK
    assert DisplayType.from_str("inline") is DisplayType.INLINE
    assert DisplayType.from_str("none") is DisplayType.DISPLAY_NONE
    with pytest.raises(StyleError):
        DisplayType.from_str("flex")


def test_defaulting_without_parent():
    style = ComputedStyle()
    style.defaulting(None, DisplayType.INLINE, FontSize.XXLARGE, TextDecoration.UNDERLINE)
    assert style.background_color == Color.white()
    assert style.color == Color.black()
    assert style.display is DisplayType.INLINE
    assert style.font_size is FontSize.XXLARGE
    assert style.text_decoration is TextDecoration.UNDERLINE
    assert style.height == 0.0
    assert style.width == 0.0


def test_defaulting_inherits_non_default_parent_values():
    parent = _defaulted(
        color=Color.from_name("red"),
        background_color=Color.from_name("blue"),
        font_size=FontSize.XLARGE,
        text_decoration=TextDecoration.UNDERLINE,
    )
    child = _defaulted(parent)
    assert child.color == Color.from_name("red")
    assert child.background_color == Color.from_name("blue")
    assert child.font_size is FontSize.XLARGE
    assert child.text_decoration is TextDecoration.UNDERLINE


def test_defaulting_uses_node_defaults_when_parent_is_plain():
    parent = _defaulted()
    child = ComputedStyle()
    child.defaulting(parent, DisplayType.BLOCK, FontSize.XXLARGE, TextDecoration.UNDERLINE)
    assert child.font_size is FontSize.XXLARGE
    assert child.text_decoration is TextDecoration.UNDERLINE
    assert child.color == Color.black()


def test_defaulting_keeps_explicit_values():
    parent = _defaulted(color=Color.from_name("red"))
    child = _defaulted(parent, color=Color.from_name("green"), display=DisplayType.DISPLAY_NONE)
    assert child.color == Color.from_name("green")
    assert child.display is DisplayType.DISPLAY_NONE


def test_display_is_not_inherited():
    parent = _defaulted(display=DisplayType.DISPLAY_NONE)
    child = _defaulted(parent)
    assert child.display is DisplayType.BLOCK