"""Computed CSS style of a layout node: colours, display, font size and decoration."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional

_COLOR_CODES = {
    "black": "#000000",
    "silver": "#c0c0c0",
    "gray": "#808080",
    "white": "#ffffff",
    "maroon": "#800000",
    "red": "#ff0000",
    "purple": "#800080",
    "fuchsia": "#ff00ff",
    "green": "#008000",
    "lime": "#00ff00",
    "olive": "#808000",
    "yellow": "#ffff00",
    "navy": "#000080",
    "blue": "#0000ff",
    "teal": "#008080",
    "aqua": "#00ffff",
    "orange": "#ffa500",
    "lightgray": "#d3d3d3",
}
_COLOR_NAMES = {code: name for name, code in _COLOR_CODES.items()}


class StyleError(ValueError):
    """Raised when a CSS value is invalid or not supported."""


@dataclass(frozen=True)
class Color:
    """A colour identified by its ``#rrggbb`` code and, when known, its name."""

    name: Optional[str]
    code: str

    @classmethod
    def from_name(cls, name: str) -> Color:
        """Build a colour from one of the supported CSS colour names."""
        try:
            code = _COLOR_CODES[name]
        except KeyError:
            raise StyleError(f"color name {name!r} is not supported yet") from None
        return cls(name, code)

    @classmethod
    def from_code(cls, code: str) -> Color:
        """Build a colour from a ``#rrggbb`` code of a supported colour."""
        if not code.startswith("#") or len(code) != 7:
            raise StyleError(f"invalid color code {code!r}")
        try:
            name = _COLOR_NAMES[code]
        except KeyError:
            raise StyleError(f"color code {code!r} is not supported yet") from None
        return cls(name, code)

    @classmethod
    def white(cls) -> Color:
        return cls("white", "#ffffff")

    @classmethod
    def black(cls) -> Color:
        return cls("black", "#000000")

    def code_u32(self) -> int:
        """Return the colour as a 0xRRGGBB integer."""
        return int(self.code.lstrip("#"), 16)


class FontSize(enum.Enum):
    MEDIUM = enum.auto()
    XLARGE = enum.auto()
    XXLARGE = enum.auto()


class DisplayType(enum.Enum):
    BLOCK = enum.auto()
    INLINE = enum.auto()
    DISPLAY_NONE = enum.auto()

    @classmethod
    def from_str(cls, s: str) -> DisplayType:
        """Parse the value of a CSS ``display`` declaration."""
        mapping = {"block": cls.BLOCK, "inline": cls.INLINE, "none": cls.DISPLAY_NONE}
        try:
            return mapping[s]
        except KeyError:
            raise StyleError(f"display type {s!r} is not supported yet") from None


class TextDecoration(enum.Enum):
    NONE = enum.auto()
    UNDERLINE = enum.auto()


@dataclass
class ComputedStyle:
    """Style properties of one node; unset properties are ``None`` until defaulted."""

    background_color: Optional[Color] = None
    color: Optional[Color] = None
    display: Optional[DisplayType] = None
    font_size: Optional[FontSize] = None
    text_decoration: Optional[TextDecoration] = None
    height: Optional[float] = None
    width: Optional[float] = None

    def defaulting(
        self,
        parent_style: Optional[ComputedStyle],
        display: DisplayType,
        font_size: FontSize,
        text_decoration: TextDecoration,
    ) -> None:
        """Fill unset properties by inheritance from the parent, then with defaults.

        ``display``, ``font_size`` and ``text_decoration`` are the node's own
        default values, used when nothing was set or inherited.
        """
        if parent_style is not None:
            if self.background_color is None and parent_style.background_color != Color.white():
                self.background_color = parent_style.background_color
            if self.color is None and parent_style.color != Color.black():
                self.color = parent_style.color
            if self.font_size is None and parent_style.font_size is not FontSize.MEDIUM:
                self.font_size = parent_style.font_size
            if (
                self.text_decoration is None
                and parent_style.text_decoration is not TextDecoration.NONE
            ):
                self.text_decoration = parent_style.text_decoration

        if self.background_color is None:
            self.background_color = Color.white()
        if self.color is None:
            self.color = Color.black()
        if self.display is None:
            self.display = display
        if self.font_size is None:
            self.font_size = font_size
        if self.text_decoration is None:
            self.text_decoration = text_decoration
        if self.height is None:
            self.height = 0.0
        if self.width is None:
            self.width = 0.0