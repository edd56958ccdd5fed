"""Computed CSS styles and the values they hold."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from saba.dom import Document, Element, ElementKind, Node, Text
from saba.errors import UnexpectedInputError

_NAMED_COLORS = {
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
_COLOR_NAMES = {code: name for name, code in _NAMED_COLORS.items()}


@dataclass(frozen=True)
class Color:
    """A colour with its ``#rrggbb`` code and, when known, its name."""

    name: Optional[str]
    code: str

    @classmethod
    def from_name(cls, name: str) -> "Color":
        """Return the colour for a CSS colour keyword.

        Raises UnexpectedInputError for unsupported names.
        """
        try:
            code = _NAMED_COLORS[name]
        except KeyError:
            raise UnexpectedInputError(
                f"color name {name!r} is not supported yet"
            ) from None
        return cls(name, code)

    @classmethod
    def from_code(cls, code: str) -> "Color":
        """Return the colour for a ``#rrggbb`` code.

        Raises UnexpectedInputError for malformed or unsupported codes.
        """
        if not code.startswith("#") or len(code) != 7:
            raise UnexpectedInputError(f"invalid color code {code}")
        try:
            name = _COLOR_NAMES[code]
        except KeyError:
            raise UnexpectedInputError(
                f"color code {code!r} is not supported yet"
            ) from None
        return cls(name, code)

    @classmethod
    def white(cls) -> "Color":
        return cls("white", "#ffffff")

    @classmethod
    def black(cls) -> "Color":
        return cls("black", "#000000")

    def code_u32(self) -> int:
        """The colour code as an integer 0xRRGGBB."""
        return int(self.code.lstrip("#"), 16)


def _element_kind(node: Node) -> Optional[ElementKind]:
    return node.kind.kind if isinstance(node.kind, Element) else None


class FontSize(Enum):
    """Absolute font sizes."""

    MEDIUM = "medium"
    X_LARGE = "x-large"
    XX_LARGE = "xx-large"

    @classmethod
    def default_for(cls, node: Node) -> "FontSize":
        kind = _element_kind(node)
        if kind is ElementKind.H1:
            return cls.XX_LARGE
        if kind is ElementKind.H2:
            return cls.X_LARGE
        return cls.MEDIUM


class DisplayType(Enum):
    """Values of the ``display`` property."""

    BLOCK = "block"
    INLINE = "inline"
    DISPLAY_NONE = "none"

    @classmethod
    def default_for(cls, node: Node) -> "DisplayType":
        kind = node.kind
        if isinstance(kind, Document):
            return cls.BLOCK
        if isinstance(kind, Element) and kind.is_block_element():
            return cls.BLOCK
        return cls.INLINE

    @classmethod
    def from_str(cls, s: str) -> "DisplayType":
        """Parse a ``display`` value.

        Raises UnexpectedInputError for unsupported values.
        """
        try:
            return cls(s)
        except ValueError:
            raise UnexpectedInputError(
                f"display {s!r} is not supported yet"
            ) from None


class TextDecoration(Enum):
    """Values of the ``text-decoration`` property."""

    NONE = "none"
    UNDERLINE = "underline"

    @classmethod
    def default_for(cls, node: Node) -> "TextDecoration":
        if _element_kind(node) is ElementKind.A:
            return cls.UNDERLINE
        return cls.NONE


@dataclass
class ComputedStyle:
    """The style of one node; unset properties are None until defaulted."""

    background_color: Optional[Color] = None
    color: Optional[Color] = None
    display: Optional[DisplayType] = None
    font_size: Optional[FontSize] = None
    text_decoration: Optional[TextDecoration] = None
    height: Optional[float] = None
    width: Optional[float] = None

    def defaulting(
        self, node: Node, parent_style: Optional["ComputedStyle"]
    ) -> None:
        """Fill unset properties by inheritance from the parent, then defaults.

        A parent value is inherited only when it differs from the initial value.
        """
        if parent_style is not None:
            if (
                self.background_color is None
                and parent_style.background_color != Color.white()
            ):
                self.background_color = parent_style.background_color
            if self.color is None and parent_style.color != Color.black():
                self.color = parent_style.color
            if self.font_size is None and parent_style.font_size != FontSize.MEDIUM:
                self.font_size = parent_style.font_size
            if (
                self.text_decoration is None
                and parent_style.text_decoration != TextDecoration.NONE
            ):
                self.text_decoration = parent_style.text_decoration

        if self.background_color is None:
            self.background_color = Color.white()
        if self.color is None:
            self.color = Color.black()
        if self.display is None:
            self.display = DisplayType.default_for(node)
        if self.font_size is None:
            self.font_size = FontSize.default_for(node)
        if self.text_decoration is None:
            self.text_decoration = TextDecoration.default_for(node)
        if self.height is None:
            self.height = 0.0
        if self.width is None:
            self.width = 0.0


__all__ = [
    "Color",
    "ComputedStyle",
    "DisplayType",
    "FontSize",
    "Text",
    "TextDecoration",
]