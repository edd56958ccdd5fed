"""Layout tree objects and the display items they paint."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Union

from saba.constants import (
    CHAR_HEIGHT_WITH_PADDING,
    CHAR_WIDTH,
    CONTENT_AREA_WIDTH,
    WINDOW_PADDING,
    WINDOW_WIDTH,
)
from saba.dom import Document, Element, Node, NodeKind, Text
from saba.style import ComputedStyle, DisplayType, FontSize

_LINE_LIMIT = WINDOW_WIDTH + WINDOW_PADDING

_FONT_RATIO = {
    FontSize.MEDIUM: 1,
    FontSize.X_LARGE: 2,
    FontSize.XX_LARGE: 3,
}


@dataclass(frozen=True)
class LayoutPoint:
    """A position in the content area."""

    x: int = 0
    y: int = 0


@dataclass(frozen=True)
class LayoutSize:
    """The width and height of a laid-out box."""

    width: int = 0
    height: int = 0


@dataclass(frozen=True)
class RectItem:
    """A rectangle to draw."""

    style: ComputedStyle
    layout_point: LayoutPoint
    layout_size: LayoutSize


@dataclass(frozen=True)
class TextItem:
    """A line of text to draw."""

    text: str
    style: ComputedStyle
    layout_point: LayoutPoint


DisplayItem = Union[RectItem, TextItem]


def find_index_for_line_break(line: str, max_index: int) -> int:
    """Index of the last space before ``max_index``, or ``max_index`` if none."""
    index = line.rfind(" ", 0, max_index)
    return max_index if index == -1 else index


def split_text(line: str, char_width: int) -> list[str]:
    """Break ``line`` into pieces that fit the window width."""
    result: list[str] = []
    while len(line) * char_width > _LINE_LIMIT:
        index = find_index_for_line_break(line, _LINE_LIMIT // char_width)
        result.append(line[:index])
        line = line[index:].strip()
    result.append(line)
    return result


class LayoutObjectKind(Enum):
    """How a layout object is laid out."""

    BLOCK = "block"
    INLINE = "inline"
    TEXT = "text"


class LayoutObject:
    """A box in the layout tree, tied to one DOM node."""

    def __init__(self, node: Node, parent: Optional["LayoutObject"]) -> None:
        self.kind = LayoutObjectKind.BLOCK
        self.node = node
        self.first_child: Optional[LayoutObject] = None
        self.next_sibling: Optional[LayoutObject] = None
        self.parent = parent
        self.style = ComputedStyle()
        self.point = LayoutPoint(0, 0)
        self.size = LayoutSize(0, 0)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LayoutObject):
            return NotImplemented
        return self.kind == other.kind

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"LayoutObject(kind={self.kind.value!r}, point={self.point!r}, "
            f"size={self.size!r})"
        )

    @property
    def node_kind(self) -> NodeKind:
        return self.node.kind

    def _children(self) -> Iterator["LayoutObject"]:
        child = self.first_child
        while child is not None:
            yield child
            child = child.next_sibling

    def _font_ratio(self) -> int:
        return _FONT_RATIO[self.style.font_size]

    def paint(self) -> list[DisplayItem]:
        """Return the display items that draw this object."""
        if self.style.display == DisplayType.DISPLAY_NONE:
            return []

        kind = self.node_kind
        if self.kind is LayoutObjectKind.BLOCK:
            if isinstance(kind, Element):
                return [RectItem(copy.copy(self.style), self.point, self.size)]
        elif self.kind is LayoutObjectKind.TEXT:
            if isinstance(kind, Text):
                plain_text = " ".join(
                    word for word in kind.text.replace("\n", " ").split(" ") if word
                )
                lines = split_text(plain_text, CHAR_WIDTH * self._font_ratio())
                return [
                    TextItem(
                        line,
                        copy.copy(self.style),
                        LayoutPoint(
                            self.point.x,
                            self.point.y + CHAR_HEIGHT_WITH_PADDING * i,
                        ),
                    )
                    for i, line in enumerate(lines)
                ]
        return []

    def compute_size(self, parent_size: LayoutSize) -> None:
        """Compute this object's size from its parent's and its children's."""
        if self.kind is LayoutObjectKind.BLOCK:
            height = 0
            previous_kind = LayoutObjectKind.BLOCK
            for child in self._children():
                if (
                    previous_kind is LayoutObjectKind.BLOCK
                    or child.kind is LayoutObjectKind.BLOCK
                ):
                    height += child.size.height
                previous_kind = child.kind
            self.size = LayoutSize(parent_size.width, height)
        elif self.kind is LayoutObjectKind.INLINE:
            width = sum(child.size.width for child in self._children())
            height = sum(child.size.height for child in self._children())
            self.size = LayoutSize(width, height)
        else:
            kind = self.node_kind
            if not isinstance(kind, Text):
                self.size = LayoutSize(0, 0)
                return
            ratio = self._font_ratio()
            width = CHAR_WIDTH * ratio * len(kind.text)
            if width > CONTENT_AREA_WIDTH:
                line_num = -(-width // CONTENT_AREA_WIDTH)
                self.size = LayoutSize(
                    CONTENT_AREA_WIDTH, CHAR_HEIGHT_WITH_PADDING * ratio * line_num
                )
            else:
                self.size = LayoutSize(width, CHAR_HEIGHT_WITH_PADDING * ratio)

    def compute_position(
        self,
        parent_point: LayoutPoint,
        previous_sibling_kind: LayoutObjectKind,
        previous_sibling_point: Optional[LayoutPoint],
        previous_sibling_size: Optional[LayoutSize],
    ) -> None:
        """Place this object relative to its parent and previous sibling."""
        has_previous = (
            previous_sibling_point is not None and previous_sibling_size is not None
        )
        if (
            self.kind is LayoutObjectKind.BLOCK
            or previous_sibling_kind is LayoutObjectKind.BLOCK
        ):
            if has_previous:
                y = previous_sibling_point.y + previous_sibling_size.height
            else:
                y = parent_point.y
            self.point = LayoutPoint(parent_point.x, y)
        elif (
            self.kind is LayoutObjectKind.INLINE
            and previous_sibling_kind is LayoutObjectKind.INLINE
            and has_previous
        ):
            self.point = LayoutPoint(
                previous_sibling_point.x + previous_sibling_size.width,
                previous_sibling_point.y,
            )
        else:
            self.point = LayoutPoint(parent_point.x, parent_point.y)

    def defaulting_style(
        self, node: Node, parent_style: Optional[ComputedStyle]
    ) -> None:
        """Fill unset style properties by inheritance and defaults."""
        self.style.defaulting(node, parent_style)

    def update_kind(self) -> None:
        """Set the layout kind from the node and its final display value.

        Raises ValueError for documents and for elements not displayed.
        """
        kind = self.node_kind
        if isinstance(kind, Document):
            raise ValueError("should not create a layout object for a Document node")
        if isinstance(kind, Text):
            self.kind = LayoutObjectKind.TEXT
            return
        display = self.style.display
        if display is DisplayType.BLOCK:
            self.kind = LayoutObjectKind.BLOCK
        elif display is DisplayType.INLINE:
            self.kind = LayoutObjectKind.INLINE
        else:
            raise ValueError("should not create a layout object for display:none")


__all__ = [
    "DisplayItem",
    "LayoutObject",
    "LayoutObjectKind",
    "LayoutPoint",
    "LayoutSize",
    "RectItem",
    "TextItem",
    "find_index_for_line_break",
    "split_text",
]