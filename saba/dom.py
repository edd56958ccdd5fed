"""Document object model: attributes, elements, nodes and the window."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional, Union

from saba.errors import UnexpectedInputError


@dataclass
class Attribute:
    """An attribute of an HTML element, built up one character at a time."""

    name: str = ""
    value: str = ""

    def add_char(self, c: str, is_name: bool) -> None:
        """Append ``c`` to the name when ``is_name`` is true, else to the value."""
        if is_name:
            self.name += c
        else:
            self.value += c


class ElementKind(Enum):
    """The HTML elements the browser understands."""

    HTML = "html"
    HEAD = "head"
    STYLE = "style"
    SCRIPT = "script"
    BODY = "body"
    P = "p"
    H1 = "h1"
    H2 = "h2"
    A = "a"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> "ElementKind":
        """Return the kind for a tag name.

        Raises UnexpectedInputError for unknown tag names.
        """
        try:
            return cls(name)
        except ValueError:
            raise UnexpectedInputError(
                f"unimplemented element name {name!r}"
            ) from None


_BLOCK_ELEMENTS = frozenset(
    {ElementKind.BODY, ElementKind.H1, ElementKind.H2, ElementKind.P}
)


class Element:
    """An HTML element with its attributes."""

    __slots__ = ("kind", "attributes")

    def __init__(self, element_name: str, attributes: list[Attribute]) -> None:
        self.kind = ElementKind.from_name(element_name)
        self.attributes = list(attributes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Element):
            return NotImplemented
        return self.kind == other.kind and self.attributes == other.attributes

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Element(kind={self.kind.value!r}, attributes={self.attributes!r})"

    def get_attribute(self, name: str) -> Optional[str]:
        """Return the value of the first attribute called ``name``, if any."""
        for attr in self.attributes:
            if attr.name == name:
                return attr.value
        return None

    def is_block_element(self) -> bool:
        """Whether the element is displayed as a block by default."""
        return self.kind in _BLOCK_ELEMENTS


@dataclass(frozen=True)
class Document:
    """The kind of the root node of a DOM tree."""


@dataclass
class Text:
    """The kind of a text node, holding its characters."""

    text: str = ""


NodeKind = Union[Document, Element, Text]


def same_kind(a: NodeKind, b: NodeKind) -> bool:
    """Compare node kinds: elements by element kind, others by type only."""
    if isinstance(a, Element) and isinstance(b, Element):
        return a.kind == b.kind
    return type(a) is type(b)


@dataclass(eq=False)
class Node:
    """A node of the DOM tree, linked to its parent, children and siblings."""

    kind: NodeKind
    window: Optional["Window"] = field(default=None, repr=False)
    parent: Optional["Node"] = field(default=None, repr=False)
    first_child: Optional["Node"] = field(default=None, repr=False)
    last_child: Optional["Node"] = field(default=None, repr=False)
    previous_sibling: Optional["Node"] = field(default=None, repr=False)
    next_sibling: Optional["Node"] = field(default=None, repr=False)

    def __init__(self, kind: NodeKind) -> None:
        self.kind = kind
        self.window = None
        self.parent = None
        self.first_child = None
        self.last_child = None
        self.previous_sibling = None
        self.next_sibling = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return same_kind(self.kind, other.kind)

    __hash__ = None  # type: ignore[assignment]

    def get_element(self) -> Optional[Element]:
        """The element this node holds, or None for documents and text."""
        return self.kind if isinstance(self.kind, Element) else None

    def element_kind(self) -> Optional[ElementKind]:
        """The element kind of this node, or None for documents and text."""
        element = self.get_element()
        return element.kind if element is not None else None

    def children(self) -> Iterator["Node"]:
        """Iterate over the direct children, first to last."""
        child = self.first_child
        while child is not None:
            yield child
            child = child.next_sibling


class Window:
    """A browsing window owning a document."""

    def __init__(self) -> None:
        self.document = Node(Document())
        self.document.window = self