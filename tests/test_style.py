import pytest

from saba.dom import Document, Element, Node, Text
from saba.errors import UnexpectedInputError
from saba.style import (
    Color,
    ComputedStyle,
    DisplayType,
    FontSize,
    TextDecoration,
)

COLOR_NAMES = [
    "black",
    "silver",
    "gray",
    "white",
    "maroon",
    "red",
    "purple",
    "fuchsia",
    "green",
    "lime",
    "olive",
    "yellow",
    "navy",
    "blue",
    "teal",
    "aqua",
    "orange",
    "lightgray",
]


def test_from_name_red():
    assert Color.from_name("red") == Color("red", "#ff0000")


def test_from_code_orange():
    assert Color.from_code("#ffa500").name == "orange"


@pytest.mark.parametrize("name", COLOR_NAMES)
def test_name_code_round_trip(name):
    color = Color.from_name(name)
    assert Color.from_code(color.code) == color
    assert color.code_u32() == int(color.code[1:], 16)


def test_from_name_unknown():
    with pytest.raises(UnexpectedInputError):
        Color.from_name("rebeccapurple")


@pytest.mark.parametrize("code", ["ff0000", "#fff", "#ff00000", "#123456"])
def test_from_code_invalid(code):
    with pytest.raises(UnexpectedInputError):
        Color.from_code(code)


def test_white_and_black():
    assert Color.white() == Color.from_name("white")
    assert Color.black() == Color.from_code("#000000")
    assert Color.white().code_u32() == 0xFFFFFF
    assert Color.black().code_u32() == 0


@pytest.mark.parametrize(
    "text,expected",
    [
        ("block", DisplayType.BLOCK),
        ("inline", DisplayType.INLINE),
        ("none", DisplayType.DISPLAY_NONE),
    ],
)
def test_display_from_str(text, expected):
    assert DisplayType.from_str(text) is expected


def test_display_from_str_invalid():
    with pytest.raises(UnexpectedInputError):
        DisplayType.from_str("flex")


def test_defaults_for_elements():
    h1 = Node(Element("h1", []))
    h2 = Node(Element("h2", []))
    a = Node(Element("a", []))
    assert FontSize.default_for(h1) is FontSize.XX_LARGE
    assert FontSize.default_for(h2) is FontSize.X_LARGE
    assert FontSize.default_for(a) is FontSize.MEDIUM
    assert DisplayType.default_for(h1) is DisplayType.BLOCK
    assert DisplayType.default_for(a) is DisplayType.INLINE
    assert TextDecoration.default_for(a) is TextDecoration.UNDERLINE
    assert TextDecoration.default_for(h1) is TextDecoration.NONE


def test_defaults_for_document_and_text():
    document = Node(Document())
    text = Node(Text("t"))
    assert DisplayType.default_for(document) is DisplayType.BLOCK
    assert DisplayType.default_for(text) is DisplayType.INLINE
    assert FontSize.default_for(text) is FontSize.MEDIUM
    assert TextDecoration.default_for(text) is TextDecoration.NONE


def test_defaulting_without_parent():
    style = ComputedStyle()
    style.defaulting(Node(Element("p", [])), None)
    assert style == ComputedStyle(
        background_color=Color.white(),
        color=Color.black(),
        display=DisplayType.BLOCK,
        font_size=FontSize.MEDIUM,
        text_decoration=TextDecoration.NONE,
        height=0.0,
        width=0.0,
    )


def test_defaulting_inherits_non_initial_values():
    parent_node = Node(Element("h1", []))
    parent = ComputedStyle(color=Color.from_name("red"))
    parent.defaulting(parent_node, None)

    child = ComputedStyle()
    child.defaulting(Node(Text("t")), parent)
    assert child.color == Color.from_name("red")
    assert child.font_size is FontSize.XX_LARGE
    assert child.background_color == Color.white()
    assert child.display is DisplayType.INLINE


def test_defaulting_keeps_explicit_values():
    parent = ComputedStyle(
        color=Color.from_name("red"),
        background_color=Color.from_name("blue"),
    )
    parent.defaulting(Node(Element("a", [])), None)

    child = ComputedStyle(color=Color.from_name("green"))
    child.defaulting(Node(Element("p", [])), parent)
    assert child.color == Color.from_name("green")
    assert child.background_color == Color.from_name("blue")
    assert child.text_decoration is TextDecoration.UNDERLINE
    assert child.display is DisplayType.BLOCK