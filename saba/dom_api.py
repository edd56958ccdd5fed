"""Queries over a DOM tree."""

from __future__ import annotations

from typing import Iterator, Optional

from saba.dom import Element, ElementKind, Node, Text


def _walk(node: Optional[Node]) -> Iterator[Node]:
    """Pre-order walk of ``node``, its descendants and its following siblings."""
    stack = [node] if node is not None else []
    while stack:
        current = stack.pop()
        yield current
        if current.next_sibling is not None:
            stack.append(current.next_sibling)
        if current.first_child is not None:
            stack.append(current.first_child)


def get_element_by_id(node: Optional[Node], id_name: str) -> Optional[Node]:
    """Return the first element node whose ``id`` attribute is ``id_name``."""
    for current in _walk(node):
        element = current.get_element()
        if element is not None and any(
            attr.name == "id" and attr.value == id_name
            for attr in element.attributes
        ):
            return current
    return None


def get_target_element_node(
    node: Optional[Node], element_kind: ElementKind
) -> Optional[Node]:
    """Return the first node that is an element of ``element_kind``."""
    for current in _walk(node):
        if current.element_kind() == element_kind:
            return current
    return None


def _text_content_of(root: Node, element_kind: ElementKind) -> str:
    target = get_target_element_node(root, element_kind)
    if target is None or target.first_child is None:
        return ""
    kind = target.first_child.kind
    return kind.text if isinstance(kind, Text) else ""


def get_style_content(root: Node) -> str:
    """Return the text inside the first ``<style>`` element, or ''."""
    return _text_content_of(root, ElementKind.STYLE)


def get_js_content(root: Node) -> str:
    """Return the text inside the first ``<script>`` element, or ''."""
    return _text_content_of(root, ElementKind.SCRIPT)


def convert_dom_to_string(root: Optional[Node]) -> str:
    """Render the tree as indented lines, one node per line."""
    lines = ["\n"]
    stack = [(root, 0)] if root is not None else []
    while stack:
        node, depth = stack.pop()
        lines.append(f"{'  ' * depth}{node.kind!r}\n")
        if node.next_sibling is not None:
            stack.append((node.next_sibling, depth))
        if node.first_child is not None:
            stack.append((node.first_child, depth + 1))
    return "".join(lines)


__all__ = [
    "Element",
    "convert_dom_to_string",
    "get_element_by_id",
    "get_js_content",
    "get_style_content",
    "get_target_element_node",
]