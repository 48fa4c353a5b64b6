"""Compact and indented HTML rendering of node trees."""

from __future__ import annotations

import html
from typing import Any, List

from .errors import InvalidNodeError
from .nodes import Comment, Element, Empty, Node, NodeList, Raw, Text
from .parser import ParsedElement, flatten_children, parse_element

INDENT = "  "


def escape_text(value: Any) -> str:
    return html.escape(str(value))


def _render_attrs(element: ParsedElement) -> str:
    if not element.attributes:
        return ""
    parts = [f'{name}="{html.escape(value, quote=True)}"' for name, value in element.attributes]
    return " " + " ".join(parts)


def _open_tag(element: ParsedElement) -> str:
    return f"<{element.tag}{_render_attrs(element)}>"


def _close_tag(element: ParsedElement) -> str:
    return f"</{element.tag}>"


def _nested_list_error(node: NodeList) -> InvalidNodeError:
    return InvalidNodeError(
        f"List nested two levels deep: {list(node.items)!r}; "
        "lists are flattened one level only, wrap it in an element"
    )


def _render_leaf(node: Node) -> str:
    if isinstance(node, Text):
        return escape_text(node.value)
    if isinstance(node, Raw):
        # Raw HTML insertion assumes content is trusted.
        return node.html
    if isinstance(node, Comment):
        return f"<!-- {node.text} -->"
    if isinstance(node, NodeList):
        raise _nested_list_error(node)
    return ""


def _render_compact(node: Node, parts: List[str]) -> None:
    if isinstance(node, Empty):
        return
    if not isinstance(node, Element):
        parts.append(_render_leaf(node))
        return

    element = parse_element(node)
    parts.append(_open_tag(element))
    if element.void:
        return
    for child in element.children:
        _render_compact(child, parts)
    parts.append(_close_tag(element))


def _render_lines(node: Node, depth: int, lines: List[str]) -> None:
    pad = INDENT * depth
    if isinstance(node, Empty):
        return
    if not isinstance(node, Element):
        lines.append(pad + _render_leaf(node))
        return

    element = parse_element(node)
    if element.void:
        lines.append(pad + _open_tag(element))
        return

    if not any(isinstance(child, Element) for child in element.children):
        inline = "".join(_render_leaf(child) for child in element.children)
        lines.append(pad + _open_tag(element) + inline + _close_tag(element))
        return

    lines.append(pad + _open_tag(element))
    for child in element.children:
        _render_lines(child, depth + 1, lines)
    lines.append(pad + _close_tag(element))


def render(node: Any) -> str:
    """Render ``node`` as compact HTML with no whitespace between tags.

    A top-level list renders each of its items as siblings.
    """
    parts: List[str] = []
    for top in flatten_children([node]):
        _render_compact(top, parts)
    return "".join(parts)


def render_pretty(node: Any) -> str:
    """Render ``node`` as HTML indented by two spaces per nesting level.

    Elements holding only text, raw HTML or comments stay on one line.
    Elements with element children put each child on its own line. The
    result has no trailing newline.
    """
    lines: List[str] = []
    for top in flatten_children([node]):
        _render_lines(top, 0, lines)
    return "\n".join(lines)


__all__ = ["INDENT", "escape_text", "render", "render_pretty"]
